import random

import pytest
from helpers import EDGE_VALUES, assert_canonical, limbs, random_int

from wideint.arith.addsub import (
    absolute,
    add,
    decrement,
    increment,
    negate,
    subtract,
    with_sign,
)
from wideint.core.digits import DIGIT_MASK, SIGN_NEGATIVE, SIGN_NONNEGATIVE
from wideint.core.limbs import Limbs, to_int


class TestAdd:
    def test_carry_ripples_into_new_digit(self) -> None:
        result = add(limbs(DIGIT_MASK), limbs(1))
        assert result == Limbs(SIGN_NONNEGATIVE, [0, 1])

    def test_carry_into_sign_turns_minus_one_into_zero(self) -> None:
        result = add(limbs(-1), limbs(1))
        assert result.is_zero()

    def test_borrow_across_many_digits(self) -> None:
        result = add(limbs(1 << 96), limbs(-1))
        assert result == Limbs(
            SIGN_NONNEGATIVE, [DIGIT_MASK, DIGIT_MASK, DIGIT_MASK]
        )

    def test_two_negatives_extend_sign(self) -> None:
        result = add(limbs(-(1 << 63)), limbs(-(1 << 63)))
        assert to_int(result) == -(1 << 64)
        assert result.sign == SIGN_NEGATIVE

    def test_mixed_lengths(self) -> None:
        result = add(limbs(-5), limbs((1 << 100) + 3))
        assert to_int(result) == (1 << 100) - 2

    @pytest.mark.parametrize("a", EDGE_VALUES)
    @pytest.mark.parametrize("b", EDGE_VALUES)
    def test_edge_pairs_match_int(self, a: int, b: int) -> None:
        total = add(limbs(a), limbs(b))
        assert_canonical(total)
        assert to_int(total) == a + b
        difference = subtract(limbs(a), limbs(b))
        assert_canonical(difference)
        assert to_int(difference) == a - b

    def test_inputs_are_not_mutated(self) -> None:
        a = limbs(-(1 << 40))
        b = limbs(12345)
        add(a, b)
        subtract(a, b)
        assert to_int(a) == -(1 << 40)
        assert to_int(b) == 12345


class TestIdentities:
    @pytest.mark.parametrize("seed", range(10))
    def test_additive_identities(self, seed: int) -> None:
        rng = random.Random(seed)
        a = limbs(random_int(rng))
        b = limbs(random_int(rng))
        c = limbs(random_int(rng))
        assert add(a, negate(a)).is_zero()
        assert subtract(a, a).is_zero()
        assert add(add(a, b), c) == add(a, add(b, c))
        assert add(a, b) == add(b, a)


class TestUnary:
    @pytest.mark.parametrize("value", EDGE_VALUES)
    def test_negate(self, value: int) -> None:
        assert to_int(negate(limbs(value))) == -value

    def test_negate_zero_stays_nonnegative(self) -> None:
        assert negate(limbs(0)) == Limbs()

    @pytest.mark.parametrize("value", EDGE_VALUES)
    def test_absolute(self, value: int) -> None:
        result = absolute(limbs(value))
        assert to_int(result) == abs(value)
        assert not result.is_negative()

    def test_increment_and_decrement(self) -> None:
        assert to_int(increment(limbs(-1))) == 0
        assert to_int(increment(limbs(DIGIT_MASK))) == DIGIT_MASK + 1
        assert to_int(decrement(limbs(0))) == -1
        assert to_int(decrement(limbs(1 << 64))) == (1 << 64) - 1


class TestWithSign:
    def test_keeps_value_when_sign_matches(self) -> None:
        assert to_int(with_sign(limbs(42), SIGN_NONNEGATIVE)) == 42

    def test_negates_when_sign_differs(self) -> None:
        assert to_int(with_sign(limbs(42), SIGN_NEGATIVE)) == -42
        assert to_int(with_sign(limbs(-42), SIGN_NONNEGATIVE)) == 42

    def test_zero_cannot_become_negative(self) -> None:
        assert with_sign(limbs(0), SIGN_NEGATIVE) == Limbs()
