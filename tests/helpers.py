import random

from wideint.core.digits import DIGIT_BITS
from wideint.core.limbs import Limbs, from_int, to_int
from wideint.integer import BigInteger

EDGE_VALUES = [
    0,
    1,
    -1,
    2,
    -2,
    (1 << 31) - 1,
    -(1 << 31),
    (1 << 32) - 1,
    1 << 32,
    -(1 << 32),
    -(1 << 32) + 1,
    (1 << 64) - 1,
    -(1 << 64),
    (1 << 96) + 12345,
    -(1 << 127),
]


def random_int(rng: random.Random, max_digits: int = 4) -> int:
    """Random signed int spanning up to ``max_digits`` digit words."""
    bits = rng.randint(0, max_digits * DIGIT_BITS)
    value = rng.getrandbits(bits) if bits else 0
    # Bias toward runs of all-ones and all-zeros words.
    if rng.random() < 0.25 and bits >= DIGIT_BITS:
        value |= ((1 << DIGIT_BITS) - 1) << rng.randrange(0, bits, DIGIT_BITS)
    return -value if rng.random() < 0.5 else value


def big(value: int) -> BigInteger:
    return BigInteger(value)


def limbs(value: int) -> Limbs:
    return from_int(value)


def as_int(value: Limbs | BigInteger) -> int:
    if isinstance(value, BigInteger):
        return int(value)
    return to_int(value)


def trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """C-style division: quotient toward zero, remainder signed like a."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def assert_canonical(value: Limbs) -> None:
    assert value.sign in (0, (1 << DIGIT_BITS) - 1)
    assert all(0 <= d < (1 << DIGIT_BITS) for d in value.digits)
    if value.digits:
        assert value.digits[-1] != value.sign
