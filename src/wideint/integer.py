"""The public arbitrary-precision integer type."""

from __future__ import annotations

from typing import Any

from wideint.arith.addsub import (
    absolute,
    add,
    decrement,
    increment,
    negate,
    subtract,
)
from wideint.arith.bitwise import BitwiseOp, apply_bitwise, invert
from wideint.arith.compare import compare
from wideint.arith.decimal_strings import format_decimal, parse_decimal
from wideint.arith.divide import divmod_limbs
from wideint.arith.multiply import multiply
from wideint.arith.shift import shift_left, shift_right
from wideint.core.limbs import Limbs, from_digit, from_int, to_int


def _limbs_from_value(value: Any) -> Limbs:
    if isinstance(value, BigInteger):
        return value._limbs
    if isinstance(value, bool):
        raise TypeError("bool is not allowed as a BigInteger value")
    if isinstance(value, int):
        return from_int(value)
    if isinstance(value, str):
        return parse_decimal(value)
    raise TypeError(
        f"BigInteger() argument must be int, str or BigInteger, "
        f"not {type(value).__name__}"
    )


def _coerce(value: Any) -> Limbs | None:
    if isinstance(value, BigInteger):
        return value._limbs
    if isinstance(value, int) and not isinstance(value, bool):
        return from_int(value)
    return None


def _shift_count(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


class BigInteger:
    """Signed integer of unbounded width with truncating division.

    Instances are immutable; every operator returns a new value. ``/`` and
    ``%`` truncate toward zero like C integers, so the remainder takes the
    sign of the dividend. ``//`` is not provided.
    """

    __slots__ = ("_limbs",)

    _limbs: Limbs

    def __init__(self, value: int | str | BigInteger = 0) -> None:
        limbs = _limbs_from_value(value)
        # Share nothing with the source.
        self._limbs = limbs.copy() if isinstance(value, BigInteger) else limbs

    @classmethod
    def _wrap(cls, limbs: Limbs) -> BigInteger:
        obj = cls.__new__(cls)
        obj._limbs = limbs
        return obj

    @classmethod
    def from_digit(cls, word: int) -> BigInteger:
        return cls._wrap(from_digit(word))

    @classmethod
    def parse(cls, text: str) -> BigInteger:
        return cls._wrap(parse_decimal(text))

    @property
    def digits(self) -> tuple[int, ...]:
        return tuple(self._limbs.digits)

    @property
    def sign_digit(self) -> int:
        return self._limbs.sign

    def is_negative(self) -> bool:
        return self._limbs.is_negative()

    def increment(self) -> BigInteger:
        return self._wrap(increment(self._limbs))

    def decrement(self) -> BigInteger:
        return self._wrap(decrement(self._limbs))

    # Arithmetic

    def __add__(self, other: Any) -> BigInteger:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(add(self._limbs, rhs))

    def __radd__(self, other: Any) -> BigInteger:
        return self.__add__(other)

    def __sub__(self, other: Any) -> BigInteger:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(subtract(self._limbs, rhs))

    def __rsub__(self, other: Any) -> BigInteger:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return self._wrap(subtract(lhs, self._limbs))

    def __mul__(self, other: Any) -> BigInteger:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(multiply(self._limbs, rhs))

    def __rmul__(self, other: Any) -> BigInteger:
        return self.__mul__(other)

    def __divmod__(self, other: Any) -> tuple[BigInteger, BigInteger]:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        quotient, remainder = divmod_limbs(self._limbs, rhs)
        return self._wrap(quotient), self._wrap(remainder)

    def __rdivmod__(self, other: Any) -> tuple[BigInteger, BigInteger]:
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        quotient, remainder = divmod_limbs(lhs, self._limbs)
        return self._wrap(quotient), self._wrap(remainder)

    def __truediv__(self, other: Any) -> BigInteger:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __rtruediv__(self, other: Any) -> BigInteger:
        result = self.__rdivmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __mod__(self, other: Any) -> BigInteger:
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __rmod__(self, other: Any) -> BigInteger:
        result = self.__rdivmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __neg__(self) -> BigInteger:
        return self._wrap(negate(self._limbs))

    def __pos__(self) -> BigInteger:
        return self._wrap(self._limbs.copy())

    def __abs__(self) -> BigInteger:
        return self._wrap(absolute(self._limbs))

    # Bitwise

    def _bitwise(self, other: Any, op: BitwiseOp) -> BigInteger:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(apply_bitwise(self._limbs, rhs, op))

    def __and__(self, other: Any) -> BigInteger:
        return self._bitwise(other, BitwiseOp.AND)

    def __or__(self, other: Any) -> BigInteger:
        return self._bitwise(other, BitwiseOp.OR)

    def __xor__(self, other: Any) -> BigInteger:
        return self._bitwise(other, BitwiseOp.XOR)

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __invert__(self) -> BigInteger:
        return self._wrap(invert(self._limbs))

    def __lshift__(self, other: Any) -> BigInteger:
        amount = _shift_count(other)
        if amount is None:
            return NotImplemented
        return self._wrap(shift_left(self._limbs, amount))

    def __rshift__(self, other: Any) -> BigInteger:
        amount = _shift_count(other)
        if amount is None:
            return NotImplemented
        return self._wrap(shift_right(self._limbs, amount))

    # Comparison

    def _compare(self, other: Any) -> int | None:
        rhs = _coerce(other)
        if rhs is None:
            return None
        return compare(self._limbs, rhs)

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return (
            self._limbs.sign == rhs.sign
            and self._limbs.digits == rhs.digits
        )

    def __lt__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result >= 0

    def __hash__(self) -> int:
        # Equal to hash(int(self)) so mixed dict keys collide correctly.
        return hash(to_int(self._limbs))

    # Conversion

    def __bool__(self) -> bool:
        return not self._limbs.is_zero()

    def __int__(self) -> int:
        return to_int(self._limbs)

    def __str__(self) -> str:
        return format_decimal(self._limbs)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

