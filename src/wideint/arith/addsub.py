from wideint.arith.bitwise import invert
from wideint.core.digits import high_digit, low_digit
from wideint.core.limbs import Limbs, from_int

_ONE = from_int(1)


def add(lhs: Limbs, rhs: Limbs) -> Limbs:
    # One guard position past the longer operand catches the carry into
    # the sign.
    size = max(lhs.size(), rhs.size()) + 1
    digits: list[int] = []
    carry = 0
    for i in range(size):
        total = lhs.digit_at(i) + rhs.digit_at(i) + carry
        digits.append(low_digit(total))
        carry = high_digit(total)
    sign = low_digit(lhs.sign + rhs.sign + carry)
    return Limbs(sign, digits).strip()


def negate(value: Limbs) -> Limbs:
    return add(invert(value), _ONE)


def subtract(lhs: Limbs, rhs: Limbs) -> Limbs:
    return add(lhs, negate(rhs))


def increment(value: Limbs) -> Limbs:
    return add(value, _ONE)


def decrement(value: Limbs) -> Limbs:
    return subtract(value, _ONE)


def absolute(value: Limbs) -> Limbs:
    if value.is_negative():
        return negate(value)
    return value.copy()


def with_sign(value: Limbs, sign: int) -> Limbs:
    """Return ``value`` or its negation, whichever carries ``sign``.

    Zero keeps the non-negative sign whatever ``sign`` asks for.
    """
    if value.sign == sign:
        return value.copy().strip()
    return negate(value)
