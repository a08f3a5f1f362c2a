"""Decimal string parsing and formatting."""

from wideint.arith.addsub import absolute, add
from wideint.arith.divide import divmod_limbs
from wideint.arith.multiply import multiply
from wideint.core.errors import InvalidFormatError
from wideint.core.limbs import Limbs, from_int, zero

DECIMAL_DIGITS = "0123456789"
_TEN = from_int(10)


def parse_decimal(text: str) -> Limbs:
    """Parse ``[+-]?[0-9]*``; the empty string and a lone sign give zero."""
    value = zero()
    if not text:
        return value

    multiplier = 1
    position = 0
    if text[0] == "-":
        multiplier = -1
        position = 1
    elif text[0] == "+":
        position = 1

    for index in range(position, len(text)):
        char = text[index]
        if char not in DECIMAL_DIGITS:
            raise InvalidFormatError(text, index)
        digit = DECIMAL_DIGITS.index(char)
        value = add(multiply(value, _TEN), from_int(digit * multiplier))
    return value


def format_decimal(value: Limbs) -> str:
    negative = value.is_negative()
    value = absolute(value)
    chars: list[str] = []
    while True:
        value, remainder = divmod_limbs(value, _TEN)
        chars.append(DECIMAL_DIGITS[remainder.digit_at(0)])
        if value.is_zero():
            break
    if negative:
        chars.append("-")
    return "".join(reversed(chars))
