"""Normalized schoolbook long division.

Quotient and remainder come out of one pass. Division truncates toward
zero: the quotient's sign is the XOR of the operand signs and the
remainder takes the dividend's sign.
"""

import logging

from wideint.arith.addsub import absolute, add, subtract, with_sign
from wideint.arith.multiply import multiply_by_digit
from wideint.arith.shift import shift_left, shift_right
from wideint.core.digits import (
    DIGIT_BITS,
    DIGIT_MASK,
    SIGN_NONNEGATIVE,
    join_digits,
)
from wideint.core.errors import DivisionByZeroError
from wideint.core.limbs import Limbs, zero

_LOGGER = logging.getLogger(__name__)


def normalization_shift(top_digit: int) -> int:
    """Bits to shift so that ``top_digit`` reaches at least half the base."""
    return DIGIT_BITS - top_digit.bit_length()


def _prepend_digit(remainder: Limbs, digit: int) -> Limbs:
    # remainder is non-negative here, so this is remainder * BASE + digit.
    return Limbs(remainder.sign, [digit] + remainder.digits).strip()


def divmod_limbs(dividend: Limbs, divisor: Limbs) -> tuple[Limbs, Limbs]:
    if divisor.is_zero():
        raise DivisionByZeroError("division by zero")

    quotient_sign = dividend.sign ^ divisor.sign
    remainder_sign = dividend.sign
    dividend = absolute(dividend)
    divisor = absolute(divisor)

    shift = normalization_shift(divisor.digits[-1])
    dividend = shift_left(dividend, shift)
    divisor = shift_left(divisor, shift)

    divisor_size = divisor.size()
    top = divisor.digits[-1]
    quotient_digits = [0] * dividend.size()
    remainder = zero()
    corrections = 0
    for i in reversed(range(dividend.size())):
        remainder = _prepend_digit(remainder, dividend.digits[i])
        estimate = join_digits(
            remainder.digit_at(divisor_size),
            remainder.digit_at(divisor_size - 1),
        )
        quotient_digit = min(estimate // top, DIGIT_MASK)
        remainder = subtract(
            remainder, multiply_by_digit(divisor, quotient_digit)
        )
        while remainder.is_negative():
            remainder = add(remainder, divisor)
            quotient_digit -= 1
            corrections += 1
        quotient_digits[i] = quotient_digit

    if corrections:
        _LOGGER.debug(
            "divmod over %d dividend digits needed %d estimate corrections",
            dividend.size(),
            corrections,
        )

    remainder = shift_right(remainder, shift)
    quotient = Limbs(SIGN_NONNEGATIVE, quotient_digits).strip()
    return (
        with_sign(quotient, quotient_sign),
        with_sign(remainder, remainder_sign),
    )
