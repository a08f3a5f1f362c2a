from wideint.arith.addsub import absolute, add, with_sign
from wideint.core.digits import SIGN_NONNEGATIVE, high_digit, low_digit
from wideint.core.limbs import Limbs, zero


def multiply_by_digit(magnitude: Limbs, digit: int) -> Limbs:
    """Scale a non-negative value by one digit word."""
    digits: list[int] = []
    carry = 0
    for word in magnitude.digits:
        product = word * digit + carry
        digits.append(low_digit(product))
        carry = high_digit(product)
    digits.append(carry)
    return Limbs(SIGN_NONNEGATIVE, digits).strip()


def _prefix_zero_digits(magnitude: Limbs, count: int) -> Limbs:
    if magnitude.is_zero() or count == 0:
        return magnitude
    return Limbs(SIGN_NONNEGATIVE, [0] * count + magnitude.digits)


def multiply(lhs: Limbs, rhs: Limbs) -> Limbs:
    result_sign = lhs.sign ^ rhs.sign
    lhs_magnitude = absolute(lhs)
    rhs_magnitude = absolute(rhs)
    result = zero()
    for position, digit in enumerate(rhs_magnitude.digits):
        partial = multiply_by_digit(lhs_magnitude, digit)
        result = add(result, _prefix_zero_digits(partial, position))
    return with_sign(result, result_sign)
