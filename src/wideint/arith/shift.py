"""Arithmetic shifts over sign-extended digit sequences.

Both directions split the shift count into whole digits and a sub-digit
bit count. Whole digits move by slicing; the remaining bits ripple through
the sequence with a carry word.
"""

from wideint.core.digits import DIGIT_BITS, DIGIT_MASK
from wideint.core.limbs import Limbs


def shift_left(value: Limbs, amount: int) -> Limbs:
    if amount < 0:
        return shift_right(value, -amount)
    if amount == 0 or value.is_zero():
        return value.copy()
    whole, bits = divmod(amount, DIGIT_BITS)
    # The trailing sign word absorbs bits pushed past the top digit.
    digits = [0] * whole + value.digits + [value.sign]
    if bits:
        carry = 0
        for i, digit in enumerate(digits):
            digits[i] = ((digit << bits) & DIGIT_MASK) | carry
            carry = digit >> (DIGIT_BITS - bits)
    return Limbs(value.sign, digits).strip()


def shift_right(value: Limbs, amount: int) -> Limbs:
    if amount < 0:
        return shift_left(value, -amount)
    if amount == 0:
        return value.copy()
    whole, bits = divmod(amount, DIGIT_BITS)
    digits = value.digits[whole:]
    if bits:
        low_mask = (1 << bits) - 1
        # Ones shift in above a negative value.
        carry = value.sign & low_mask
        for i in reversed(range(len(digits))):
            digit = digits[i]
            digits[i] = (carry << (DIGIT_BITS - bits)) | (digit >> bits)
            carry = digit & low_mask
    return Limbs(value.sign, digits).strip()
