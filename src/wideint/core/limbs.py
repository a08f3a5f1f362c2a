"""Sign-extended digit sequences.

A ``Limbs`` record stores an integer as base-2^32 digits, least significant
first, plus a ``sign`` word that stands for every position past the end of
the list. ``sign`` is either all zero bits or all one bits, so the record
reads as a two's-complement number of unbounded width.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wideint.core.digits import (
    DIGIT_BITS,
    DIGIT_MASK,
    SIGN_NEGATIVE,
    SIGN_NONNEGATIVE,
    is_digit,
)


@dataclass(slots=True)
class Limbs:
    sign: int = SIGN_NONNEGATIVE
    digits: list[int] = field(default_factory=list)

    def size(self) -> int:
        return len(self.digits)

    def digit_at(self, index: int) -> int:
        """Digit at ``index``, or the sign word past the stored digits."""
        if index < len(self.digits):
            return self.digits[index]
        return self.sign

    def strip(self) -> Limbs:
        """Drop trailing digits equal to the sign word, in place."""
        digits = self.digits
        while digits and digits[-1] == self.sign:
            digits.pop()
        return self

    def is_negative(self) -> bool:
        return self.sign != SIGN_NONNEGATIVE

    def is_zero(self) -> bool:
        return self.sign == SIGN_NONNEGATIVE and not self.digits

    def copy(self) -> Limbs:
        return Limbs(self.sign, list(self.digits))


def zero() -> Limbs:
    return Limbs()


def from_int(value: int) -> Limbs:
    sign = SIGN_NEGATIVE if value < 0 else SIGN_NONNEGATIVE
    digits: list[int] = []
    # Arithmetic shift converges to 0 or -1.
    while value not in (0, -1):
        digits.append(value & DIGIT_MASK)
        value >>= DIGIT_BITS
    return Limbs(sign, digits).strip()


def from_digit(word: int) -> Limbs:
    if isinstance(word, bool):
        raise TypeError("bool is not allowed as a digit word")
    if not is_digit(word):
        raise ValueError(
            f"digit word must be in [0, {DIGIT_MASK}], got {word}"
        )
    return Limbs(SIGN_NONNEGATIVE, [word]).strip()


def to_int(limbs: Limbs) -> int:
    value = 0
    for digit in reversed(limbs.digits):
        value = (value << DIGIT_BITS) | digit
    if limbs.is_negative():
        value -= 1 << (DIGIT_BITS * limbs.size())
    return value
