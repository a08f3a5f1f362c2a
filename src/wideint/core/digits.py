"""Digit-word constants for the base-2^32 representation."""

DIGIT_BITS = 32
BASE = 1 << DIGIT_BITS
HALF_BASE = BASE >> 1
DIGIT_MASK = BASE - 1

SIGN_NONNEGATIVE = 0
SIGN_NEGATIVE = DIGIT_MASK


def low_digit(value: int) -> int:
    """Keep the low DIGIT_BITS bits of a double-width accumulator."""
    return value & DIGIT_MASK


def high_digit(value: int) -> int:
    return value >> DIGIT_BITS


def join_digits(high: int, low: int) -> int:
    return (high << DIGIT_BITS) | low


def is_digit(value: int) -> bool:
    return 0 <= value <= DIGIT_MASK
