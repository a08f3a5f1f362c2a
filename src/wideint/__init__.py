"""wideint: arbitrary-precision signed integers over 32-bit digit words."""

from wideint.core.errors import (
    DivisionByZeroError,
    InvalidFormatError,
    WideIntError,
)
from wideint.integer import BigInteger

__all__ = [
    "BigInteger",
    "DivisionByZeroError",
    "InvalidFormatError",
    "WideIntError",
]
