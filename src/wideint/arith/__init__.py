"""Digit-level arithmetic engines over ``Limbs``."""

from wideint.arith.addsub import (
    absolute,
    add,
    decrement,
    increment,
    negate,
    subtract,
    with_sign,
)
from wideint.arith.bitwise import BitwiseOp, apply_bitwise, invert
from wideint.arith.compare import compare
from wideint.arith.decimal_strings import format_decimal, parse_decimal
from wideint.arith.divide import divmod_limbs
from wideint.arith.multiply import multiply, multiply_by_digit
from wideint.arith.shift import shift_left, shift_right

__all__ = [
    "BitwiseOp",
    "absolute",
    "add",
    "apply_bitwise",
    "compare",
    "decrement",
    "divmod_limbs",
    "format_decimal",
    "increment",
    "invert",
    "multiply",
    "multiply_by_digit",
    "negate",
    "parse_decimal",
    "shift_left",
    "shift_right",
    "subtract",
    "with_sign",
]
