from enum import Enum

from wideint.core.digits import DIGIT_MASK
from wideint.core.limbs import Limbs


class BitwiseOp(str, Enum):
    AND = "and"
    OR = "or"
    XOR = "xor"


def _apply_word(op: BitwiseOp, lhs: int, rhs: int) -> int:
    if op == BitwiseOp.AND:
        return lhs & rhs
    if op == BitwiseOp.OR:
        return lhs | rhs
    if op == BitwiseOp.XOR:
        return lhs ^ rhs
    raise ValueError(f"Unsupported bitwise op: {op!r}")


def apply_bitwise(lhs: Limbs, rhs: Limbs, op: BitwiseOp) -> Limbs:
    """Apply ``op`` to two infinite two's-complement digit sequences.

    Positions past either operand's stored digits take that operand's sign
    word, and the sign words combine under the same operator.
    """
    size = max(lhs.size(), rhs.size())
    digits = [
        _apply_word(op, lhs.digit_at(i), rhs.digit_at(i)) for i in range(size)
    ]
    sign = _apply_word(op, lhs.sign, rhs.sign)
    return Limbs(sign, digits).strip()


def invert(value: Limbs) -> Limbs:
    digits = [digit ^ DIGIT_MASK for digit in value.digits]
    return Limbs(value.sign ^ DIGIT_MASK, digits).strip()
