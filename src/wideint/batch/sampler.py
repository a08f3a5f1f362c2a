import random

from wideint.batch.models import (
    SHIFT_OPS,
    UNARY_OPS,
    Operation,
    SampleAxes,
)

DECIMAL_DIGITS = "0123456789"


def random_decimal(rng: random.Random, length: int, negative: bool) -> str:
    """Random decimal literal with exactly ``length`` digits."""
    digits = [rng.choice(DECIMAL_DIGITS) for _ in range(length)]
    if length > 1:
        while digits[0] == "0":
            digits[0] = rng.choice(DECIMAL_DIGITS)
    literal = "".join(digits)
    if negative and literal != "0":
        return "-" + literal
    return literal


def _sample_operand(axes: SampleAxes, rng: random.Random) -> str:
    length = rng.randint(*axes.digits_range)
    negative = rng.random() < axes.negative_probability
    return random_decimal(rng, length, negative)


def sample_operation(
    axes: SampleAxes, rng: random.Random | None = None
) -> Operation:
    if rng is None:
        rng = random.Random()

    op = rng.choice(axes.allowed_ops)
    lhs = _sample_operand(axes, rng)
    if op in UNARY_OPS:
        return Operation(op=op, lhs=lhs)
    if op in SHIFT_OPS:
        shift = rng.randint(*axes.shift_range)
        return Operation(op=op, lhs=lhs, rhs=str(shift))
    return Operation(op=op, lhs=lhs, rhs=_sample_operand(axes, rng))


def sample_operations(
    axes: SampleAxes, count: int, rng: random.Random | None = None
) -> list[Operation]:
    if rng is None:
        rng = random.Random()
    return [sample_operation(axes, rng) for _ in range(count)]
