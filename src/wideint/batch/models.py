import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

MAX_SHIFT_BITS = 1 << 20
DECIMAL_OPERAND_RE = re.compile(r"[+-]?[0-9]+")

_INT_RANGE_FIELDS = ("digits_range", "shift_range")


class OpKind(str, Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    DIVMOD = "divmod"
    AND = "and"
    OR = "or"
    XOR = "xor"
    SHL = "shl"
    SHR = "shr"
    CMP = "cmp"
    NEG = "neg"
    NOT = "not"
    ABS = "abs"
    INC = "inc"
    DEC = "dec"


UNARY_OPS = frozenset(
    {OpKind.NEG, OpKind.NOT, OpKind.ABS, OpKind.INC, OpKind.DEC}
)
SHIFT_OPS = frozenset({OpKind.SHL, OpKind.SHR})


def _validate_no_bool_int_range_bounds(data: Any) -> None:
    if not isinstance(data, dict):
        return

    for field_name in _INT_RANGE_FIELDS:
        value = data.get(field_name)
        if not isinstance(value, (tuple, list)) or len(value) != 2:
            continue
        low, high = value
        if isinstance(low, bool) or isinstance(high, bool):
            raise ValueError(
                f"{field_name}: bool is not allowed for int range bounds"
            )


class Operation(BaseModel):
    op: OpKind
    lhs: str = Field(description="Left operand as a decimal string")
    rhs: str | None = Field(
        default=None,
        description="Right operand, or the shift count for shl/shr",
    )

    @model_validator(mode="after")
    def validate_operands(self) -> "Operation":
        if DECIMAL_OPERAND_RE.fullmatch(self.lhs) is None:
            raise ValueError(f"lhs is not a decimal integer: {self.lhs!r}")

        if self.op in UNARY_OPS:
            if self.rhs is not None:
                raise ValueError(f"op '{self.op.value}' takes no 'rhs'")
            return self

        if self.rhs is None:
            raise ValueError(f"op '{self.op.value}' requires field 'rhs'")
        if DECIMAL_OPERAND_RE.fullmatch(self.rhs) is None:
            raise ValueError(f"rhs is not a decimal integer: {self.rhs!r}")
        if self.op in SHIFT_OPS and abs(int(self.rhs)) > MAX_SHIFT_BITS:
            raise ValueError(
                f"shift count must be in [-{MAX_SHIFT_BITS}, "
                f"{MAX_SHIFT_BITS}], got {self.rhs}"
            )
        return self


class OperationResult(BaseModel):
    op: OpKind
    lhs: str
    rhs: str | None = None
    result: str | None = None
    remainder: str | None = None
    error: str | None = None


class SampleAxes(BaseModel):
    digits_range: tuple[int, int] = Field(default=(1, 40))
    shift_range: tuple[int, int] = Field(default=(0, 160))
    negative_probability: float = Field(default=0.5, ge=0.0, le=1.0)
    allowed_ops: list[OpKind] = Field(default_factory=lambda: list(OpKind))

    @model_validator(mode="before")
    @classmethod
    def validate_input_axes(cls, data: Any) -> Any:
        _validate_no_bool_int_range_bounds(data)
        return data

    @model_validator(mode="after")
    def validate_axes(self) -> "SampleAxes":
        if not self.allowed_ops:
            raise ValueError("allowed_ops must not be empty")

        for name in _INT_RANGE_FIELDS:
            lo, hi = getattr(self, name)
            if lo > hi:
                raise ValueError(f"{name}: low ({lo}) must be <= high ({hi})")

        if self.digits_range[0] < 1:
            raise ValueError("digits_range: low must be >= 1")

        lo, hi = self.shift_range
        if lo < -MAX_SHIFT_BITS or hi > MAX_SHIFT_BITS:
            raise ValueError(
                f"shift_range must lie within [-{MAX_SHIFT_BITS}, "
                f"{MAX_SHIFT_BITS}]"
            )
        return self
