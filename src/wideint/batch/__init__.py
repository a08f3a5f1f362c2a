"""batch family: JSONL-friendly operation rows evaluated with BigInteger."""

from wideint.batch.eval import eval_operation
from wideint.batch.models import (
    Operation,
    OperationResult,
    OpKind,
    SampleAxes,
)
from wideint.batch.sampler import (
    random_decimal,
    sample_operation,
    sample_operations,
)

__all__ = [
    "OpKind",
    "Operation",
    "OperationResult",
    "SampleAxes",
    "eval_operation",
    "random_decimal",
    "sample_operation",
    "sample_operations",
]
