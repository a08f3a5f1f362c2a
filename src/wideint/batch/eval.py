import logging

from wideint.batch.models import Operation, OperationResult, OpKind
from wideint.core.errors import WideIntError
from wideint.integer import BigInteger

_LOGGER = logging.getLogger(__name__)


def _compare(lhs: BigInteger, rhs: BigInteger) -> BigInteger:
    if lhs < rhs:
        return BigInteger(-1)
    if lhs > rhs:
        return BigInteger(1)
    return BigInteger(0)


def _evaluate(operation: Operation) -> tuple[BigInteger, BigInteger | None]:
    lhs = BigInteger(operation.lhs)
    op = operation.op

    if op == OpKind.NEG:
        return -lhs, None
    if op == OpKind.NOT:
        return ~lhs, None
    if op == OpKind.ABS:
        return abs(lhs), None
    if op == OpKind.INC:
        return lhs.increment(), None
    if op == OpKind.DEC:
        return lhs.decrement(), None

    assert operation.rhs is not None
    if op == OpKind.SHL:
        return lhs << int(operation.rhs), None
    if op == OpKind.SHR:
        return lhs >> int(operation.rhs), None

    rhs = BigInteger(operation.rhs)
    if op == OpKind.ADD:
        return lhs + rhs, None
    if op == OpKind.SUB:
        return lhs - rhs, None
    if op == OpKind.MUL:
        return lhs * rhs, None
    if op == OpKind.DIV:
        return lhs / rhs, None
    if op == OpKind.MOD:
        return lhs % rhs, None
    if op == OpKind.DIVMOD:
        quotient, remainder = divmod(lhs, rhs)
        return quotient, remainder
    if op == OpKind.AND:
        return lhs & rhs, None
    if op == OpKind.OR:
        return lhs | rhs, None
    if op == OpKind.XOR:
        return lhs ^ rhs, None
    if op == OpKind.CMP:
        return _compare(lhs, rhs), None
    raise ValueError(f"Unsupported op: {op.value}")


def eval_operation(operation: Operation) -> OperationResult:
    """Evaluate one operation row; library errors land in ``error``."""
    row = OperationResult(
        op=operation.op, lhs=operation.lhs, rhs=operation.rhs
    )
    try:
        result, remainder = _evaluate(operation)
    except WideIntError as err:
        _LOGGER.debug("operation %s failed: %s", operation.op.value, err)
        return row.model_copy(update={"error": str(err)})

    update = {"result": str(result)}
    if remainder is not None:
        update["remainder"] = str(remainder)
    return row.model_copy(update=update)
