import json
import logging
import os
import random
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, TextIO

import srsly
import typer
from pydantic import BaseModel, ValidationError

from wideint.batch.eval import eval_operation
from wideint.batch.models import Operation, OpKind, SampleAxes
from wideint.batch.sampler import sample_operations

app = typer.Typer(help="Arbitrary-precision integer arithmetic.")


class _RowError(Exception):
    """A JSONL input row that is not a valid operation."""

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"line {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


def _parse_range(value: str | None) -> tuple[int, int] | None:
    if value is None:
        return None
    try:
        lo, hi = (int(part) for part in value.split(","))
    except ValueError as err:
        raise typer.BadParameter(f"expected LO,HI, got {value!r}") from err
    if lo > hi:
        raise typer.BadParameter(f"empty range {value!r}: {lo} > {hi}")
    return lo, hi


def _parse_ops(value: str | None) -> list[OpKind] | None:
    if value is None:
        return None
    tokens = [token.strip().lower() for token in value.split(",")]
    parsed = [token for token in tokens if token]
    if not parsed:
        raise typer.BadParameter("Expected at least one op name.")
    ops: list[OpKind] = []
    for token in parsed:
        try:
            ops.append(OpKind(token))
        except ValueError as err:
            expected = ", ".join(kind.value for kind in OpKind)
            raise typer.BadParameter(
                f"Unknown op '{token}'. Expected one of: {expected}."
            ) from err
    return ops


def _first_validation_message(err: ValidationError) -> str:
    first_error = err.errors(include_url=False)[0]
    loc = ".".join(str(item) for item in first_error["loc"])
    message = first_error["msg"]
    if loc:
        return f"at '{loc}': {message}"
    return message


def _iter_validated_operations(input_file: Path) -> Iterator[Operation]:
    with input_file.open("r", encoding="utf-8") as input_handle:
        for line_number, line in enumerate(input_handle, start=1):
            stripped = line.strip()
            if not stripped:
                continue
            try:
                raw = json.loads(stripped)
            except json.JSONDecodeError as err:
                raise _RowError(
                    line_number=line_number,
                    reason=f"malformed JSON ({err.msg})",
                ) from err
            try:
                yield Operation.model_validate(raw)
            except ValidationError as err:
                raise _RowError(
                    line_number=line_number,
                    reason=f"invalid operation row "
                    f"{_first_validation_message(err)}",
                ) from err


def _render_row_error(input_file: Path, error: _RowError) -> str:
    return (
        f"Error: invalid JSONL row in {input_file} at line "
        f"{error.line_number}: {error.reason}"
    )


@contextmanager
def _atomic_output(output: Path) -> Iterator[TextIO]:
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{output.name}.",
        suffix=".tmp",
        dir=output.parent,
    )
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            yield handle
        os.replace(tmp, output)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise


def _write_row(handle: TextIO, row: BaseModel) -> None:
    handle.write(srsly.json_dumps(row.model_dump(mode="json")))
    handle.write("\n")


@app.command()
def calc(
    lhs: Annotated[str, typer.Argument(help="Left operand (decimal)")],
    op: Annotated[OpKind, typer.Argument(help="Operation name")],
    rhs: Annotated[
        str | None,
        typer.Argument(help="Right operand, or shift count for shl/shr"),
    ] = None,
) -> None:
    """Evaluate a single operation and print the decimal result."""
    try:
        operation = Operation(op=op, lhs=lhs, rhs=rhs)
    except ValidationError as err:
        typer.echo(f"Error: {_first_validation_message(err)}", err=True)
        raise typer.Exit(1) from err

    row = eval_operation(operation)
    if row.error is not None:
        typer.echo(f"Error: {row.error}", err=True)
        raise typer.Exit(1)
    if row.remainder is not None:
        typer.echo(f"{row.result} {row.remainder}")
    else:
        typer.echo(row.result)


@app.command()
def sample(
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Output JSONL file")
    ],
    count: Annotated[
        int, typer.Option("--count", "-n", help="Number of operations")
    ] = 100,
    seed: Annotated[
        int | None, typer.Option("--seed", "-s", help="Random seed")
    ] = None,
    digits_range: Annotated[
        str | None,
        typer.Option("--digits-range", help="Operand digit count (lo,hi)"),
    ] = None,
    shift_range: Annotated[
        str | None,
        typer.Option("--shift-range", help="Shift count range (lo,hi)"),
    ] = None,
    negative_probability: Annotated[
        float | None,
        typer.Option(
            "--negative-probability",
            help="Chance that an operand is negative, in [0, 1]",
        ),
    ] = None,
    ops: Annotated[
        str | None,
        typer.Option("--ops", help="Operations to sample (comma-separated)"),
    ] = None,
) -> None:
    """Write randomly sampled operation rows for fuzzing."""
    if count < 0:
        typer.echo("Error: --count must be >= 0", err=True)
        raise typer.Exit(1)

    overrides: dict[str, object] = {}
    if (parsed := _parse_range(digits_range)) is not None:
        overrides["digits_range"] = parsed
    if (parsed := _parse_range(shift_range)) is not None:
        overrides["shift_range"] = parsed
    if negative_probability is not None:
        overrides["negative_probability"] = negative_probability
    if (parsed_ops := _parse_ops(ops)) is not None:
        overrides["allowed_ops"] = parsed_ops

    try:
        axes = SampleAxes.model_validate(overrides)
    except ValidationError as err:
        typer.echo(f"Error: {_first_validation_message(err)}", err=True)
        raise typer.Exit(1) from err

    operations = sample_operations(axes, count, random.Random(seed))
    with _atomic_output(output) as handle:
        for operation in operations:
            _write_row(handle, operation)
    typer.echo(f"Sampled {len(operations)} operations to {output}")


@app.command()
def batch(
    input_file: Annotated[Path, typer.Argument(help="Input JSONL file")],
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Output JSONL file")
    ],
) -> None:
    """Evaluate operation rows and write one result row per input row."""
    evaluated = 0
    errors = 0
    try:
        with _atomic_output(output) as handle:
            for operation in _iter_validated_operations(input_file):
                row = eval_operation(operation)
                evaluated += 1
                if row.error is not None:
                    errors += 1
                _write_row(handle, row)
    except _RowError as err:
        typer.echo(_render_row_error(input_file, err), err=True)
        raise typer.Exit(1) from err

    typer.echo(f"Evaluated: {evaluated}, Errors: {errors}")
