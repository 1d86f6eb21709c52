"""
Arithmetic on measurements.

Both operands are converted to decimal inches, combined, and the result is
snapped back to the requested tape graduation.
"""

from __future__ import annotations

import math
import operator
from collections.abc import Callable
from enum import Enum

from .conversion import to_decimal_inches, to_imperial_measurement
from .types import Measurement, TapePrecision


class DivideByZeroError(ZeroDivisionError):
    """Raised when a measurement is divided by a zero-length measurement."""


class Operation(str, Enum):
    """Binary calculator operation."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


def _divide(left: float, right: float) -> float:
    if right == 0:
        raise DivideByZeroError("Cannot divide by zero")
    return left / right


_DISPATCH: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: _divide,
}


def perform_operation(
    left: Measurement,
    right: Measurement,
    op: Operation | str,
    precision: int = TapePrecision.SIXTEENTH,
    reduce: bool = True,
) -> Measurement:
    """
    Apply a binary operation to two measurements.

    Args:
        left: Left operand.
        right: Right operand.
        op: An Operation or its string value ("add", "subtract", ...).
        precision: Tape graduation the result is rounded to.
        reduce: Reduce the result's fraction to lowest terms.

    Returns:
        The quantized result as a new Measurement.

    Raises:
        DivideByZeroError: If dividing by a measurement whose value is 0.
        ValueError: If op is not a known operation.
        OverflowError: If the result is too large to represent.
    """
    try:
        operation = Operation(op)
    except ValueError:
        raise ValueError(f"Unknown operation: {op!r}") from None

    result = _DISPATCH[operation](to_decimal_inches(left), to_decimal_inches(right))
    if not math.isfinite(result):
        raise OverflowError(f"Result of {operation.value} is out of range")
    return to_imperial_measurement(result, precision, reduce)
