"""
Interval layout: mark positions along a length.

Three generators cover the common layout jobs:

    divide_length          split a length into N equal parts
    custom_interval_marks  step a fixed interval from a start point
    even_spacing_marks     fit evenly spaced marks between two fixed points,
                           adjusting the desired spacing so both ends land
                           on a mark

Inputs may be Measurement values or raw text, which is parsed with
parse_input. These functions are driven by live user input, so any
unparsable or out-of-range input produces an empty list instead of an
exception. Every position is quantized to the requested tape graduation.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from tapecalc.config import get_settings
from tapecalc.measure import (
    DisplayOptions,
    Measurement,
    TapePrecision,
    coerce_precision,
    format_imperial_measurement,
    parse_input,
    to_decimal_inches,
    to_imperial_measurement,
)

logger = logging.getLogger(__name__)

LengthInput = Measurement | str | None

# Slack for comparing accumulated float positions against the cap
_CAP_TOLERANCE: float = 1e-9


class _InvalidInput(Exception):
    """Internal signal that a layout input cannot be used."""


def _required_inches(value: LengthInput, name: str, precision: int) -> float:
    measurement = value if isinstance(value, Measurement) else parse_input(value or "", precision)
    if measurement is None:
        raise _InvalidInput(f"{name} {value!r} is not a measurement")
    try:
        return to_decimal_inches(measurement)
    except OverflowError:
        raise _InvalidInput(f"{name} is too large") from None


def _resolve_precision(precision: int | None) -> TapePrecision:
    return coerce_precision(precision if precision is not None else get_settings().precision)


def _quantize(positions: Iterable[float], precision: int) -> list[Measurement]:
    try:
        return [to_imperial_measurement(p, precision) for p in positions]
    except (ValueError, OverflowError) as exc:
        raise _InvalidInput(f"mark position out of range: {exc}") from None


def _optional_inches(value: LengthInput, name: str, precision: int, default: float) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    return _required_inches(value, name, precision)


def _positive_count(value: int | str) -> int:
    if isinstance(value, str):
        try:
            count = int(value.strip())
        except ValueError:
            raise _InvalidInput(f"divisions {value!r} is not a whole number") from None
    elif isinstance(value, float) and not value.is_integer():
        raise _InvalidInput(f"divisions {value!r} is not a whole number")
    else:
        count = int(value)
    if count <= 0:
        raise _InvalidInput(f"divisions must be positive, got {count}")
    return count


def divide_length(
    total: LengthInput,
    divisions: int | str,
    offset: LengthInput = "",
    precision: int | None = None,
) -> list[Measurement]:
    """
    Divide the length after ``offset`` into equal parts.

    Marks are placed at ``offset + k * (total - offset) / divisions`` for
    ``k = 1..divisions``; there is no mark at the offset itself, and the last
    mark falls on ``total``.

    Example:
        96" in 4 parts → 24", 48", 72", 96"

    Raises:
        ValueError: If precision is not 8, 16 or 32.
    """
    precision = _resolve_precision(precision)
    try:
        total_inches = _required_inches(total, "total", precision)
        count = _positive_count(divisions)
        offset_inches = _optional_inches(offset, "offset", precision, 0.0)
        interval = (total_inches - offset_inches) / count
        return _quantize((offset_inches + interval * k for k in range(1, count + 1)), precision)
    except _InvalidInput as exc:
        logger.debug("divide_length: %s", exc)
        return []


def custom_interval_marks(
    interval: LengthInput,
    start: LengthInput = "",
    total: LengthInput = "",
    precision: int | None = None,
    max_marks: int | None = None,
) -> list[Measurement]:
    """
    Step a fixed interval from a start point.

    Marks are placed at ``start + k * interval`` for ``k = 1, 2, ...`` while
    the position does not exceed ``total``.

    Args:
        interval: Distance between marks; must be positive.
        start: Starting point, default 0".
        total: Upper bound for marks, default from settings (300", i.e. 25').
        precision: Tape graduation, default from settings.
        max_marks: Hard limit on the number of marks, default from settings (100).

    Returns:
        Mark positions in increasing order; empty on invalid input.

    Raises:
        ValueError: If precision is not 8, 16 or 32.
    """
    settings = get_settings()
    precision = _resolve_precision(precision)
    limit = max_marks if max_marks is not None else settings.max_marks
    try:
        interval_inches = _required_inches(interval, "interval", precision)
        if interval_inches <= 0:
            raise _InvalidInput(f"interval must be positive, got {interval!r}")
        start_inches = _optional_inches(start, "start", precision, 0.0)
        cap_inches = _optional_inches(total, "total", precision, settings.default_cap_inches)

        positions: list[float] = []
        k = 1
        while len(positions) < limit:
            position = start_inches + interval_inches * k
            if position > cap_inches + _CAP_TOLERANCE:
                break
            positions.append(position)
            k += 1
        return _quantize(positions, precision)
    except _InvalidInput as exc:
        logger.debug("custom_interval_marks: %s", exc)
        return []


def even_spacing_marks(
    first: LengthInput,
    last: LengthInput,
    desired: LengthInput,
    precision: int | None = None,
    max_marks: int | None = None,
) -> list[Measurement]:
    """
    Space marks evenly from ``first`` to ``last`` near a desired spacing.

    The number of intervals is ``span / desired`` rounded half up; the actual
    spacing is then ``span / intervals`` so both endpoints receive a mark. If
    the span is too short for even one interval, only the two endpoints are
    returned. A layout needing more than ``max_marks`` marks (default from
    settings) is rejected.

    Example:
        1" to 95" at about 8" → 13 marks, 7.8333" apart: 1", 8 13/16", ... 95"

    Raises:
        ValueError: If precision is not 8, 16 or 32.
    """
    precision = _resolve_precision(precision)
    limit = max_marks if max_marks is not None else get_settings().max_marks
    try:
        first_inches = _required_inches(first, "first", precision)
        last_inches = _required_inches(last, "last", precision)
        desired_inches = _required_inches(desired, "desired spacing", precision)
        if desired_inches <= 0:
            raise _InvalidInput(f"desired spacing must be positive, got {desired!r}")
        if last_inches <= first_inches:
            raise _InvalidInput(f"last ({last!r}) must be beyond first ({first!r})")

        span = last_inches - first_inches
        ratio = span / desired_inches
        if not math.isfinite(ratio):
            raise _InvalidInput(f"spacing {desired!r} is too fine for the span")
        intervals = math.floor(ratio + 0.5)
        if max(intervals, 1) + 1 > limit:
            raise _InvalidInput(f"spacing {desired!r} needs more than {limit} marks")
        if intervals == 0:
            positions = [first_inches, last_inches]
        else:
            spacing = span / intervals
            positions = [first_inches + spacing * k for k in range(intervals + 1)]
        return _quantize(positions, precision)
    except _InvalidInput as exc:
        logger.debug("even_spacing_marks: %s", exc)
        return []


def format_marks(
    marks: list[Measurement],
    options: DisplayOptions | None = None,
) -> list[str]:
    """Render a list of marks in tape notation."""
    return [format_imperial_measurement(mark, options) for mark in marks]
