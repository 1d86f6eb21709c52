"""
Conversion between measurements and decimal inches, and quantization to
tape-measure graduations.

Decimal inches are the common computation space: every arithmetic and layout
operation converts to a float, computes, and snaps the result back to the
nearest tape mark. All functions are pure.
"""

from __future__ import annotations

import logging
import math

from .reduction import reduce_fraction
from .types import Measurement, TapePrecision, coerce_precision

logger = logging.getLogger(__name__)


def to_decimal_inches(measurement: Measurement) -> float:
    """Convert a measurement to signed decimal inches."""
    if measurement.denominator == 0:
        logger.debug("Zero denominator in %r, ignoring fractional part", measurement)
        fraction = 0.0
    else:
        fraction = measurement.numerator / measurement.denominator
    value = measurement.inches + fraction
    return -value if measurement.negative else value


def round_to_tape_mark(
    decimal_inches: float,
    precision: int = TapePrecision.SIXTEENTH,
) -> float:
    """
    Snap a length to the nearest graduation of 1/precision inch.

    An exact halfway point always rounds up (toward positive infinity), the
    construction-trade convention. Exact graduations are returned unchanged.

    Raises:
        ValueError: If precision is not 8, 16 or 32, or the value is not finite.
    """
    steps = coerce_precision(precision).value
    if not math.isfinite(decimal_inches):
        raise ValueError(f"Cannot round non-finite length {decimal_inches!r}")
    return math.floor(decimal_inches * steps + 0.5) / steps


def to_imperial_measurement(
    decimal_inches: float,
    precision: int = TapePrecision.SIXTEENTH,
    reduce: bool = True,
) -> Measurement:
    """
    Quantize decimal inches and split the result into a Measurement.

    Args:
        decimal_inches: Signed length in inches.
        precision: Tape graduation denominator (8, 16 or 32).
        reduce: Reduce the fraction to lowest terms. When False the fraction
            keeps ``precision`` as its denominator.

    Returns:
        A Measurement whose fraction is over ``precision`` (or reduced).
        A zero remainder is always ``0/1``, regardless of ``reduce``.
    """
    steps = coerce_precision(precision).value
    rounded = round_to_tape_mark(decimal_inches, steps)

    magnitude = abs(rounded)
    whole = math.floor(magnitude)
    parts = round((magnitude - whole) * steps)

    if parts == 0:
        numerator, denominator = 0, 1
    elif reduce:
        numerator, denominator = reduce_fraction(parts, steps)
    else:
        numerator, denominator = parts, steps

    return Measurement(
        inches=int(whole),
        numerator=numerator,
        denominator=denominator,
        negative=rounded < 0,
    )
