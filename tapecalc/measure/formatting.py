"""
Rendering measurements as text.

format_imperial_measurement produces tape-measure notation that parse_input
accepts back; format_as_decimal produces decimal inches for reference.
"""

from __future__ import annotations

import math

from .conversion import to_decimal_inches
from .types import INCHES_PER_FOOT, DisplayFormat, DisplayOptions, Measurement

_SIXTEENTHS: int = 16
_DECIMAL_PLACES: int = 4


def _as_sixteenths(inches: int, numerator: int, denominator: int) -> tuple[int, int, int]:
    """Re-express a fraction over 16, carrying 16/16 into the whole inches."""
    parts = math.floor(numerator / denominator * _SIXTEENTHS + 0.5)
    if parts >= _SIXTEENTHS:
        return inches + parts // _SIXTEENTHS, parts % _SIXTEENTHS, _SIXTEENTHS
    return inches, parts, _SIXTEENTHS


def format_imperial_measurement(
    measurement: Measurement,
    options: DisplayOptions | None = None,
) -> str:
    """
    Format a measurement in tape notation, e.g. ``5 1/2"`` or ``5' 3 1/2"``.

    Fractions are shown as stored unless ``options.format`` asks for
    sixteenths. With ``options.show_feet`` lengths of a foot or more lead with
    whole feet; a feet-only length has no trailing inch mark. Zero is ``0"``.
    """
    options = options or DisplayOptions()
    inches, numerator, denominator = (
        measurement.inches,
        measurement.numerator,
        measurement.denominator,
    )
    if denominator == 0:
        numerator, denominator = 0, 1
    if numerator and options.format is DisplayFormat.SIXTEENTHS:
        inches, numerator, denominator = _as_sixteenths(inches, numerator, denominator)

    if inches == 0 and numerator == 0:
        return '0"'

    sign = "-" if measurement.negative else ""

    feet = 0
    if options.show_feet and inches >= INCHES_PER_FOOT:
        feet, inches = divmod(inches, INCHES_PER_FOOT)

    parts: list[str] = []
    if inches:
        parts.append(str(inches))
    if numerator:
        parts.append(f"{numerator}/{denominator}")

    if not feet:
        return sign + " ".join(parts) + '"'
    if not parts:
        return f"{sign}{feet}'"
    return f"{sign}{feet}' " + " ".join(parts) + '"'


def format_as_decimal(measurement: Measurement, decimal_places: int = _DECIMAL_PLACES) -> str:
    """
    Format a measurement as decimal inches, e.g. ``5.3333"``.

    Values are rounded half up to ``decimal_places`` with trailing zeros
    dropped, so a whole number of inches renders as ``5"``. Zero is ``0.0"``.
    """
    value = to_decimal_inches(measurement)
    scale = 10**decimal_places
    scaled = value * scale
    if math.isfinite(scaled):
        value = math.floor(scaled + 0.5) / scale
    text = f"{value:.{decimal_places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("0", "-0"):
        return '0.0"'
    return text + '"'
