"""
Free-form text parser for imperial measurements.

Recognizes the notations a tradesperson types into a calculator:

    5' 3 1/2"   feet, inches and fraction
    5' 3"       feet and inches
    5' 1/2"     feet and fraction
    5'          feet only
    3 1/2"      inches and fraction
    1/2"        fraction only
    3"          whole inches
    5.625"      decimal inches with a unit mark
    5.625       bare decimal inches
    3           bare whole inches

Patterns are tried in that order and the first full match wins. A single
leading minus sign (ASCII ``-`` or Unicode ``−``) negates the whole
expression. Malformed input is an expected condition and yields None rather
than an exception.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable

from .conversion import to_imperial_measurement
from .reduction import reduce_fraction
from .types import INCHES_PER_FOOT, Measurement, TapePrecision, coerce_precision

logger = logging.getLogger(__name__)

_SIGNS: tuple[str, ...] = ("-", "−")

# Typographic marks pasted from documents or phone keyboards
_MARK_TRANSLATION = str.maketrans({
    "′": "'",  # prime
    "’": "'",  # right single quotation mark
    "″": '"',  # double prime
    "”": '"',  # right double quotation mark
})

_WHITESPACE = re.compile(r"\s+")

# Feet may be followed directly by inches, by a space, or by a drawing-style
# hyphen: 5'3", 5' 3", 5'-3"
_FEET = r"(\d+)'\s*-?\s*"
_INCH_FRACTION_GAP = r"(?:\s|-)"

_FEET_INCH_FRACTION = re.compile(_FEET + r"(\d+)" + _INCH_FRACTION_GAP + r"(\d+)/(\d+)\"")
_FEET_INCH = re.compile(_FEET + r"(\d+)\"")
_FEET_FRACTION = re.compile(_FEET + r"(\d+)/(\d+)\"")
_FEET_ONLY = re.compile(r"(\d+)'")
_INCH_FRACTION = re.compile(r"(\d+)" + _INCH_FRACTION_GAP + r"(\d+)/(\d+)\"")
_FRACTION_ONLY = re.compile(r"(\d+)/(\d+)\"")
_INCH_ONLY = re.compile(r"(\d+)\"")
_DECIMAL_MARKED = re.compile(r"(\d+\.?\d*)\"")
_DECIMAL_BARE = re.compile(r"(\d+\.\d+)")
_WHOLE_BARE = re.compile(r"(\d+)")


def _compose(inches: int, numerator: int = 0, denominator: int = 1) -> Measurement | None:
    """Build a measurement from captured parts; None on a zero denominator."""
    if denominator == 0:
        return None
    carry, numerator = divmod(numerator, denominator)
    numerator, denominator = reduce_fraction(numerator, denominator)
    return Measurement(inches=inches + carry, numerator=numerator, denominator=denominator)


def _feet_inch_fraction(m: re.Match[str], precision: int) -> Measurement | None:
    feet, inches, num, den = (int(g) for g in m.groups())
    return _compose(feet * INCHES_PER_FOOT + inches, num, den)


def _feet_inch(m: re.Match[str], precision: int) -> Measurement | None:
    feet, inches = (int(g) for g in m.groups())
    return _compose(feet * INCHES_PER_FOOT + inches)


def _feet_fraction(m: re.Match[str], precision: int) -> Measurement | None:
    feet, num, den = (int(g) for g in m.groups())
    return _compose(feet * INCHES_PER_FOOT, num, den)


def _feet_only(m: re.Match[str], precision: int) -> Measurement | None:
    return _compose(int(m.group(1)) * INCHES_PER_FOOT)


def _inch_fraction(m: re.Match[str], precision: int) -> Measurement | None:
    inches, num, den = (int(g) for g in m.groups())
    return _compose(inches, num, den)


def _fraction_only(m: re.Match[str], precision: int) -> Measurement | None:
    num, den = (int(g) for g in m.groups())
    return _compose(0, num, den)


def _whole_inches(m: re.Match[str], precision: int) -> Measurement | None:
    return _compose(int(m.group(1)))


def _decimal_inches(m: re.Match[str], precision: int) -> Measurement | None:
    value = float(m.group(1))
    if not math.isfinite(value):
        raise OverflowError(f"decimal length out of range: {m.group(1)[:20]}...")
    return to_imperial_measurement(value, precision, reduce=True)


_Builder = Callable[[re.Match[str], int], "Measurement | None"]

_PATTERNS: tuple[tuple[re.Pattern[str], _Builder], ...] = (
    (_FEET_INCH_FRACTION, _feet_inch_fraction),
    (_FEET_INCH, _feet_inch),
    (_FEET_FRACTION, _feet_fraction),
    (_FEET_ONLY, _feet_only),
    (_INCH_FRACTION, _inch_fraction),
    (_FRACTION_ONLY, _fraction_only),
    (_INCH_ONLY, _whole_inches),
    (_DECIMAL_MARKED, _decimal_inches),
    (_DECIMAL_BARE, _decimal_inches),
    (_WHOLE_BARE, _whole_inches),
)


def normalize_input(text: str) -> str:
    """Collapse whitespace runs, trim, and map typographic marks to ASCII."""
    return _WHITESPACE.sub(" ", text.translate(_MARK_TRANSLATION)).strip()


def parse_input(
    text: str,
    precision: int = TapePrecision.SIXTEENTH,
) -> Measurement | None:
    """
    Parse a measurement typed as text.

    Args:
        text: Raw user input.
        precision: Tape graduation used to quantize decimal-inch input.

    Returns:
        The parsed Measurement (feet folded into inches, fraction reduced),
        or None if the text is empty, unrecognized, out of range, or has a zero
        denominator.

    Raises:
        ValueError: If precision is not 8, 16 or 32.
    """
    precision = coerce_precision(precision)
    if not text or not text.strip():
        return None

    cleaned = normalize_input(text)
    negative = cleaned[0] in _SIGNS
    body = cleaned[1:].lstrip() if negative else cleaned

    for pattern, build in _PATTERNS:
        match = pattern.fullmatch(body)
        if match is None:
            continue
        try:
            result = build(match, precision)
        except (ValueError, OverflowError) as exc:
            logger.debug("Rejected %r: %s", text[:40], exc)
            return None
        if result is None:
            logger.debug("Rejected %r: zero denominator", text)
            return None
        if negative:
            return Measurement(
                inches=result.inches,
                numerator=result.numerator,
                denominator=result.denominator,
                negative=True,
            )
        return result

    logger.debug("Unrecognized measurement %r", text)
    return None
