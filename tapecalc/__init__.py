"""
Tape-measure calculator library.

Parses, formats, and does arithmetic on imperial measurements (feet, inches,
and fractions of an inch), rounding every result to a tape graduation, and
lays out evenly spaced marks along a length.
"""

from .layout import (
    custom_interval_marks,
    divide_length,
    even_spacing_marks,
    format_marks,
)
from .measure import (
    DisplayFormat,
    DisplayOptions,
    DivideByZeroError,
    Measurement,
    Operation,
    ReducedFraction,
    TapePrecision,
    format_as_decimal,
    format_imperial_measurement,
    parse_input,
    perform_operation,
    reduce_fraction,
    round_to_tape_mark,
    to_decimal_inches,
    to_imperial_measurement,
)

__all__ = [
    # types
    "Measurement",
    "TapePrecision",
    "DisplayFormat",
    "DisplayOptions",
    "ReducedFraction",
    "Operation",
    "DivideByZeroError",
    # measurement core
    "to_decimal_inches",
    "round_to_tape_mark",
    "to_imperial_measurement",
    "reduce_fraction",
    "parse_input",
    "format_imperial_measurement",
    "format_as_decimal",
    "perform_operation",
    # layout
    "divide_length",
    "custom_interval_marks",
    "even_spacing_marks",
    "format_marks",
]
