"""
Imperial measurement arithmetic for tape-measure work.

Provides deterministic, side-effect-free tools shared by the calculator and
the layout generator: decimal conversion, quantization to tape graduations,
fraction reduction, text parsing, formatting, and arithmetic.
"""

from .arithmetic import DivideByZeroError, Operation, perform_operation
from .conversion import (
    round_to_tape_mark,
    to_decimal_inches,
    to_imperial_measurement,
)
from .formatting import format_as_decimal, format_imperial_measurement
from .parser import normalize_input, parse_input
from .reduction import ReducedFraction, reduce_fraction
from .types import (
    INCHES_PER_FOOT,
    DisplayFormat,
    DisplayOptions,
    Measurement,
    TapePrecision,
    coerce_precision,
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
    "coerce_precision",
    # conversion
    "INCHES_PER_FOOT",
    "to_decimal_inches",
    "round_to_tape_mark",
    "to_imperial_measurement",
    # reduction
    "reduce_fraction",
    # parsing
    "normalize_input",
    "parse_input",
    # formatting
    "format_imperial_measurement",
    "format_as_decimal",
    # arithmetic
    "perform_operation",
]
