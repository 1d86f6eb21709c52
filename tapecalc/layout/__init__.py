"""Mark layout along a length: equal divisions, fixed intervals, even spacing."""

from .intervals import (
    LengthInput,
    custom_interval_marks,
    divide_length,
    even_spacing_marks,
    format_marks,
)

__all__ = [
    "LengthInput",
    "divide_length",
    "custom_interval_marks",
    "even_spacing_marks",
    "format_marks",
]
