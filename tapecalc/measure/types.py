"""
Core type definitions for the measurement layer.

All types are frozen dataclasses or enums. Measurements use the folded
representation: feet are always carried as inches, and the sign of the whole
length lives on a single ``negative`` flag while every numeric component is a
magnitude.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

INCHES_PER_FOOT: int = 12


class TapePrecision(int, Enum):
    """Finest tape-measure graduation, as the denominator of one inch."""

    EIGHTH = 8
    SIXTEENTH = 16
    THIRTY_SECOND = 32


class DisplayFormat(str, Enum):
    """How fractional inches are rendered for display."""

    REDUCED = "reduced"
    SIXTEENTHS = "sixteenths"


def coerce_precision(precision: int) -> TapePrecision:
    """Return the TapePrecision for an int or enum value, or raise ValueError."""
    try:
        return TapePrecision(precision)
    except ValueError:
        allowed = ", ".join(str(p.value) for p in TapePrecision)
        raise ValueError(f"precision must be one of {allowed}, got {precision!r}") from None


@dataclass(frozen=True)
class Measurement:
    """
    A signed imperial length: whole inches plus a fractional-inch remainder.

    Components are magnitudes and must be non-negative. A denominator of 0 is
    tolerated and treated as "no fraction" by every consumer. A zero-length
    measurement is never negative.
    """

    inches: int
    numerator: int = 0
    denominator: int = 1
    negative: bool = False

    def __post_init__(self) -> None:
        if self.inches < 0:
            raise ValueError(f"inches must be non-negative, got {self.inches}")
        if self.numerator < 0:
            raise ValueError(f"numerator must be non-negative, got {self.numerator}")
        if self.denominator < 0:
            raise ValueError(f"denominator must be non-negative, got {self.denominator}")
        if self.negative and self.is_zero:
            object.__setattr__(self, "negative", False)

    @classmethod
    def zero(cls) -> Measurement:
        return cls(inches=0, numerator=0, denominator=1)

    @property
    def is_zero(self) -> bool:
        """True when both the whole inches and the effective fraction are zero."""
        return self.inches == 0 and (self.numerator == 0 or self.denominator == 0)

    @property
    def feet(self) -> int:
        """Whole feet contained in the whole-inch component."""
        return self.inches // INCHES_PER_FOOT


@dataclass(frozen=True)
class DisplayOptions:
    """Rendering preferences for format_imperial_measurement."""

    format: DisplayFormat = DisplayFormat.REDUCED
    show_feet: bool = False
