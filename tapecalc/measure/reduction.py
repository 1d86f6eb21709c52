"""Fraction reduction to lowest terms."""

from __future__ import annotations

import math
from typing import NamedTuple


class ReducedFraction(NamedTuple):
    """A numerator/denominator pair in lowest terms, sign on the numerator."""

    numerator: int
    denominator: int


def reduce_fraction(numerator: int, denominator: int) -> ReducedFraction:
    """
    Reduce a fraction to lowest terms.

    A zero numerator or zero denominator yields the canonical ``0/1``. The
    sign of the result is always carried on the numerator, so ``2/-4`` and
    ``-2/4`` both reduce to ``-1/2``.
    """
    if denominator == 0 or numerator == 0:
        return ReducedFraction(0, 1)

    divisor = math.gcd(numerator, denominator)
    n = numerator // divisor
    d = denominator // divisor
    if d < 0:
        n, d = -n, -d
    return ReducedFraction(n, d)
