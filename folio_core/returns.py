"""
Return math shared by Portfolio and analytics.

Arithmetic runs on NumPy float64 with divide/invalid warnings silenced, so a zero
initial value or a zero-length window yields inf/nan rather than an exception.
Callers decide what to do with non-finite results.
"""

from __future__ import annotations

import numpy as np

from folio_core.position import Position

SECONDS_PER_DAY = 86400
DAYS_PER_YEAR = 365


def effective_start_date(position: Position, start: int) -> int:
    """A position is never priced before it was bought: max(start, purchase_date)."""
    return max(start, position.purchase_date)


def days_held(start: int, end: int) -> float:
    """Length of the requested window in days."""
    return (end - start) / SECONDS_PER_DAY


def cumulative_return(initial_value: float, final_value: float) -> float:
    """final / initial - 1. inf or nan when initial_value is 0."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(final_value) / np.float64(initial_value) - 1.0)


def annualize(cumulative: float, days: float) -> float:
    """(1 + cumulative) ** (DAYS_PER_YEAR / days) - 1."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        exponent = np.float64(DAYS_PER_YEAR) / np.float64(days)
        return float(np.power(np.float64(1.0 + cumulative), exponent) - 1.0)


def is_degenerate(initial_value: float, days: float) -> bool:
    """True when annualize() would divide by zero."""
    return initial_value == 0 or days == 0
