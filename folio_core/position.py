"""
Position: quantity held and when it was bought.

Immutable. A portfolio replaces a Position wholesale; fields are never updated one at a time.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral

from folio_core.errors import InvalidPositionError


def _is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class Position:
    """Units held and purchase date (epoch seconds)."""

    quantity: int
    purchase_date: int

    def __post_init__(self) -> None:
        if not _is_integer(self.quantity) or self.quantity < 0:
            raise InvalidPositionError(f"Quantity must be a non-negative integer, got {self.quantity!r}")
        if not _is_integer(self.purchase_date):
            raise InvalidPositionError(f"Purchase date must be an integer epoch timestamp, got {self.purchase_date!r}")
        # Normalize numpy integers to plain int
        object.__setattr__(self, "quantity", int(self.quantity))
        object.__setattr__(self, "purchase_date", int(self.purchase_date))
