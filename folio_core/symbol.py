"""
Symbol: closed set of instruments a portfolio can hold.

Members are compared by identity only; their order carries no meaning.
"""

from __future__ import annotations

from enum import Enum


class Symbol(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"
    J = "J"

    @property
    def key(self) -> int:
        """Stable integer derived from the value string (not the member order)."""
        return int.from_bytes(self.value.encode("ascii"), "big")

    @classmethod
    def from_string(cls, value: str) -> Symbol:
        """
        Parse a symbol, case-insensitively.

        Raises
        ------
        ValueError
            If the value is not one of the supported symbols.
        """
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(
                f"Unsupported symbol: {value}. "
                f"Supported symbols: {', '.join(s.value for s in cls)}"
            ) from None
