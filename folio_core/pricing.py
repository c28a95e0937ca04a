"""
Price oracles: deterministic price(symbol, date) lookups.

The Portfolio receives an oracle as an injected dependency. Any callable
(symbol, date) -> float works; PriceOracle instances are callable.
A real market-data feed would implement PriceOracle with the same signature.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping

import numpy as np
import pandas as pd

from folio_core.errors import PriceUnavailableError
from folio_core.symbol import Symbol

logger = logging.getLogger(__name__)

# Environment variable holding the integer salt for SeededPriceOracle.
PRICE_SEED_ENV = "FOLIO_PRICE_SEED"

_SEED_MODULUS = 2**64
_DATE_STREAM = 0
_SYMBOL_STREAM = 1


class PriceOracle(ABC):
    """
    Base class for price sources. Implementations must be pure: the same
    (symbol, date) always yields the same price.
    """

    @abstractmethod
    def price(self, symbol: Symbol, date: int) -> float:
        """Price of symbol at date (epoch seconds)."""
        ...

    def __call__(self, symbol: Symbol, date: int) -> float:
        return self.price(symbol, date)


class SeededPriceOracle(PriceOracle):
    """
    Stand-in pseudo-random oracle.

    Price is a uniform draw seeded by the date divided by a uniform draw seeded
    by the symbol: positive, total over all integer dates, and different across
    symbols on the same date. seed salts both draws (default: FOLIO_PRICE_SEED or 0).
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = int(os.environ.get(PRICE_SEED_ENV, "0") or 0)
        self.seed = seed

    def _draw(self, stream: int, value: int) -> float:
        rng = np.random.default_rng([self.seed % _SEED_MODULUS, stream, value % _SEED_MODULUS])
        return rng.random()

    def price(self, symbol: Symbol, date: int) -> float:
        numerator = self._draw(_DATE_STREAM, int(date))
        denominator = self._draw(_SYMBOL_STREAM, symbol.key)
        return float(numerator / denominator)


class TablePriceOracle(PriceOracle):
    """
    Oracle backed by a price table: index = epoch seconds, one column per symbol value.

    Lookup is "as of": the last non-missing price at or before the requested date.
    Raises PriceUnavailableError for an unknown symbol or a date before the first price.
    """

    def __init__(self, prices: pd.DataFrame) -> None:
        table = prices.sort_index()
        self._series: dict[str, pd.Series] = {}
        for col in table.columns:
            key = str(col).strip().upper()
            if key in self._series:
                raise ValueError(f"Duplicate price column for symbol {key}: {col!r}")
            self._series[key] = table[col].dropna().astype(float)
        logger.debug("TablePriceOracle: %d symbols, %d dates", len(self._series), len(table.index))

    @classmethod
    def from_mapping(cls, prices: Mapping[Symbol | str, Mapping[int, float]]) -> TablePriceOracle:
        """Build from {symbol: {date: price}}."""
        columns = {
            (s.value if isinstance(s, Symbol) else str(s)): pd.Series(dict(p), dtype=float)
            for s, p in prices.items()
        }
        return cls(pd.DataFrame(columns))

    @property
    def symbols(self) -> list[str]:
        return sorted(self._series)

    def price(self, symbol: Symbol, date: int) -> float:
        series = self._series.get(symbol.value)
        if series is None or series.empty:
            raise PriceUnavailableError(f"No prices for symbol {symbol.value}")
        idx = int(series.index.searchsorted(date, side="right")) - 1
        if idx < 0:
            raise PriceUnavailableError(
                f"No price for {symbol.value} at or before {date} (first price at {series.index[0]})"
            )
        return float(series.iloc[idx])
