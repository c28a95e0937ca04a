"""
folio-core: portfolio profit and annualized return over a date range.

Pure in-memory calculations. Prices come from an injected oracle; no market-data feed.
"""

__version__ = "0.1.0"

from folio_core.errors import (
    AlreadyExistsError,
    DegenerateRangeError,
    InvalidPositionError,
    NotFoundError,
    PortfolioError,
    PriceUnavailableError,
)
from folio_core.symbol import Symbol
from folio_core.position import Position
from folio_core.pricing import PriceOracle, SeededPriceOracle, TablePriceOracle
from folio_core.portfolio import Portfolio

__all__ = [
    "Symbol",
    "Position",
    "PriceOracle",
    "SeededPriceOracle",
    "TablePriceOracle",
    "Portfolio",
    "PortfolioError",
    "AlreadyExistsError",
    "NotFoundError",
    "InvalidPositionError",
    "DegenerateRangeError",
    "PriceUnavailableError",
]
