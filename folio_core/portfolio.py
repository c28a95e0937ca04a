"""
Portfolio: holdings keyed by symbol, and the profit / annualized return over a date range.

Position sizes are assumed constant over the queried range; partial buys and
sells between start and end are not modelled. Not safe for concurrent mutation.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from folio_core.errors import AlreadyExistsError, DegenerateRangeError, NotFoundError
from folio_core.position import Position
from folio_core.pricing import SeededPriceOracle
from folio_core.returns import (
    annualize,
    cumulative_return,
    days_held,
    effective_start_date,
    is_degenerate,
)
from folio_core.symbol import Symbol

logger = logging.getLogger(__name__)

# Set to "true" to raise DegenerateRangeError instead of returning inf/nan annualized returns.
STRICT_RETURNS_ENV = "FOLIO_STRICT_RETURNS"

PriceFunction = Callable[[Symbol, int], float]


def _as_symbol(symbol: Symbol | str) -> Symbol:
    return symbol if isinstance(symbol, Symbol) else Symbol.from_string(symbol)


class Portfolio:
    """
    Holdings of one owner. At most one Position per symbol.

    price_oracle: any callable (symbol, date) -> float; defaults to SeededPriceOracle().
    strict_returns: raise on degenerate annualized-return inputs; defaults to FOLIO_STRICT_RETURNS.
    """

    def __init__(
        self,
        owner: int,
        price_oracle: PriceFunction | None = None,
        *,
        strict_returns: bool | None = None,
    ) -> None:
        self.owner = owner
        self.price_oracle: PriceFunction = price_oracle if price_oracle is not None else SeededPriceOracle()
        if strict_returns is None:
            strict_returns = os.environ.get(STRICT_RETURNS_ENV, "").lower() == "true"
        self.strict_returns = strict_returns
        self._holdings: dict[Symbol, Position] = {}

    def __repr__(self) -> str:
        return f"Portfolio(owner={self.owner!r}, holdings={self._holdings!r})"

    def __len__(self) -> int:
        return len(self._holdings)

    def __contains__(self, symbol: object) -> bool:
        if isinstance(symbol, str):
            try:
                symbol = Symbol.from_string(symbol)
            except ValueError:
                return False
        return symbol in self._holdings

    @property
    def holdings(self) -> dict[Symbol, Position]:
        """Copy of the symbol -> Position mapping."""
        return dict(self._holdings)

    def add_stock(self, symbol: Symbol | str, quantity: int, purchase_date: int) -> None:
        """Insert a new position. Raises AlreadyExistsError if symbol is held."""
        sym = _as_symbol(symbol)
        if sym in self._holdings:
            logger.info("add_stock rejected: %s already in portfolio %s", sym.value, self.owner)
            raise AlreadyExistsError(f"Stock {sym.value} already in portfolio")
        self._holdings[sym] = Position(quantity, purchase_date)
        logger.debug("Added %s: quantity=%s purchase_date=%s", sym.value, quantity, purchase_date)

    def modify_stock(self, symbol: Symbol | str, quantity: int, purchase_date: int) -> None:
        """Replace the whole position for symbol. Raises NotFoundError if not held."""
        sym = _as_symbol(symbol)
        if sym not in self._holdings:
            logger.info("modify_stock rejected: %s not in portfolio %s", sym.value, self.owner)
            raise NotFoundError(f"Stock {sym.value} is not in portfolio")
        self._holdings[sym] = Position(quantity, purchase_date)
        logger.debug("Modified %s: quantity=%s purchase_date=%s", sym.value, quantity, purchase_date)

    def remove_stock(self, symbol: Symbol | str) -> Position:
        """Drop the position for symbol and return it. Raises NotFoundError if not held."""
        sym = _as_symbol(symbol)
        try:
            removed = self._holdings.pop(sym)
        except KeyError:
            logger.info("remove_stock rejected: %s not in portfolio %s", sym.value, self.owner)
            raise NotFoundError(f"Stock {sym.value} is not in portfolio") from None
        logger.debug("Removed %s", sym.value)
        return removed

    def get_stock_data(self, symbol: Symbol | str) -> Position | None:
        """Position for symbol, or None if not held."""
        return self._holdings.get(_as_symbol(symbol))

    def price(self, symbol: Symbol | str, date: int) -> float:
        """Price from the injected oracle."""
        return float(self.price_oracle(_as_symbol(symbol), date))

    # Profit = sum(quantity_i * (price_i(end) - price_i(effective_start_i)))

    def profit(self, start: int, end: int) -> float | None:
        """
        Aggregate profit between start and end (epoch seconds).

        Each holding is priced from max(start, purchase_date). Returns None if start > end.
        """
        if start > end:
            return None

        total = 0.0
        for sym, pos in self._holdings.items():
            init_price = self.price(sym, effective_start_date(pos, start))
            final_price = self.price(sym, end)
            total += (final_price - init_price) * pos.quantity
        return total

    # Annualized return = (1 + cumulative return) ** (365 / days held) - 1
    # Cumulative return = final value / initial value - 1

    def valuation(self, start: int, end: int) -> tuple[float, float] | None:
        """(initial_value, final_value) of the holdings over the window, or None if start > end."""
        if start > end:
            return None

        initial_value = 0.0
        final_value = 0.0
        for sym, pos in self._holdings.items():
            initial_value += self.price(sym, effective_start_date(pos, start)) * pos.quantity
            final_value += self.price(sym, end) * pos.quantity
        return initial_value, final_value

    def annualized_rate_of_return(self, start: int, end: int) -> float | None:
        """
        Annualized return between start and end. Returns None if start > end.

        Days held is the requested window, (end - start) / 86400, for every holding.
        A zero initial value or zero-length window gives inf/nan (logged), or raises
        DegenerateRangeError when strict_returns is on.
        """
        values = self.valuation(start, end)
        if values is None:
            return None
        initial_value, final_value = values

        days = days_held(start, end)
        if is_degenerate(initial_value, days):
            if self.strict_returns:
                raise DegenerateRangeError(
                    f"Cannot annualize: initial_value={initial_value}, days_held={days}"
                )
            logger.warning(
                "Degenerate annualized return inputs: initial_value=%s days_held=%s", initial_value, days
            )
        return annualize(cumulative_return(initial_value, final_value), days)
