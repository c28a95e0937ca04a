"""
Return metrics: profit, cumulative and annualized return, per-holding breakdown.

Totals come from the Portfolio methods so both views always agree.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from folio_core.portfolio import Portfolio
from folio_core.returns import cumulative_return, days_held, effective_start_date

BREAKDOWN_COLUMNS = (
    "symbol",
    "quantity",
    "purchase_date",
    "effective_start",
    "start_price",
    "end_price",
    "initial_value",
    "final_value",
    "profit",
)


@dataclass
class ReturnMetrics:
    """Portfolio performance over one window [start, end] (epoch seconds)."""

    start: int
    end: int
    initial_value: float
    final_value: float
    profit: float
    cumulative_return: float
    days_held: float
    annualized_return: float


def holding_breakdown(portfolio: Portfolio, start: int, end: int) -> pd.DataFrame | None:
    """
    One row per holding, sorted by symbol.

    Parameters
    ----------
    portfolio : Portfolio
        Holdings and price oracle.
    start, end : int
        Window bounds in epoch seconds.

    Returns
    -------
    pd.DataFrame or None
        Columns in BREAKDOWN_COLUMNS; None if start > end.
    """
    if start > end:
        return None

    rows = []
    for sym, pos in sorted(portfolio.holdings.items(), key=lambda item: item[0].value):
        eff = effective_start_date(pos, start)
        start_price = portfolio.price(sym, eff)
        end_price = portfolio.price(sym, end)
        rows.append(
            {
                "symbol": sym.value,
                "quantity": pos.quantity,
                "purchase_date": pos.purchase_date,
                "effective_start": eff,
                "start_price": start_price,
                "end_price": end_price,
                "initial_value": start_price * pos.quantity,
                "final_value": end_price * pos.quantity,
                "profit": (end_price - start_price) * pos.quantity,
            }
        )
    return pd.DataFrame(rows, columns=list(BREAKDOWN_COLUMNS))


def compute_metrics(portfolio: Portfolio, start: int, end: int) -> ReturnMetrics | None:
    """
    Compute window metrics for a portfolio.

    Returns None if start > end. Degenerate windows follow the portfolio's
    strict_returns setting (inf/nan, or DegenerateRangeError).
    """
    values = portfolio.valuation(start, end)
    if values is None:
        return None
    initial_value, final_value = values

    return ReturnMetrics(
        start=start,
        end=end,
        initial_value=initial_value,
        final_value=final_value,
        profit=portfolio.profit(start, end),
        cumulative_return=cumulative_return(initial_value, final_value),
        days_held=days_held(start, end),
        annualized_return=portfolio.annualized_rate_of_return(start, end),
    )
