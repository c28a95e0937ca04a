"""
Portfolio report: print a return summary and per-holding breakdown.
"""

from __future__ import annotations

from folio_core.portfolio import Portfolio

from analytics.metrics import ReturnMetrics, compute_metrics, holding_breakdown


def print_report(portfolio: Portfolio, start: int, end: int) -> ReturnMetrics | None:
    """
    Compute metrics for [start, end] and print a performance summary.

    Returns
    -------
    ReturnMetrics or None
        The computed metrics; None (and a one-line notice) if start > end.
    """
    metrics = compute_metrics(portfolio, start, end)
    if metrics is None:
        print(f"Invalid range: start {start} is after end {end}")
        return None

    print("--- Portfolio Returns ---")
    print(f"Owner:             {portfolio.owner}")
    print(f"Window:            {metrics.start} -> {metrics.end} ({metrics.days_held:.2f} days)")
    print(f"Initial value:     {metrics.initial_value:,.2f}")
    print(f"Final value:       {metrics.final_value:,.2f}")
    print(f"Profit:            {metrics.profit:,.2f}")
    print(f"Cumulative return: {metrics.cumulative_return * 100.0:.2f}%")
    print(f"Annualized return: {metrics.annualized_return * 100.0:.2f}%")
    print(f"Holdings:          {len(portfolio)}")
    breakdown = holding_breakdown(portfolio, start, end)
    if breakdown is not None and not breakdown.empty:
        print(breakdown.to_string(index=False))
    print("-------------------------")
    return metrics
