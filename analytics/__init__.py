"""
Analytics on top of folio-core.

Per-holding breakdown, window metrics, printed report, price-table loading.
"""

from analytics.data_loader import load_price_csv, load_price_frame
from analytics.metrics import ReturnMetrics, compute_metrics, holding_breakdown
from analytics.portfolio_report import print_report

__all__ = [
    "ReturnMetrics",
    "compute_metrics",
    "holding_breakdown",
    "load_price_csv",
    "load_price_frame",
    "print_report",
]
