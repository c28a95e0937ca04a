"""
Load price tables from CSV or DataFrame for TablePriceOracle.

Output: index of epoch seconds named 'date', one upper-cased column per symbol.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

DATE_ALIASES = ("date", "datetime", "timestamp", "time")

_EPOCH = pd.Timestamp("1970-01-01", tz="UTC")
_ONE_SECOND = pd.Timedelta(seconds=1)


def _to_epoch_seconds(values: pd.Series, datetime_format: str | None = None) -> pd.Series:
    """Numeric epochs (int or float) pass through as seconds; anything else is parsed as a datetime (UTC)."""
    if (
        datetime_format is None
        and pd.api.types.is_numeric_dtype(values)
        and not pd.api.types.is_bool_dtype(values)
    ):
        return values.astype("int64")
    parsed = pd.to_datetime(values, format=datetime_format, utc=True)
    return (parsed - _EPOCH) // _ONE_SECOND


def _find_date_column(df: pd.DataFrame) -> str:
    lower = {str(c).lower(): c for c in df.columns}
    for alias in DATE_ALIASES:
        if alias in lower:
            return lower[alias]
    return df.columns[0]


def load_price_frame(
    df: pd.DataFrame,
    *,
    date_column: str | None = None,
    datetime_format: str | None = None,
) -> pd.DataFrame:
    """
    Normalize a price table.

    Parameters
    ----------
    df : pd.DataFrame
        Raw table. Dates come from date_column, a 'date'-like column, or a DatetimeIndex.
    date_column : str, optional
        Column holding dates (epoch seconds or date strings).
    datetime_format : str, optional
        Format for parsing date strings (e.g. '%Y-%m-%d').

    Returns
    -------
    pd.DataFrame
        Sorted by date; index 'date' in epoch seconds; numeric symbol columns.
    """
    out = df.copy()
    out.columns = [str(c).strip() for c in out.columns]

    if date_column is None and isinstance(out.index, pd.DatetimeIndex):
        idx = out.index if out.index.tz is not None else out.index.tz_localize("UTC")
        out.index = (idx - _EPOCH) // _ONE_SECOND
    else:
        date_col = date_column or _find_date_column(out)
        epochs = _to_epoch_seconds(out[date_col], datetime_format)
        out = out.drop(columns=[date_col])
        out.index = pd.Index(epochs.to_numpy(), dtype="int64")

    out.index.name = "date"
    out.columns = [c.upper() for c in out.columns]
    out = out.apply(pd.to_numeric, errors="coerce")
    return out.sort_index()


def load_price_csv(
    path: str | Path,
    *,
    date_column: str | None = None,
    datetime_format: str | None = None,
) -> pd.DataFrame:
    """Read a price table CSV and normalize it with load_price_frame."""
    df = pd.read_csv(path)
    return load_price_frame(df, date_column=date_column, datetime_format=datetime_format)
