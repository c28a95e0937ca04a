"""
Tests for analytics data_loader: load_price_csv, load_price_frame.
"""

from pathlib import Path

import pandas as pd
import pytest

from analytics.data_loader import load_price_csv, load_price_frame
from folio_core import Portfolio, Symbol, TablePriceOracle

JAN_1_2024 = 1704067200
DAY = 86400


def test_load_price_frame_date_strings():
    df = pd.DataFrame({
        "Date": ["2024-01-02", "2024-01-01"],
        "a": [101.0, 100.0],
        "c ": [51.0, 50.0],
    })
    out = load_price_frame(df)
    assert list(out.columns) == ["A", "C"]
    assert out.index.name == "date"
    assert list(out.index) == [JAN_1_2024, JAN_1_2024 + DAY]
    assert out.loc[JAN_1_2024, "A"] == 100.0


def test_load_price_frame_epoch_column():
    df = pd.DataFrame({"ts": [200, 100], "B": [2.0, 1.0]})
    out = load_price_frame(df, date_column="ts")
    assert list(out.index) == [100, 200]
    assert list(out["B"]) == [1.0, 2.0]


def test_load_price_frame_datetime_index():
    df = pd.DataFrame({"g": [1.0, 2.0]}, index=pd.date_range("2024-01-01", periods=2, freq="D"))
    out = load_price_frame(df)
    assert list(out.index) == [JAN_1_2024, JAN_1_2024 + DAY]
    assert list(out.columns) == ["G"]


def test_load_price_frame_coerces_non_numeric():
    df = pd.DataFrame({"date": [0, 1], "A": ["1.5", "n/a"]})
    out = load_price_frame(df)
    assert out.loc[0, "A"] == 1.5
    assert pd.isna(out.loc[1, "A"])


def test_load_price_csv_feeds_table_oracle(tmp_path):
    csv_path = tmp_path / "prices.csv"
    csv_path.write_text("date,A,C\n2024-01-01,100.0,50.0\n2024-01-03,110.0,45.0\n")
    prices = load_price_csv(csv_path)
    oracle = TablePriceOracle(prices)
    assert oracle.price(Symbol.A, JAN_1_2024 + DAY) == 100.0

    p = Portfolio(0, oracle)
    p.add_stock(Symbol.A, 2, JAN_1_2024)
    p.add_stock(Symbol.C, 4, JAN_1_2024)
    assert p.profit(JAN_1_2024, JAN_1_2024 + 2 * DAY) == pytest.approx(2 * 10.0 + 4 * -5.0)


def test_load_price_csv_uses_sample_data():
    """Use the sample CSV in examples/data if present."""
    csv_path = Path(__file__).resolve().parent.parent / "examples" / "data" / "sample_prices.csv"
    if not csv_path.exists():
        pytest.skip("sample_prices.csv not found")
    df = load_price_csv(csv_path)
    assert not df.empty
    assert {"A", "C", "G"} <= set(df.columns)
    assert df.index.is_monotonic_increasing


def test_load_price_frame_float_epoch_column():
    df = pd.DataFrame({"date": [86400.0, 172800.0, None], "A": [1.0, 2.0, 3.0]}).dropna()
    out = load_price_frame(df)
    assert list(out.index) == [86400, 172800]
    assert TablePriceOracle(out).price(Symbol.A, 100000) == 1.0


def test_load_price_csv_float_epochs(tmp_path):
    csv_path = tmp_path / "prices.csv"
    csv_path.write_text("date,A\n86400.0,1.0\n172800.0,2.0\n")
    out = load_price_csv(csv_path)
    assert list(out.index) == [86400, 172800]
