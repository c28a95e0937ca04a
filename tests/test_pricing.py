"""
Tests for price oracles: SeededPriceOracle, TablePriceOracle, PriceOracle interface.
"""

import pandas as pd
import pytest

from folio_core import PriceOracle, PriceUnavailableError, SeededPriceOracle, Symbol, TablePriceOracle
from folio_core.pricing import PRICE_SEED_ENV


# --- SeededPriceOracle ---


def test_seeded_oracle_deterministic():
    oracle = SeededPriceOracle()
    assert oracle.price(Symbol.A, 12345) == oracle.price(Symbol.A, 12345)
    assert SeededPriceOracle().price(Symbol.A, 12345) == oracle.price(Symbol.A, 12345)


def test_seeded_oracle_differs_by_symbol():
    oracle = SeededPriceOracle()
    assert oracle.price(Symbol.A, 12345) != oracle.price(Symbol.B, 12345)


def test_seeded_oracle_differs_by_date():
    oracle = SeededPriceOracle()
    assert oracle.price(Symbol.A, 12345) != oracle.price(Symbol.A, 12346)


def test_seeded_oracle_positive_and_total():
    oracle = SeededPriceOracle()
    for sym in Symbol:
        for date in (-86400, 0, 12345, 2**40):
            assert oracle.price(sym, date) > 0.0


def test_seeded_oracle_callable():
    oracle = SeededPriceOracle()
    assert isinstance(oracle, PriceOracle)
    assert oracle(Symbol.C, 23455) == oracle.price(Symbol.C, 23455)


def test_seeded_oracle_seed_from_environment(monkeypatch):
    monkeypatch.setenv(PRICE_SEED_ENV, "7")
    salted = SeededPriceOracle()
    assert salted.seed == 7
    assert SeededPriceOracle(seed=0).seed == 0
    assert salted.price(Symbol.A, 12345) != SeededPriceOracle(seed=0).price(Symbol.A, 12345)


def test_seeded_oracle_default_seed(monkeypatch):
    monkeypatch.delenv(PRICE_SEED_ENV, raising=False)
    assert SeededPriceOracle().seed == 0


# --- TablePriceOracle ---


def test_table_oracle_as_of_lookup():
    oracle = TablePriceOracle.from_mapping({Symbol.A: {0: 10.0, 100: 12.0}})
    assert oracle.price(Symbol.A, 0) == 10.0
    assert oracle.price(Symbol.A, 50) == 10.0
    assert oracle.price(Symbol.A, 100) == 12.0
    assert oracle.price(Symbol.A, 10_000) == 12.0


def test_table_oracle_skips_missing_values():
    oracle = TablePriceOracle.from_mapping({"A": {0: 10.0, 100: 12.0}, "C": {0: 5.0, 200: 6.0}})
    # C has no price at 100 in the aligned table
    assert oracle.price(Symbol.C, 150) == 5.0
    assert oracle.price(Symbol.C, 200) == 6.0
    assert oracle.symbols == ["A", "C"]


def test_table_oracle_unsorted_frame():
    df = pd.DataFrame({"a": [12.0, 10.0]}, index=[100, 0])
    oracle = TablePriceOracle(df)
    assert oracle.price(Symbol.A, 50) == 10.0


def test_table_oracle_unknown_symbol():
    oracle = TablePriceOracle.from_mapping({Symbol.A: {0: 10.0}})
    with pytest.raises(PriceUnavailableError):
        oracle.price(Symbol.B, 0)


def test_table_oracle_before_first_price():
    oracle = TablePriceOracle.from_mapping({Symbol.A: {100: 10.0}})
    with pytest.raises(PriceUnavailableError):
        oracle.price(Symbol.A, 99)
    with pytest.raises(LookupError):
        oracle.price(Symbol.A, 0)


def test_table_oracle_rejects_duplicate_symbol_columns():
    df = pd.DataFrame({"a": [1.0], "A": [2.0]}, index=[0])
    with pytest.raises(ValueError, match="Duplicate"):
        TablePriceOracle(df)
