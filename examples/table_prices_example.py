"""
Price-table demo: load closing prices from CSV and price the portfolio from them.
"""

from pathlib import Path

from analytics import load_price_csv, print_report
from folio_core import Portfolio, Symbol, TablePriceOracle


def main() -> None:
    csv_path = Path(__file__).resolve().parent / "data" / "sample_prices.csv"
    prices = load_price_csv(csv_path)
    oracle = TablePriceOracle(prices)

    start = int(prices.index[0])
    end = int(prices.index[-1])

    portfolio = Portfolio(owner=1, price_oracle=oracle)
    portfolio.add_stock(Symbol.A, 10, start)
    portfolio.add_stock(Symbol.C, 40, int(prices.index[2]))  # bought mid-year
    portfolio.add_stock(Symbol.G, 100, start)

    print_report(portfolio, start, end)


if __name__ == "__main__":
    main()
