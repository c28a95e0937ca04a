"""
Profit and annualized return demo with the seeded stand-in price oracle.

Demonstrates: build portfolio -> add holdings -> profit / annualized return -> report.
"""

import logging

from analytics import print_report
from folio_core import Portfolio, SeededPriceOracle, Symbol


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    portfolio = Portfolio(owner=0, price_oracle=SeededPriceOracle())
    portfolio.add_stock(Symbol.A, 100, 12345)
    portfolio.add_stock(Symbol.C, 200, 23455)
    portfolio.add_stock(Symbol.G, 300, 34512)

    print("Profit:", portfolio.profit(11111, 22222))
    print("Annualized return:", portfolio.annualized_rate_of_return(11111, 22222))

    # Invalid range: answered with None, not an error
    print("Reversed range:", portfolio.profit(22222, 11111))

    print_report(portfolio, 11111, 22222)


if __name__ == "__main__":
    main()
