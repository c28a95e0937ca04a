"""
Exception hierarchy for portfolio operations.

Invalid date ranges are not errors: the return calculations answer None for them.
"""


class PortfolioError(Exception):
    """Base exception for all portfolio errors."""


class AlreadyExistsError(PortfolioError):
    """Raised by add_stock when the symbol is already held."""


class NotFoundError(PortfolioError):
    """Raised by modify_stock / remove_stock when the symbol is not held."""


class InvalidPositionError(PortfolioError, ValueError):
    """Raised when a position is built from a bad quantity or purchase date."""


class DegenerateRangeError(PortfolioError, ArithmeticError):
    """Raised in strict mode when an annualized return cannot be computed (zero value or zero-length window)."""


class PriceUnavailableError(PortfolioError, LookupError):
    """Raised by a table-backed oracle when it has no price for a symbol/date."""
