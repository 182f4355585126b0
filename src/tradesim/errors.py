from __future__ import annotations


class TradesimError(Exception):
    """Base class for errors raised by the analytics core."""


class InvalidRangeError(TradesimError, ValueError):
    """End date precedes start date."""


class InvalidSeriesError(TradesimError, ValueError):
    """Price series is not gap-free or contains a non-positive price."""


class UnknownSymbolError(TradesimError, LookupError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unknown symbol: {symbol!r}")
        self.symbol = symbol


class DegenerateInputWarning(UserWarning):
    """Position has a zero cost basis; its P&L percent is reported as 0."""
