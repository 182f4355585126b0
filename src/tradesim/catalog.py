from __future__ import annotations

from collections.abc import Iterable

from .errors import UnknownSymbolError
from .types import Security

DEFAULT_BASE_PRICE = 100.0
DEFAULT_DRIFT_RATE = 0.0002

DEFAULT_SECURITIES: tuple[Security, ...] = (
    Security("AAPL", "Apple Inc.", base_price=170.0, quote_price=175.32, drift_rate=0.0002),
    Security("TSLA", "Tesla Inc.", base_price=240.0, quote_price=245.67, drift_rate=0.0005),
    Security("MSFT", "Microsoft Corp.", base_price=410.0, quote_price=412.89, drift_rate=0.0002),
    Security("GOOGL", "Alphabet Inc.", base_price=2750.0, quote_price=2758.42, drift_rate=0.0002),
    Security("AMZN", "Amazon.com Inc.", base_price=175.0, quote_price=178.92, drift_rate=0.0002),
    Security("NVDA", "NVIDIA Corp.", base_price=850.0, quote_price=875.42, drift_rate=0.001),
)


class SymbolCatalog:
    def __init__(self, securities: Iterable[Security] = DEFAULT_SECURITIES) -> None:
        self._by_symbol = {s.symbol.upper(): s for s in securities}

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.strip().upper() in self._by_symbol

    def symbols(self) -> list[str]:
        return list(self._by_symbol)

    def get(self, symbol: str) -> Security | None:
        return self._by_symbol.get(symbol.strip().upper())

    def require(self, symbol: str) -> Security:
        security = self.get(symbol)
        if security is None:
            raise UnknownSymbolError(symbol)
        return security

    def base_price(self, symbol: str) -> float:
        # Unknown symbols still get a price level; identity checks go through require().
        security = self.get(symbol)
        return security.base_price if security else DEFAULT_BASE_PRICE

    def drift_rate(self, symbol: str) -> float:
        security = self.get(symbol)
        return security.drift_rate if security else DEFAULT_DRIFT_RATE
