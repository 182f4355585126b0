import math
from dataclasses import dataclass
from datetime import date
from numbers import Integral
from typing import Any, Literal

from .numeric import safe_percent

OrderSide = Literal["buy", "sell"]
Direction = Literal["up", "down"]


def parse_order_side(side: str) -> OrderSide:
    normalized = side.strip().lower()
    if normalized == "buy":
        return "buy"
    if normalized == "sell":
        return "sell"
    raise ValueError(f"order side must be 'buy' or 'sell', got {side!r}")


@dataclass(frozen=True)
class Security:
    symbol: str
    name: str
    base_price: float
    quote_price: float
    drift_rate: float


@dataclass(frozen=True)
class PricePoint:
    date: date
    price: float
    volume: int


@dataclass(frozen=True)
class IndicatorSample:
    date: date
    price: float
    sma: float | None
    ema: float
    rsi: float


@dataclass(frozen=True)
class PriceSummary:
    symbol: str
    current_price: float
    price_change: float
    price_change_percent: float


@dataclass(frozen=True)
class Position:
    """A holding. Valuation fields are derived from the three base fields on every read."""

    symbol: str
    quantity: int
    avg_buy_price: float
    current_price: float
    name: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, Integral) or self.quantity <= 0:
            raise ValueError(f"{self.symbol}: quantity must be a positive integer, got {self.quantity!r}")
        object.__setattr__(self, "quantity", int(self.quantity))
        if not math.isfinite(self.avg_buy_price) or self.avg_buy_price < 0:
            raise ValueError(f"{self.symbol}: avg_buy_price must be >= 0, got {self.avg_buy_price!r}")
        if not math.isfinite(self.current_price) or self.current_price <= 0:
            raise ValueError(f"{self.symbol}: current_price must be > 0, got {self.current_price!r}")

    @property
    def cost_basis(self) -> float:
        return self.quantity * self.avg_buy_price

    @property
    def total_value(self) -> float:
        return self.quantity * self.current_price

    @property
    def pl_amount(self) -> float:
        return self.total_value - self.cost_basis

    @property
    def pl_percent(self) -> float:
        return safe_percent(self.pl_amount, self.cost_basis)

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "quantity": self.quantity,
            "avg_buy_price": self.avg_buy_price,
            "current_price": self.current_price,
            "total_value": self.total_value,
            "pl_amount": self.pl_amount,
            "pl_percent": self.pl_percent,
        }


@dataclass(frozen=True)
class PortfolioTotals:
    total_value: float
    total_pl: float
    total_pl_percent: float


@dataclass(frozen=True)
class PortfolioSummary:
    positions: tuple[Position, ...]
    totals: PortfolioTotals
    degenerate_symbols: tuple[str, ...] = ()


@dataclass(frozen=True)
class ForecastPoint:
    label: str
    price: float


@dataclass(frozen=True)
class Forecast:
    symbol: str
    order_side: OrderSide
    current_price: float
    predicted_price: float
    change_percent: float
    direction: Direction
    confidence_percent: int
    explanation: str
    path: tuple[ForecastPoint, ...]


@dataclass(frozen=True)
class OrderTicket:
    symbol: str
    side: OrderSide
    quantity: int
    price: float
    estimated_total: float
