from __future__ import annotations

import asyncio
import logging

import numpy as np

from .catalog import SymbolCatalog
from .numeric import round_half_up
from .types import Forecast, ForecastPoint, parse_order_side

logger = logging.getLogger(__name__)

POSITIVE_PROBABILITY = 0.6
MIN_CHANGE_PCT = 2.0
MAX_CHANGE_PCT = 10.0
MIN_CONFIDENCE = 70
MAX_CONFIDENCE = 90
PATH_POINTS = 8
PATH_NOISE = 5.0

BULLISH_REASONS = (
    "strong quarterly earnings and market momentum",
    "recent strategic partnerships and product launches",
    "favorable market conditions and sector growth",
    "technical indicators showing bullish patterns",
    "increased institutional investor confidence",
)
BEARISH_REASONS = (
    "market volatility and economic uncertainty",
    "sector-wide concerns affecting performance",
    "recent regulatory challenges impacting outlook",
)


class ForecastSimulator:
    """Short-horizon price forecast for a catalog symbol.

    Direction is drawn independently of the order side: this models where the
    price goes, not how the order fills.
    """

    def __init__(self, catalog: SymbolCatalog | None = None, rng: np.random.Generator | None = None) -> None:
        self.catalog = catalog if catalog is not None else SymbolCatalog()
        self.rng = rng if rng is not None else np.random.default_rng()

    def simulate(self, symbol: str, order_side: str) -> Forecast:
        security = self.catalog.require(symbol)
        side = parse_order_side(order_side)
        current = security.quote_price

        is_positive = bool(self.rng.random() < POSITIVE_PROBABILITY)
        change_pct = float(self.rng.uniform(MIN_CHANGE_PCT, MAX_CHANGE_PCT))
        sign = 1.0 if is_positive else -1.0
        predicted = current * (1.0 + change_pct / 100.0 * sign)

        path = []
        for i in range(PATH_POINTS):
            progress = i / (PATH_POINTS - 1)
            noise = (float(self.rng.random()) - 0.5) * PATH_NOISE
            price = current + (predicted - current) * progress + noise
            path.append(ForecastPoint(label=f"Day {i + 1}", price=round_half_up(price)))

        confidence = int(self.rng.integers(MIN_CONFIDENCE, MAX_CONFIDENCE + 1))
        reasons = BULLISH_REASONS if is_positive else BEARISH_REASONS
        reason = reasons[int(self.rng.integers(0, len(reasons)))]
        movement = "upward" if is_positive else "downward"

        forecast = Forecast(
            symbol=security.symbol,
            order_side=side,
            current_price=current,
            predicted_price=round_half_up(predicted),
            change_percent=min(max(round_half_up(change_pct), MIN_CHANGE_PCT), MAX_CHANGE_PCT),
            direction="up" if is_positive else "down",
            confidence_percent=confidence,
            explanation=f"Based on {reason}, the model predicts {movement} movement in the coming week.",
            path=tuple(path),
        )
        logger.debug(
            f"Forecast {security.symbol} {side}: {forecast.direction} {forecast.change_percent:.2f}% "
            f"confidence={confidence}"
        )
        return forecast

    async def simulate_async(self, symbol: str, order_side: str, latency_seconds: float = 0.0) -> Forecast:
        # Unknown symbols and sides fail before the delay.
        self.catalog.require(symbol)
        parse_order_side(order_side)
        if latency_seconds > 0:
            await asyncio.sleep(latency_seconds)
        return self.simulate(symbol, order_side)
