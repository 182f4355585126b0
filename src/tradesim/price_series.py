from __future__ import annotations

import logging
from datetime import date, timedelta

import numpy as np

from .errors import InvalidRangeError
from .numeric import clamp_price, round_half_up
from .types import PricePoint

logger = logging.getLogger(__name__)

DEFAULT_VOLATILITY = 0.02
VOLUME_LOW = 1_000_000
VOLUME_HIGH = 11_000_000


def day_count(start_date: date, end_date: date) -> int:
    if end_date < start_date:
        raise InvalidRangeError(f"end_date {end_date.isoformat()} precedes start_date {start_date.isoformat()}")
    return (end_date - start_date).days + 1


class PriceSeriesGenerator:
    """Daily random walk with drift.

    Every calendar day in the range gets a point. Pass a seeded
    ``np.random.Generator`` for reproducible paths.
    """

    def __init__(self, rng: np.random.Generator | None = None, volatility: float = DEFAULT_VOLATILITY) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.volatility = volatility

    def generate(
        self,
        symbol: str,
        start_date: date,
        end_date: date,
        base_price: float,
        drift_rate: float,
    ) -> tuple[PricePoint, ...]:
        n_days = day_count(start_date, end_date)
        if base_price <= 0:
            raise ValueError(f"base_price must be > 0, got {base_price!r}")

        points: list[PricePoint] = []
        price = float(base_price)
        for offset in range(n_days):
            u = float(self.rng.random())
            change = (u - 0.5) * self.volatility + drift_rate
            price = clamp_price(price * (1.0 + change))
            volume = int(self.rng.integers(VOLUME_LOW, VOLUME_HIGH))
            points.append(
                PricePoint(
                    date=start_date + timedelta(days=offset),
                    price=clamp_price(round_half_up(price)),
                    volume=volume,
                )
            )

        logger.debug(f"Generated {len(points)} points for {symbol} from {start_date} to {end_date}")
        return tuple(points)
