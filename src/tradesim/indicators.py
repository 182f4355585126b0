"""Technical indicators over a daily price series.

SMA and EMA are the textbook definitions. RSI is a simplified variant: each of
the previous ``rsi_period`` prices is compared against the *current* price
rather than day-over-day, so values differ from Wilder's RSI. Downstream
charts and fixtures depend on this exact shape.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import asdict
from datetime import timedelta
from itertools import accumulate

import pandas as pd

from .errors import InvalidSeriesError
from .numeric import round_half_up, safe_percent
from .types import IndicatorSample, PricePoint, PriceSummary

logger = logging.getLogger(__name__)

NEUTRAL_RSI = 50.0
RS_WHEN_NO_LOSS = 100.0


def validate_series(series: Sequence[PricePoint]) -> None:
    for prev, cur in zip(series, series[1:]):
        if cur.date - prev.date != timedelta(days=1):
            raise InvalidSeriesError(f"Series is not consecutive daily data: {prev.date} -> {cur.date}")
    for p in series:
        if not math.isfinite(p.price) or p.price <= 0:
            raise InvalidSeriesError(f"Non-positive or non-finite price {p.price!r} on {p.date}")


def sma(prices: Sequence[float], period: int) -> list[float | None]:
    rolled = pd.Series(list(prices), dtype=float).rolling(period).mean()
    return [None if pd.isna(v) else round_half_up(float(v)) for v in rolled]


def ema(prices: Sequence[float], period: int, seed: float | None = None) -> list[float]:
    if not prices:
        return []
    k = 2.0 / (period + 1)
    start = prices[0] if seed is None else seed
    return list(accumulate(prices, lambda prev, price: round_half_up(price * k + prev * (1 - k)), initial=start))[1:]


def rsi_at(prices: Sequence[float], i: int, period: int) -> float:
    if i <= period:
        return NEUTRAL_RSI

    current = prices[i]
    relative = [(current - p) / p for p in prices[i - period : i]]
    gains = [r for r in relative if r > 0]
    losses = [abs(r) for r in relative if r <= 0]

    avg_gain = sum(gains) / len(gains) if gains else 0.0
    avg_loss = sum(losses) / len(losses) if losses else 0.0
    rs = RS_WHEN_NO_LOSS if avg_loss == 0 else avg_gain / avg_loss
    return round_half_up(100.0 - 100.0 / (1.0 + rs))


def rsi(prices: Sequence[float], period: int) -> list[float]:
    return [rsi_at(prices, i, period) for i in range(len(prices))]


class IndicatorEngine:
    def __init__(self, sma_period: int = 20, ema_period: int = 12, rsi_period: int = 14) -> None:
        if min(sma_period, ema_period, rsi_period) < 1:
            raise ValueError("Indicator periods must be >= 1")
        self.sma_period = sma_period
        self.ema_period = ema_period
        self.rsi_period = rsi_period

    def compute(self, series: Sequence[PricePoint], ema_seed: float | None = None) -> tuple[IndicatorSample, ...]:
        validate_series(series)
        prices = [p.price for p in series]

        sma_values = sma(prices, self.sma_period)
        ema_values = ema(prices, self.ema_period, seed=ema_seed)
        rsi_values = rsi(prices, self.rsi_period)

        logger.debug(f"Computed indicators for {len(prices)} points")
        return tuple(
            IndicatorSample(date=p.date, price=p.price, sma=s, ema=e, rsi=r)
            for p, s, e, r in zip(series, sma_values, ema_values, rsi_values)
        )


def summarize(symbol: str, series: Sequence[PricePoint | IndicatorSample]) -> PriceSummary:
    if not series:
        return PriceSummary(symbol=symbol, current_price=0.0, price_change=0.0, price_change_percent=0.0)

    current = series[-1].price
    if len(series) < 2:
        return PriceSummary(symbol=symbol, current_price=current, price_change=0.0, price_change_percent=0.0)

    previous = series[-2].price
    change = current - previous
    return PriceSummary(
        symbol=symbol,
        current_price=current,
        price_change=round_half_up(change),
        price_change_percent=round_half_up(safe_percent(change, previous)),
    )


def samples_to_frame(samples: Sequence[IndicatorSample]) -> pd.DataFrame:
    columns = ["date", "price", "sma", "ema", "rsi"]
    return pd.DataFrame([asdict(s) for s in samples], columns=columns)
