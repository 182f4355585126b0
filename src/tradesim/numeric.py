from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

PRICE_FLOOR = 0.01


def round_half_up(value: float, places: int = 2) -> float:
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp_price(price: float, floor: float = PRICE_FLOOR) -> float:
    return max(price, floor)


def safe_percent(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return numerator / denominator * 100.0
