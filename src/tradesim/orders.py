from __future__ import annotations

from .numeric import round_half_up
from .types import OrderTicket, Security, parse_order_side


def estimate_order(security: Security, side: str, quantity: int) -> OrderTicket:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise ValueError(f"quantity must be a positive integer, got {quantity!r}")

    return OrderTicket(
        symbol=security.symbol,
        side=parse_order_side(side),
        quantity=quantity,
        price=security.quote_price,
        estimated_total=round_half_up(security.quote_price * quantity),
    )
