from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable

from .errors import DegenerateInputWarning
from .numeric import safe_percent
from .types import PortfolioSummary, PortfolioTotals, Position

logger = logging.getLogger(__name__)


def portfolio_totals(positions: Iterable[Position]) -> PortfolioTotals:
    items = list(positions)
    total_value = sum(p.total_value for p in items)
    total_pl = sum(p.pl_amount for p in items)
    # total_value - total_pl is the aggregate cost basis.
    return PortfolioTotals(
        total_value=total_value,
        total_pl=total_pl,
        total_pl_percent=safe_percent(total_pl, total_value - total_pl),
    )


def aggregate(positions: Iterable[Position]) -> PortfolioSummary:
    items = tuple(positions)

    degenerate: list[str] = []
    for p in items:
        if p.cost_basis == 0:
            degenerate.append(p.symbol)
            logger.warning(f"{p.symbol}: zero cost basis, reporting pl_percent as 0")
            warnings.warn(
                f"{p.symbol} has zero cost basis; pl_percent reported as 0",
                DegenerateInputWarning,
                stacklevel=2,
            )

    return PortfolioSummary(
        positions=items,
        totals=portfolio_totals(items),
        degenerate_symbols=tuple(degenerate),
    )
