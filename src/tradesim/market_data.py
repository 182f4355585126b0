from __future__ import annotations

import logging
from datetime import date

from .catalog import SymbolCatalog
from .indicators import IndicatorEngine, summarize
from .price_series import PriceSeriesGenerator
from .types import IndicatorSample, PriceSummary

logger = logging.getLogger(__name__)


class MarketDataService:
    """Synthetic history plus indicators for catalog symbols."""

    def __init__(
        self,
        catalog: SymbolCatalog | None = None,
        generator: PriceSeriesGenerator | None = None,
        engine: IndicatorEngine | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else SymbolCatalog()
        self.generator = generator if generator is not None else PriceSeriesGenerator()
        self.engine = engine if engine is not None else IndicatorEngine()

    def history(self, symbol: str, start_date: date, end_date: date) -> tuple[IndicatorSample, ...]:
        security = self.catalog.require(symbol)
        series = self.generator.generate(
            security.symbol,
            start_date,
            end_date,
            base_price=security.base_price,
            drift_rate=security.drift_rate,
        )
        # EMA continues from the pre-window price level.
        return self.engine.compute(series, ema_seed=security.base_price)

    def summary(self, symbol: str, start_date: date, end_date: date) -> PriceSummary:
        samples = self.history(symbol, start_date, end_date)
        return summarize(self.catalog.require(symbol).symbol, samples)
