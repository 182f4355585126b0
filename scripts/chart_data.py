#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from datetime import date
from pathlib import Path

import numpy as np

from tradesim.catalog import SymbolCatalog
from tradesim.indicators import IndicatorEngine, samples_to_frame, summarize
from tradesim.market_data import MarketDataService
from tradesim.price_series import PriceSeriesGenerator
from tradesim.settings import settings


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Synthetic price history with SMA/EMA/RSI for one symbol")
    p.add_argument("--symbol", type=str.upper, choices=SymbolCatalog().symbols(), default="AAPL")
    p.add_argument("--start", type=date.fromisoformat, default=settings.chart_start_date)
    p.add_argument("--end", type=date.fromisoformat, default=settings.chart_end_date)
    p.add_argument("--seed", type=int, default=settings.random_seed)
    p.add_argument("--out-csv", default=None, help="Optional CSV path for the indicator rows")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=settings.log_level)

    service = MarketDataService(
        generator=PriceSeriesGenerator(rng=np.random.default_rng(args.seed), volatility=settings.price_volatility),
        engine=IndicatorEngine(settings.sma_period, settings.ema_period, settings.rsi_period),
    )
    samples = service.history(args.symbol, args.start, args.end)
    summary = summarize(args.symbol.upper(), samples)

    if args.out_csv:
        out = Path(args.out_csv)
        out.parent.mkdir(parents=True, exist_ok=True)
        samples_to_frame(samples).to_csv(out, index=False)

    last = samples[-1]
    print(
        json.dumps(
            {
                "summary": asdict(summary),
                "rows": len(samples),
                "latest": {**asdict(last), "date": last.date.isoformat()},
            },
            indent=2,
        )
    )


if __name__ == "__main__":
    main()
