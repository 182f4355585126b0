#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import json
import logging
from dataclasses import asdict

import numpy as np

from tradesim.catalog import SymbolCatalog
from tradesim.forecast_simulator import ForecastSimulator
from tradesim.orders import estimate_order
from tradesim.settings import settings


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Estimate an order and simulate a one-week price forecast")
    p.add_argument("--symbol", type=str.upper, choices=SymbolCatalog().symbols(), required=True)
    p.add_argument("--side", choices=["buy", "sell"], default="buy")
    p.add_argument("--quantity", type=int, required=True)
    p.add_argument("--seed", type=int, default=settings.random_seed)
    p.add_argument("--latency", type=float, default=settings.forecast_latency_seconds)
    p.add_argument("--timeout", type=float, default=None, help="Abandon the forecast after this many seconds")
    return p.parse_args()


async def run(args: argparse.Namespace) -> dict:
    catalog = SymbolCatalog()
    ticket = estimate_order(catalog.require(args.symbol), args.side, args.quantity)

    simulator = ForecastSimulator(catalog=catalog, rng=np.random.default_rng(args.seed))
    forecast = await asyncio.wait_for(
        simulator.simulate_async(args.symbol, args.side, latency_seconds=args.latency),
        timeout=args.timeout,
    )
    return {"order": asdict(ticket), "forecast": asdict(forecast)}


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=settings.log_level)
    print(json.dumps(asyncio.run(run(args)), indent=2))


if __name__ == "__main__":
    main()
