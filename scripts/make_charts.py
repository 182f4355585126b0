#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from tradesim.catalog import SymbolCatalog
from tradesim.indicators import IndicatorEngine, samples_to_frame
from tradesim.market_data import MarketDataService
from tradesim.price_series import PriceSeriesGenerator
from tradesim.settings import settings


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Plot synthetic price, SMA/EMA and RSI for one symbol")
    p.add_argument("--symbol", type=str.upper, choices=SymbolCatalog().symbols(), default="AAPL")
    p.add_argument("--start", type=date.fromisoformat, default=settings.chart_start_date)
    p.add_argument("--end", type=date.fromisoformat, default=settings.chart_end_date)
    p.add_argument("--seed", type=int, default=settings.random_seed)
    p.add_argument("--out-dir", default="reports/charts")
    return p.parse_args()


def plot_price(df: pd.DataFrame, symbol: str, out_dir: Path) -> Path:
    fig, ax = plt.subplots(figsize=(12, 5))
    ax.plot(df["date"], df["price"], label="Price", linewidth=2)
    ax.plot(df["date"], df["sma"], label="SMA (20)", linewidth=1.5)
    ax.plot(df["date"], df["ema"], label="EMA (12)", linewidth=1.5, alpha=0.8)
    ax.set_title(f"{symbol} price")
    ax.set_ylabel("Price")
    ax.legend()
    ax.grid(alpha=0.2)

    out = out_dir / f"{symbol.lower()}_price.png"
    plt.tight_layout()
    plt.savefig(out, dpi=150)
    plt.close(fig)
    return out


def plot_rsi(df: pd.DataFrame, symbol: str, out_dir: Path) -> Path:
    fig, ax = plt.subplots(figsize=(12, 3))
    ax.plot(df["date"], df["rsi"], label="RSI", linewidth=2)
    ax.axhline(70, color="#d62828", linestyle="--", linewidth=0.8)
    ax.axhline(30, color="#2a9d8f", linestyle="--", linewidth=0.8)
    ax.set_ylim(0, 100)
    ax.set_title(f"{symbol} RSI")
    ax.grid(alpha=0.2)

    out = out_dir / f"{symbol.lower()}_rsi.png"
    plt.tight_layout()
    plt.savefig(out, dpi=150)
    plt.close(fig)
    return out


def main() -> None:
    args = parse_args()
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    service = MarketDataService(
        generator=PriceSeriesGenerator(rng=np.random.default_rng(args.seed), volatility=settings.price_volatility),
        engine=IndicatorEngine(settings.sma_period, settings.ema_period, settings.rsi_period),
    )
    df = samples_to_frame(service.history(args.symbol, args.start, args.end))
    df["date"] = pd.to_datetime(df["date"])
    df["sma"] = df["sma"].astype(float)

    symbol = args.symbol.upper()
    for p in (plot_price(df, symbol, out_dir), plot_rsi(df, symbol, out_dir)):
        print(p)


if __name__ == "__main__":
    main()
