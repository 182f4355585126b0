#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict

from tradesim.portfolio import aggregate
from tradesim.positions_csv import PositionCsvRepository
from tradesim.settings import settings


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Value a list of positions and report P&L")
    p.add_argument(
        "--positions-csv",
        default="data/positions.csv",
        help="CSV with columns: symbol,quantity,avg_buy_price,current_price[,name]",
    )
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=settings.log_level)

    summary = aggregate(PositionCsvRepository(args.positions_csv).load())
    output = {
        "positions": [p.to_dict() for p in summary.positions],
        "totals": asdict(summary.totals),
        "degenerate_symbols": list(summary.degenerate_symbols),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
