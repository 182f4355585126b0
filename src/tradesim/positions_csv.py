from __future__ import annotations

import csv
from pathlib import Path

from .types import Position

REQUIRED_COLUMNS = ("symbol", "quantity", "avg_buy_price", "current_price")


class PositionCsvRepository:
    def __init__(self, csv_path: str) -> None:
        self.csv_path = Path(csv_path)

    def load(self) -> list[Position]:
        if not self.csv_path.exists():
            raise FileNotFoundError(
                f"Positions file not found at {self.csv_path}. Expected CSV columns: {','.join(REQUIRED_COLUMNS)}[,name]"
            )

        positions: list[Position] = []
        with self.csv_path.open("r", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            missing = set(REQUIRED_COLUMNS) - set(reader.fieldnames or [])
            if missing:
                raise ValueError(f"{self.csv_path} is missing columns: {sorted(missing)}")

            for line_no, row in enumerate(reader, start=2):
                if not row.get("symbol"):
                    continue
                try:
                    positions.append(
                        Position(
                            symbol=row["symbol"].strip().upper(),
                            quantity=int(row["quantity"]),
                            avg_buy_price=float(row["avg_buy_price"]),
                            current_price=float(row["current_price"]),
                            name=(row.get("name") or "").strip(),
                        )
                    )
                except (TypeError, ValueError) as exc:
                    raise ValueError(f"{self.csv_path}:{line_no}: invalid position row") from exc

        return positions
