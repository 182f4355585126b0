import pytest

from tradesim.positions_csv import PositionCsvRepository


def test_load_positions(tmp_path) -> None:
    path = tmp_path / "positions.csv"
    path.write_text(
        "symbol,name,quantity,avg_buy_price,current_price\n"
        "aapl,Apple Inc.,150,165.42,175.32\n"
        ",,,,\n"
        "NVDA,NVIDIA Corp.,50,789.23,875.42\n",
        encoding="utf-8",
    )
    positions = PositionCsvRepository(str(path)).load()
    assert [p.symbol for p in positions] == ["AAPL", "NVDA"]
    assert positions[0].quantity == 150
    assert positions[1].name == "NVIDIA Corp."


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        PositionCsvRepository(str(tmp_path / "nope.csv")).load()


def test_missing_columns(tmp_path) -> None:
    path = tmp_path / "positions.csv"
    path.write_text("symbol,quantity\nAAPL,1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        PositionCsvRepository(str(path)).load()


def test_bad_row_reports_line(tmp_path) -> None:
    path = tmp_path / "positions.csv"
    path.write_text("symbol,quantity,avg_buy_price,current_price\nAAPL,abc,1,2\n", encoding="utf-8")
    with pytest.raises(ValueError, match=":2:"):
        PositionCsvRepository(str(path)).load()
