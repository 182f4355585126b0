import pytest

from tradesim.catalog import SymbolCatalog
from tradesim.orders import estimate_order
from tradesim.types import parse_order_side


def test_estimated_total() -> None:
    ticket = estimate_order(SymbolCatalog().require("aapl"), "BUY", 100)
    assert ticket.symbol == "AAPL"
    assert ticket.side == "buy"
    assert ticket.price == 175.32
    assert ticket.estimated_total == 17532.00


def test_rejects_non_positive_quantity() -> None:
    security = SymbolCatalog().require("TSLA")
    with pytest.raises(ValueError):
        estimate_order(security, "sell", 0)
    with pytest.raises(ValueError):
        estimate_order(security, "sell", True)


def test_parse_order_side() -> None:
    assert parse_order_side(" Buy ") == "buy"
    assert parse_order_side("SELL") == "sell"
    with pytest.raises(ValueError):
        parse_order_side("short")
