import pytest

from tradesim.catalog import DEFAULT_BASE_PRICE, SymbolCatalog
from tradesim.errors import UnknownSymbolError


def test_lookup_is_case_insensitive() -> None:
    catalog = SymbolCatalog()
    assert "nvda" in catalog
    assert catalog.require(" nvda ").name == "NVIDIA Corp."
    assert catalog.base_price("NVDA") == 850.0
    assert catalog.drift_rate("NVDA") == 0.001


def test_unknown_symbol_identity_vs_price_level() -> None:
    catalog = SymbolCatalog()
    assert "META" not in catalog
    assert catalog.base_price("META") == DEFAULT_BASE_PRICE
    with pytest.raises(UnknownSymbolError):
        catalog.require("META")


def test_symbols_lists_catalog() -> None:
    assert SymbolCatalog().symbols() == ["AAPL", "TSLA", "MSFT", "GOOGL", "AMZN", "NVDA"]
