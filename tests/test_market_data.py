from datetime import date

import numpy as np
import pytest

from tradesim.errors import InvalidRangeError, UnknownSymbolError
from tradesim.market_data import MarketDataService
from tradesim.price_series import PriceSeriesGenerator


def _service(seed: int = 2) -> MarketDataService:
    return MarketDataService(generator=PriceSeriesGenerator(rng=np.random.default_rng(seed)))


def test_history_covers_chart_window() -> None:
    samples = _service().history("AAPL", date(2025, 7, 1), date(2025, 8, 31))
    assert len(samples) == 62
    assert samples[0].date == date(2025, 7, 1)
    assert samples[19].sma is not None
    assert samples[18].sma is None


def test_summary_uses_last_two_prices() -> None:
    samples = _service(4).history("TSLA", date(2025, 7, 1), date(2025, 7, 10))
    summary = _service(4).summary("tsla", date(2025, 7, 1), date(2025, 7, 10))
    assert summary.symbol == "TSLA"
    assert summary.current_price == samples[-1].price
    assert summary.price_change == pytest.approx(samples[-1].price - samples[-2].price, abs=0.01)


def test_unknown_symbol_raises() -> None:
    with pytest.raises(UnknownSymbolError):
        _service().history("XYZ", date(2025, 7, 1), date(2025, 7, 2))


def test_reversed_range_raises() -> None:
    with pytest.raises(InvalidRangeError):
        _service().history("AAPL", date(2025, 7, 2), date(2025, 7, 1))
