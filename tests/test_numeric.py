from tradesim.numeric import clamp_price, round_half_up, safe_percent


def test_round_half_up() -> None:
    assert round_half_up(2.675) == 2.68
    assert round_half_up(1.005) == 1.01
    assert round_half_up(0.125) == 0.13
    assert round_half_up(-1.005) == -1.01
    assert round_half_up(99.00990099) == 99.01


def test_clamp_price() -> None:
    assert clamp_price(-5.0) == 0.01
    assert clamp_price(0.0) == 0.01
    assert clamp_price(12.5) == 12.5


def test_safe_percent() -> None:
    assert safe_percent(5.0, 0.0) == 0.0
    assert safe_percent(5.0, 50.0) == 10.0
