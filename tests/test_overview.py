"""Unit tests for market.overview and market.pairs."""

import random

import pytest
from alphafx.market.overview import find_quote, generate_market_overview
from alphafx.market.pairs import OVERVIEW_REFERENCE_PRICES, validate_pair


def test_overview_quotes():
    quotes = generate_market_overview("GBP/USD", 1.3000, rng=random.Random(11))
    assert [q.pair for q in quotes] == list(OVERVIEW_REFERENCE_PRICES)
    for q in quotes:
        base = 1.3000 if q.pair == "GBP/USD" else OVERVIEW_REFERENCE_PRICES[q.pair]
        assert abs(q.price - base) <= 0.005 + 1e-5
        assert q.change == pytest.approx(q.price - base, abs=1e-5)
        assert 10_000_000 <= q.volume < 60_000_000
        assert 0.0001 <= q.spread <= 0.0006


def test_find_quote():
    quotes = generate_market_overview("EUR/USD", 1.0847, rng=random.Random(1))
    assert find_quote(quotes, "USD/CAD").pair == "USD/CAD"
    assert find_quote(quotes, "EUR/INR") is None


def test_validate_pair():
    assert validate_pair(" eur/usd ") == "EUR/USD"
    with pytest.raises(ValueError):
        validate_pair("XAU/USD")
