"""Unit tests for recommendations.generator."""

import random

import pytest
from alphafx.core.types import TradeSide
from alphafx.recommendations.generator import (
    DEFAULT_REASONING,
    RECOMMENDATION_PAIRS,
    TIMEFRAMES,
    generate_recommendations,
    reasoning_for,
)


@pytest.mark.parametrize("seed", range(20))
def test_sorted_by_confidence(seed):
    recs = generate_recommendations(5000.0, rng=random.Random(seed))
    assert len(recs) == 3
    confidences = [r.confidence for r in recs]
    assert confidences == sorted(confidences, reverse=True)


def test_fields_in_range():
    for rec in generate_recommendations(10000.0, rng=random.Random(9), count=10):
        assert rec.pair in RECOMMENDATION_PAIRS
        assert rec.timeframe in TIMEFRAMES
        assert 75.0 <= rec.confidence <= 95.0
        assert 1.5 <= rec.profit_ratio <= 4.5
        assert 1000 <= rec.amount <= 3000
        assert rec.amount == int(rec.amount)
        assert rec.reasoning == reasoning_for(rec.pair, rec.action)


def test_seeded_output_is_reproducible():
    a = generate_recommendations(5000.0, rng=random.Random(123))
    b = generate_recommendations(5000.0, rng=random.Random(123))
    assert a == b


def test_reasoning_lookup():
    assert reasoning_for("USD/JPY", TradeSide.SELL) == "Risk-off sentiment, JPY safe haven"
    assert reasoning_for("EUR/INR", TradeSide.BUY) == DEFAULT_REASONING


def test_expected_profit_and_share():
    rec = generate_recommendations(5000.0, rng=random.Random(4))[0]
    assert rec.expected_profit == pytest.approx(rec.amount * rec.profit_ratio / 100)
    assert rec.portfolio_share_pct(5000.0) == pytest.approx(rec.amount / 50)
    assert rec.portfolio_share_pct(0.0) == 0.0
