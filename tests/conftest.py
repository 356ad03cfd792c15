"""Shared fixtures: deterministic clock, rng and a small desk session."""

import random
from datetime import datetime, timezone

import pytest

from alphafx.core.types import Portfolio
from alphafx.market.price_feed import LivePriceFeed, PriceGenerator
from alphafx.notifications import Notifier
from alphafx.trading.session import TradingSession


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FixedClock(datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def session(clock, notifier):
    rng = random.Random(7)
    feed = LivePriceFeed(PriceGenerator(1.0847, rng=rng, volatility=0.002))
    return TradingSession(
        portfolio=Portfolio(balance=5000.0, base_currency="USD"),
        price_feed=feed,
        notifier=notifier,
        rng=rng,
        clock=clock,
        trade_amount=1000.0,
        min_trade_amount=100.0,
    )
