"""Unit tests for analytics.metrics."""

from datetime import datetime, timezone

import pytest
from alphafx.analytics.metrics import (
    blotter_summary,
    compute_metrics,
    expectancy,
    max_drawdown,
    profit_factor,
    win_rate,
)
from alphafx.core.types import Trade, TradeSide, TradeStatus


def test_win_rate():
    assert win_rate([1, -1, 1, 1]) == 0.75
    assert win_rate([]) == 0.0


def test_profit_factor():
    assert profit_factor([10, -5, 10, -5]) == 2.0
    assert profit_factor([10, 10]) == float("inf")
    assert profit_factor([-5, -5]) == 0.0
    assert profit_factor([]) == 0.0


def test_expectancy():
    assert expectancy([10, -5, 5]) == pytest.approx(10 / 3)
    assert expectancy([]) == 0.0


def test_max_drawdown():
    # peak 1.2, trough 1.0 => -16.67%
    assert max_drawdown([1.0, 1.2, 1.0, 1.1]) == pytest.approx(-16.666, rel=0.01)
    assert max_drawdown([]) == 0.0


def test_compute_metrics():
    m = compute_metrics([10.0, -5.0, 15.0, -3.0], starting_balance=100.0)
    assert m.total_trades == 4
    assert m.winning_trades == 2
    assert m.losing_trades == 2
    assert m.total_pnl == pytest.approx(17.0)
    assert m.total_return_pct == pytest.approx(17.0)
    # equity 100 -> 110 -> 105: -4.545%
    assert m.max_drawdown_pct == pytest.approx(-4.545, rel=0.01)
    assert m.expectancy == pytest.approx(4.25)
    assert m.avg_win == pytest.approx(12.5)
    assert m.avg_loss == pytest.approx(-4.0)


def test_compute_metrics_empty():
    m = compute_metrics([])
    assert m.total_trades == 0
    assert m.total_return_pct == 0.0
    assert m.max_drawdown_pct == 0.0


def test_blotter_summary():
    now = datetime(2026, 1, 5, tzinfo=timezone.utc)
    trades = [
        Trade("A", now, "EUR/USD", TradeSide.BUY, 1000, 1.1, 1.2, TradeStatus.CLOSED, 90.9),
        Trade("B", now, "EUR/USD", TradeSide.SELL, 500, 1.1, 1.2, TradeStatus.CLOSED, -45.4),
        Trade("C", now, "EUR/USD", TradeSide.BUY, 2000, 1.1),
    ]
    s = blotter_summary(trades)
    assert s.open_trades == 1
    assert s.total_pnl == pytest.approx(45.5)
    assert s.win_rate == 0.5
    assert s.volume == 3500
