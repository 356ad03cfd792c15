"""Unit tests for trading.accounting."""

from datetime import datetime, timezone

import pytest
from alphafx.core.types import Trade, TradeSide, TradeStatus
from alphafx.trading.accounting import margin_for, pct_of, total_unrealized, trade_pnl, unrealized_pnl


def _trade(side=TradeSide.BUY, amount=1000.0, entry=1.0847, status=TradeStatus.OPEN):
    return Trade(
        id="TXN1", timestamp=datetime(2026, 1, 5, tzinfo=timezone.utc), pair="EUR/USD",
        side=side, amount=amount, entry_price=entry, status=status,
    )


def test_buy_profit():
    profit = trade_pnl(TradeSide.BUY, 1.08470, 1.09000, 1000)
    assert profit == pytest.approx((1.09 - 1.0847) / 1.0847 * 1000)
    assert profit == pytest.approx(4.886, abs=1e-3)


def test_sell_profit_is_negated():
    profit = trade_pnl(TradeSide.SELL, 1.2000, 1.1900, 500)
    assert profit == pytest.approx(4.1667, abs=1e-4)
    assert trade_pnl(TradeSide.BUY, 1.2, 1.19, 500) == pytest.approx(-profit)


def test_zero_entry_price_rejected():
    with pytest.raises(ValueError):
        trade_pnl(TradeSide.BUY, 0.0, 1.0, 100)


def test_unrealized_only_for_open_trades():
    assert unrealized_pnl(_trade(), 1.09) == pytest.approx(4.886, abs=1e-3)
    assert unrealized_pnl(_trade(status=TradeStatus.CLOSED), 1.09) == 0.0
    assert unrealized_pnl(_trade(status=TradeStatus.PENDING), 1.09) == 0.0


def test_total_unrealized():
    trades = [_trade(entry=1.0), _trade(side=TradeSide.SELL, entry=1.0), _trade(entry=1.0, status=TradeStatus.CLOSED)]
    # BUY +10, SELL -10, closed ignored
    assert total_unrealized(trades, 1.01) == pytest.approx(0.0)


def test_margin_and_pct():
    assert margin_for(1000) == pytest.approx(10.0)
    assert margin_for(1000, 0.02) == pytest.approx(20.0)
    assert pct_of(50, 5000) == pytest.approx(1.0)
    assert pct_of(50, 0) == 0.0
