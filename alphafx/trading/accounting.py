"""
P&L and margin arithmetic.
profit = (exit - entry) / entry * amount * direction, direction +1 BUY / -1 SELL.
"""

from __future__ import annotations
from typing import Iterable

from alphafx.core.types import Trade, TradeSide

DEFAULT_MARGIN_RATE = 0.01


def trade_pnl(side: TradeSide, entry_price: float, exit_price: float, amount: float) -> float:
    """Profit in base currency of moving from entry to exit on `amount` notional."""
    if entry_price <= 0:
        raise ValueError(f"entry_price must be positive, got {entry_price}")
    return (exit_price - entry_price) / entry_price * amount * side.direction


def unrealized_pnl(trade: Trade, current_price: float) -> float:
    """Projected profit of an open trade at `current_price`; 0 for anything not open."""
    if not trade.is_open:
        return 0.0
    return trade_pnl(trade.side, trade.entry_price, current_price, trade.amount)


def margin_for(amount: float, margin_rate: float = DEFAULT_MARGIN_RATE) -> float:
    """Flat margin reserved against a trade's notional."""
    return amount * margin_rate


def total_unrealized(trades: Iterable[Trade], current_price: float) -> float:
    return sum(unrealized_pnl(t, current_price) for t in trades if t.is_open)


def pct_of(value: float, base: float) -> float:
    """value / base in percent; 0 when base is 0."""
    if base == 0:
        return 0.0
    return value / base * 100.0
