"""
Blotter statistics over closed-trade profits: win rate, profit factor,
expectancy, drawdown of the realized equity curve.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from alphafx.core.types import Trade, TradeStatus


@dataclass
class PerformanceMetrics:
    """Aggregate performance of closed trades."""
    total_pnl: float
    total_return_pct: float
    max_drawdown_pct: float
    win_rate: float
    profit_factor: float
    expectancy: float
    total_trades: int
    winning_trades: int
    losing_trades: int
    avg_win: float
    avg_loss: float


@dataclass
class BlotterSummary:
    """Footer of the trade blotter."""
    open_trades: int
    total_pnl: float
    win_rate: float
    volume: float


def max_drawdown(equity_curve: List[float]) -> float:
    """Max drawdown in percent (negative, e.g. -16.7)."""
    if not equity_curve:
        return 0.0
    arr = np.array(equity_curve, dtype=float)
    peak = np.maximum.accumulate(arr)
    dd = (arr - peak) / np.where(peak != 0, peak, 1)
    return float(np.min(dd)) * 100.0


def win_rate(pnls: List[float]) -> float:
    """Fraction of trades with positive PnL."""
    if not pnls:
        return 0.0
    return sum(1 for p in pnls if p > 0) / len(pnls)


def profit_factor(pnls: List[float]) -> float:
    """Gross profit / gross loss; inf with wins and no losses, 0 with neither."""
    wins = sum(p for p in pnls if p > 0)
    losses = sum(-p for p in pnls if p < 0)
    if losses <= 0:
        return float("inf") if wins > 0 else 0.0
    return wins / losses


def expectancy(pnls: List[float]) -> float:
    if not pnls:
        return 0.0
    return sum(pnls) / len(pnls)


def compute_metrics(pnls: List[float], starting_balance: Optional[float] = None) -> PerformanceMetrics:
    """
    Metrics from closed-trade profits in close order.
    starting_balance anchors the equity curve for return and drawdown; without
    it those two are reported as 0.
    """
    total_trades = len(pnls)
    wins = [p for p in pnls if p > 0]
    losses = [p for p in pnls if p < 0]
    total_pnl = float(sum(pnls))
    if starting_balance:
        curve = list(np.cumsum([starting_balance] + list(pnls)))
        total_return_pct = total_pnl / starting_balance * 100.0
        dd = max_drawdown(curve)
    else:
        total_return_pct = 0.0
        dd = 0.0
    return PerformanceMetrics(
        total_pnl=total_pnl,
        total_return_pct=total_return_pct,
        max_drawdown_pct=dd,
        win_rate=win_rate(pnls),
        profit_factor=profit_factor(pnls),
        expectancy=expectancy(pnls),
        total_trades=total_trades,
        winning_trades=len(wins),
        losing_trades=len(losses),
        avg_win=sum(wins) / len(wins) if wins else 0.0,
        avg_loss=sum(losses) / len(losses) if losses else 0.0,
    )


def blotter_summary(trades: Iterable[Trade]) -> BlotterSummary:
    """Open count, realized P&L total, win rate of closed trades, notional volume."""
    trades = list(trades)
    closed = [t.profit for t in trades if t.status == TradeStatus.CLOSED]
    return BlotterSummary(
        open_trades=sum(1 for t in trades if t.status == TradeStatus.OPEN),
        total_pnl=sum(t.profit for t in trades),
        win_rate=win_rate(closed),
        volume=sum(t.amount for t in trades),
    )
