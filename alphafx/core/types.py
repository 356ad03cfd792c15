"""
Core data types for trades, portfolio state, quotes and recommendations.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class TradeSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"

    @property
    def direction(self) -> int:
        return 1 if self is TradeSide.BUY else -1


class TradeStatus(str, Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    PENDING = "PENDING"  # declared, never produced by the desk


@dataclass
class Trade:
    """Ledger record. Exit price and profit are fixed once the trade is closed."""
    id: str
    timestamp: datetime
    pair: str
    side: TradeSide
    amount: float
    entry_price: float
    exit_price: Optional[float] = None
    status: TradeStatus = TradeStatus.OPEN
    profit: float = 0.0
    algorithm: str = "Manual"

    @property
    def is_open(self) -> bool:
        return self.status == TradeStatus.OPEN


@dataclass
class Portfolio:
    """Account state mutated by trade open/close."""
    balance: float = 5000.0
    base_currency: str = "USD"
    total_profit: float = 0.0
    today_profit: float = 0.0
    open_positions: int = 0
    total_trades: int = 0


@dataclass
class PortfolioSnapshot:
    """Read-time view of the portfolio at a given price."""
    balance: float
    base_currency: str
    total_profit: float
    today_profit: float
    profit_pct: float
    today_profit_pct: float
    open_positions: int
    total_trades: int
    unrealized_pnl: float
    equity: float
    margin_in_use: float
    open_notional: float = 0.0
    closed_profit: float = 0.0


@dataclass
class MarketQuote:
    """One row of the market overview. Regenerated every refresh."""
    pair: str
    price: float
    change: float
    change_pct: float
    volume: int
    spread: float


@dataclass
class Recommendation:
    """Mock "AI" trade suggestion."""
    pair: str
    action: TradeSide
    amount: float
    confidence: float
    profit_ratio: float
    reasoning: str
    timeframe: str

    @property
    def expected_profit(self) -> float:
        return self.amount * self.profit_ratio / 100.0

    def portfolio_share_pct(self, balance: float) -> float:
        if balance == 0:
            return 0.0
        return self.amount / balance * 100.0


@dataclass
class Notification:
    """User-facing message (toast)."""
    title: str
    description: str = ""
    variant: str = "default"  # "default" | "destructive"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
