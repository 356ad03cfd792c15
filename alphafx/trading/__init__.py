"""Trading: ledger, P&L accounting and the desk session."""

from alphafx.trading.accounting import margin_for, trade_pnl, unrealized_pnl
from alphafx.trading.ledger import TradeLedger
from alphafx.trading.session import TradeResult, TradingSession

__all__ = [
    "margin_for",
    "trade_pnl",
    "unrealized_pnl",
    "TradeLedger",
    "TradeResult",
    "TradingSession",
]
