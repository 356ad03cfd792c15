"""Core: config, types, logging."""

from alphafx.core.config import load_config, Config
from alphafx.core.types import (
    TradeSide,
    TradeStatus,
    Trade,
    Portfolio,
    PortfolioSnapshot,
    MarketQuote,
    Recommendation,
    Notification,
)
from alphafx.core.logger import setup_logging

__all__ = [
    "load_config",
    "Config",
    "TradeSide",
    "TradeStatus",
    "Trade",
    "Portfolio",
    "PortfolioSnapshot",
    "MarketQuote",
    "Recommendation",
    "Notification",
    "setup_logging",
]
