"""Market simulation: random-walk prices, chart history, market overview."""

from alphafx.market.overview import generate_market_overview
from alphafx.market.pairs import CURRENCY_PAIRS, validate_pair
from alphafx.market.price_feed import LivePriceFeed, PriceGenerator, chart_change, generate_price_history

__all__ = [
    "generate_market_overview",
    "CURRENCY_PAIRS",
    "validate_pair",
    "LivePriceFeed",
    "PriceGenerator",
    "chart_change",
    "generate_price_history",
]
