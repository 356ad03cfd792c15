"""Mock market overview: one quote per overview pair, regenerated on each refresh."""

from __future__ import annotations
import random
from typing import List, Optional

from alphafx.core.types import MarketQuote
from alphafx.market.pairs import OVERVIEW_REFERENCE_PRICES


def generate_market_overview(
    selected_pair: str,
    current_price: float,
    rng: Optional[random.Random] = None,
) -> List[MarketQuote]:
    """The selected pair is quoted around the live desk price, others around their reference rate."""
    rng = rng or random.Random()
    quotes = []
    for pair, reference in OVERVIEW_REFERENCE_PRICES.items():
        base = current_price if pair == selected_pair else reference
        change = (rng.random() - 0.5) * 0.01
        quotes.append(MarketQuote(
            pair=pair,
            price=round(base + change, 5),
            change=round(change, 5),
            change_pct=round(change / base * 100.0, 3),
            volume=rng.randrange(10_000_000, 60_000_000),
            spread=round(rng.random() * 0.0005 + 0.0001, 5),
        ))
    return quotes


def find_quote(quotes: List[MarketQuote], pair: str) -> Optional[MarketQuote]:
    return next((q for q in quotes if q.pair == pair), None)
