"""
Mock "AI" recommendations. No model and no history: every field is drawn
from the injected rng, reasoning comes from a static lookup table.
"""

from __future__ import annotations
import math
import random
from typing import List, Optional

from alphafx.core.types import Recommendation, TradeSide

RECOMMENDATION_PAIRS = ("EUR/USD", "GBP/USD", "USD/JPY", "USD/CHF", "AUD/USD")
TIMEFRAMES = ("5 minutes", "15 minutes", "30 minutes", "1 hour")
DEFAULT_REASONING = "Technical analysis indicates favorable conditions"

REASONING = {
    ("EUR/USD", TradeSide.BUY): "Strong EUR fundamentals, ECB policy support",
    ("EUR/USD", TradeSide.SELL): "USD strength expected, EUR weakness",
    ("GBP/USD", TradeSide.BUY): "GBP oversold, technical bounce expected",
    ("GBP/USD", TradeSide.SELL): "Brexit uncertainty, USD strength",
    ("USD/JPY", TradeSide.BUY): "BoJ intervention unlikely, yield differential",
    ("USD/JPY", TradeSide.SELL): "Risk-off sentiment, JPY safe haven",
    ("USD/CHF", TradeSide.BUY): "USD strength, SNB dovish stance",
    ("USD/CHF", TradeSide.SELL): "CHF safe haven demand increasing",
    ("AUD/USD", TradeSide.BUY): "Commodity prices rising, RBA hawkish",
    ("AUD/USD", TradeSide.SELL): "China slowdown concerns, USD strength",
}


def reasoning_for(pair: str, action: TradeSide) -> str:
    return REASONING.get((pair, action), DEFAULT_REASONING)


def generate_recommendations(
    balance: float,
    rng: Optional[random.Random] = None,
    count: int = 3,
) -> List[Recommendation]:
    """
    `count` suggestions sorted by confidence, highest first.
    confidence in [75, 95), profit ratio in [1.5, 4.5) percent,
    amount in [10%, 30%) of balance, floored to a whole unit.
    """
    rng = rng or random.Random()
    recs = []
    for _ in range(count):
        pair = rng.choice(RECOMMENDATION_PAIRS)
        action = TradeSide.BUY if rng.random() > 0.5 else TradeSide.SELL
        confidence = 75 + rng.random() * 20
        profit_ratio = 1.5 + rng.random() * 3
        amount = math.floor(balance * 0.1 + rng.random() * balance * 0.2)
        recs.append(Recommendation(
            pair=pair,
            action=action,
            amount=float(amount),
            confidence=round(confidence, 1),
            profit_ratio=round(profit_ratio, 2),
            reasoning=reasoning_for(pair, action),
            timeframe=rng.choice(TIMEFRAMES),
        ))
    recs.sort(key=lambda r: r.confidence, reverse=True)
    return recs
