"""
Synthetic price path: bounded random walk with momentum.

Each step draws u ~ U(0, 1) from the injected rng and does
    momentum = decay * momentum + (1 - decay) * (u - 0.5) * volatility
    price    = clamp(price + momentum, reference - band, reference + band)
The same walk feeds the live desk price and the chart history.
"""

from __future__ import annotations
import random
from datetime import datetime, timedelta, timezone
from typing import Optional

import pandas as pd

from alphafx.utils.formatting import round_rate

# smallest quotable rate at 5 dp
MIN_PRICE = 0.00001


class PriceGenerator:
    """Momentum random walk clamped to a fixed band around `reference_price`."""

    def __init__(
        self,
        reference_price: float,
        rng: Optional[random.Random] = None,
        volatility: float = 0.0001,
        band: float = 0.01,
        momentum_decay: float = 0.8,
        start_price: Optional[float] = None,
    ):
        if reference_price <= 0:
            raise ValueError(f"reference_price must be positive, got {reference_price}")
        self.reference_price = reference_price
        self.volatility = volatility
        self.band = band
        self.momentum_decay = momentum_decay
        self._rng = rng or random.Random()
        self._price = start_price if start_price is not None else reference_price
        self._momentum = 0.0

    @property
    def price(self) -> float:
        return self._price

    @property
    def momentum(self) -> float:
        return self._momentum

    @property
    def lower(self) -> float:
        return max(self.reference_price - self.band, MIN_PRICE)

    @property
    def upper(self) -> float:
        return self.reference_price + self.band

    def step(self) -> float:
        """Advance one tick; returns the unrounded new price."""
        shock = (self._rng.random() - 0.5) * self.volatility
        self._momentum = self._momentum * self.momentum_decay + shock * (1.0 - self.momentum_decay)
        self._price = max(self.lower, min(self.upper, self._price + self._momentum))
        return self._price


class LivePriceFeed:
    """Desk price: one generator step per tick, published rounded to 5 decimals."""

    def __init__(self, generator: PriceGenerator):
        self._generator = generator
        self._current = round_rate(generator.price)
        self._previous = self._current
        self.ticks = 0

    @property
    def current(self) -> float:
        return self._current

    @property
    def previous(self) -> float:
        return self._previous

    def tick(self) -> float:
        self._previous = self._current
        self._current = round_rate(self._generator.step())
        self.ticks += 1
        return self._current


def generate_price_history(
    current_price: float,
    rng: Optional[random.Random] = None,
    samples: int = 50,
    interval: timedelta = timedelta(minutes=1),
    end_time: Optional[datetime] = None,
    volatility: float = 0.0001,
    band: float = 0.01,
    sma_window: int = 20,
) -> pd.DataFrame:
    """
    Chart history ending at `end_time`, one row per `interval`.
    Columns: time, price, sma, volume. The walk starts 0.002 below the
    current price and is clamped to current_price +/- band.
    """
    rng = rng or random.Random()
    end_time = end_time or datetime.now(timezone.utc)
    gen = PriceGenerator(
        current_price, rng=rng, volatility=volatility, band=band, start_price=current_price - 0.002,
    )
    rows = []
    for i in range(samples):
        price = round_rate(gen.step())
        rows.append({
            "time": end_time - (samples - 1 - i) * interval,
            "price": price,
            "volume": rng.randrange(750_000, 1_250_000),
        })
    df = pd.DataFrame(rows, columns=["time", "price", "volume"])
    df["sma"] = df["price"].rolling(sma_window, min_periods=1).mean().round(5)
    return df[["time", "price", "sma", "volume"]]


def chart_change(df: pd.DataFrame) -> tuple[float, float]:
    """(absolute, percent) change between the last two samples."""
    if len(df) < 2:
        return 0.0, 0.0
    last = float(df["price"].iloc[-1])
    prev = float(df["price"].iloc[-2])
    change = last - prev
    return round_rate(change), (change / prev * 100.0 if prev else 0.0)
