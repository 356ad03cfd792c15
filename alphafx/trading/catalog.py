"""Signal algorithms selectable on the desk. Only their enabled flag is tracked."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List


@dataclass
class Algorithm:
    id: str
    name: str
    enabled: bool = False


def default_algorithms() -> List[Algorithm]:
    return [
        Algorithm("sma", "Simple Moving Average (SMA)", enabled=True),
        Algorithm("rsi", "Relative Strength Index (RSI)"),
        Algorithm("bollinger", "Bollinger Bands"),
        Algorithm("macd", "MACD"),
    ]
