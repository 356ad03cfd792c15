"""Display rounding for rates and money amounts."""

from __future__ import annotations
import re

RATE_DECIMALS = 5
MONEY_DECIMALS = 2

_NON_NUMERIC = re.compile(r"[^0-9.-]")


def round_rate(price: float) -> float:
    """Round an FX rate to 5 decimals."""
    return round(price, RATE_DECIMALS)


def format_rate(price: float) -> str:
    return f"{price:.{RATE_DECIMALS}f}"


def format_money(amount: float, currency: str = "", signed: bool = False) -> str:
    """2-decimal amount, optional leading '+' for non-negative values and currency suffix."""
    text = f"{amount:+.{MONEY_DECIMALS}f}" if signed else f"{amount:.{MONEY_DECIMALS}f}"
    return f"{text} {currency}" if currency else text


def format_pct(value: float, decimals: int = 2) -> str:
    return f"{value:+.{decimals}f}%"


def parse_amount(raw) -> float:
    """
    Parse a user-typed amount, dropping anything outside [0-9.-] first
    (so "1,000 USD" -> 1000.0). Returns NaN when nothing numeric is left.
    """
    if isinstance(raw, (int, float)):
        return float(raw)
    cleaned = _NON_NUMERIC.sub("", str(raw))
    try:
        return float(cleaned)
    except ValueError:
        return float("nan")
