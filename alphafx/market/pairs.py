"""Tradable currency pairs and reference rates for the mock market."""

CURRENCY_PAIRS = (
    "EUR/USD", "GBP/USD", "USD/JPY", "USD/CHF", "AUD/USD", "USD/CAD", "NZD/USD",
    "EUR/GBP", "EUR/JPY", "GBP/JPY", "USD/INR", "EUR/INR", "GBP/INR",
)

# Pairs shown in the market overview panel, with their resting rates.
OVERVIEW_REFERENCE_PRICES = {
    "EUR/USD": 1.0847,
    "GBP/USD": 1.2734,
    "USD/JPY": 148.25,
    "USD/CHF": 0.8756,
    "AUD/USD": 0.6543,
    "USD/CAD": 1.3456,
}


def validate_pair(pair: str) -> str:
    """Normalize and check a pair name. Raises ValueError for unknown pairs."""
    normalized = pair.strip().upper()
    if normalized not in CURRENCY_PAIRS:
        raise ValueError(f"Unsupported currency pair: {pair}")
    return normalized
