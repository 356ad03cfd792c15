"""Analytics: blotter summary and closed-trade performance."""

from alphafx.analytics.metrics import (
    BlotterSummary,
    PerformanceMetrics,
    blotter_summary,
    compute_metrics,
    expectancy,
    max_drawdown,
    profit_factor,
    win_rate,
)

__all__ = [
    "BlotterSummary",
    "PerformanceMetrics",
    "blotter_summary",
    "compute_metrics",
    "expectancy",
    "max_drawdown",
    "profit_factor",
    "win_rate",
]
