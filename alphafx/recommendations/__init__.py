"""Recommendations: randomized mock trade suggestions."""

from alphafx.recommendations.generator import generate_recommendations, reasoning_for

__all__ = ["generate_recommendations", "reasoning_for"]
