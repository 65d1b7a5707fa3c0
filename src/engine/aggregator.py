"""Weighted overall score calculation."""

import math

from analyzers.base import CategoryReport

DEFAULT_WEIGHTS = {
    "security": 0.30,
    "performance": 0.25,
    "seo": 0.20,
    "accessibility": 0.15,
    "best_practices": 0.10,
}

# Lower bound of each rating band, highest first
RATING_BANDS = [
    (90, "excellent"),
    (70, "good"),
    (50, "warning"),
    (0, "poor"),
]


def calculate_overall_score(
    reports: dict[str, CategoryReport] | None,
    weights: dict[str, float] = DEFAULT_WEIGHTS,
) -> int:
    """
    Combine category scores into one weighted score.

    Args:
        reports: Category reports keyed by analyzer name, or None when the
            URL failed to parse
        weights: Weight per category (total = 1.0)

    Returns:
        Weighted score rounded half-up to an integer, 0 for invalid URLs
    """
    if not reports:
        return 0

    total = 0.0
    for category, weight in weights.items():
        total += reports[category].score * weight

    return max(0, min(100, math.floor(total + 0.5)))


def rate_score(score: int) -> str:
    """Map a score to its rating band."""
    for threshold, rating in RATING_BANDS:
        if score >= threshold:
            return rating
    return "poor"
