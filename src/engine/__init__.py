"""Lantern scoring engine package."""

from engine.aggregator import DEFAULT_WEIGHTS, calculate_overall_score, rate_score
from engine.inspector import (
    CATEGORIES,
    AnalysisResult,
    URLInspector,
    run_analysis,
    split_bulk_input,
)

__all__ = [
    "DEFAULT_WEIGHTS",
    "calculate_overall_score",
    "rate_score",
    "CATEGORIES",
    "AnalysisResult",
    "URLInspector",
    "run_analysis",
    "split_bulk_input",
]
