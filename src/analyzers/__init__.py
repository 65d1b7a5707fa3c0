"""Lantern analyzers package."""

from analyzers.base import BaseAnalyzer, CategoryReport
from analyzers.url import ParseError, URLComponents, parse_url
from analyzers.security import SecurityAnalyzer
from analyzers.performance import PerformanceAnalyzer
from analyzers.seo import SEOAnalyzer
from analyzers.accessibility import AccessibilityAnalyzer
from analyzers.best_practices import BestPracticesAnalyzer

__all__ = [
    "BaseAnalyzer",
    "CategoryReport",
    "ParseError",
    "URLComponents",
    "parse_url",
    "SecurityAnalyzer",
    "PerformanceAnalyzer",
    "SEOAnalyzer",
    "AccessibilityAnalyzer",
    "BestPracticesAnalyzer",
]
