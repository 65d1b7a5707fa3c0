"""URL inspector that runs every analyzer and aggregates their scores."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from analyzers.accessibility import AccessibilityAnalyzer
from analyzers.base import BaseAnalyzer, CategoryReport
from analyzers.best_practices import BestPracticesAnalyzer
from analyzers.performance import PerformanceAnalyzer
from analyzers.security import DEFAULT_SUSPICIOUS_TLDS, SecurityAnalyzer
from analyzers.seo import SEOAnalyzer
from analyzers.url import ParseError, URLComponents, parse_url
from config import get_settings
from engine.aggregator import DEFAULT_WEIGHTS, calculate_overall_score, rate_score

logger = logging.getLogger(__name__)

CATEGORIES = ("security", "performance", "seo", "accessibility", "best_practices")


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analyzing a single URL string."""

    original: str
    is_valid: bool
    timestamp: str  # UTC, ISO-8601
    overall_score: int
    rating: str
    components: URLComponents | None = None
    reports: dict[str, CategoryReport] | None = None
    error: str | None = None

    def as_dict(self) -> dict:
        return {
            "original": self.original,
            "is_valid": self.is_valid,
            "timestamp": self.timestamp,
            "components": self.components.as_dict() if self.components else None,
            "security": self._report("security"),
            "performance": self._report("performance"),
            "seo": self._report("seo"),
            "accessibility": self._report("accessibility"),
            "best_practices": self._report("best_practices"),
            "overall_score": self.overall_score,
            "rating": self.rating,
            "error": self.error,
        }

    def _report(self, category: str) -> dict | None:
        if not self.reports:
            return None
        return self.reports[category].as_dict()


class URLInspector:
    """
    Scores a URL across every quality category.

    The inspector:
    1. Parses and validates the URL
    2. Runs each category analyzer on the parsed components
    3. Combines the category scores into a weighted overall score

    Lookup tables are fixed at construction and never mutated.
    """

    def __init__(
        self,
        allowed_schemes: tuple[str, ...] = ("http", "https"),
        suspicious_tlds: tuple[str, ...] = DEFAULT_SUSPICIOUS_TLDS,
        weights: dict[str, float] | None = None,
    ):
        self.allowed_schemes = tuple(allowed_schemes)
        self.weights = dict(weights or DEFAULT_WEIGHTS)
        self.analyzers: list[BaseAnalyzer] = [
            SecurityAnalyzer(suspicious_tlds=suspicious_tlds),
            PerformanceAnalyzer(),
            SEOAnalyzer(),
            AccessibilityAnalyzer(),
            BestPracticesAnalyzer(),
        ]

    @classmethod
    def from_settings(cls, settings) -> "URLInspector":
        """Build an inspector from application settings."""
        return cls(
            allowed_schemes=settings.allowed_schemes,
            suspicious_tlds=settings.suspicious_tlds,
            weights=settings.score_weights,
        )

    def analyze(self, url: str) -> AnalysisResult:
        """
        Run every analyzer on the given URL.

        Invalid input never raises; it yields a result with is_valid=False,
        an overall score of 0 and the parse error message.

        Args:
            url: URL string to analyze

        Returns:
            AnalysisResult with category reports and overall score
        """
        timestamp = datetime.now(timezone.utc).isoformat()

        try:
            components = parse_url(url, self.allowed_schemes)
        except ParseError as e:
            logger.info(f"Rejected URL {url!r}: {e.message}")
            return AnalysisResult(
                original=url,
                is_valid=False,
                timestamp=timestamp,
                overall_score=0,
                rating="invalid",
                error=e.message,
            )

        reports = {analyzer.name: analyzer.analyze(components) for analyzer in self.analyzers}
        overall_score = calculate_overall_score(reports, self.weights)

        logger.debug(f"Analyzed {components.origin}: overall score {overall_score}")

        return AnalysisResult(
            original=url,
            is_valid=True,
            timestamp=timestamp,
            overall_score=overall_score,
            rating=rate_score(overall_score),
            components=components,
            reports=reports,
        )

    def analyze_many(self, urls: list[str]) -> list[AnalysisResult]:
        """Analyze each non-blank entry, keeping input order."""
        return [self.analyze(url.strip()) for url in urls if url and url.strip()]


def split_bulk_input(text: str) -> list[str]:
    """Split newline-separated bulk input into URL strings."""
    return [line.strip() for line in text.splitlines() if line.strip()]


# Convenience function
def run_analysis(url: str) -> AnalysisResult:
    """Analyze a URL using the application settings."""
    inspector = URLInspector.from_settings(get_settings())
    return inspector.analyze(url)
