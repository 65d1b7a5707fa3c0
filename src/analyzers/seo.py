"""SEO heuristics for URL structure."""

import re

from analyzers.base import BaseAnalyzer, CategoryReport, clamp_score
from analyzers.url import URLComponents

UPPERCASE_PATTERN = re.compile(r"[A-Z]")


class SEOAnalyzer(BaseAnalyzer):
    """
    Analyzes a URL for search-engine friendly structure.

    Checks:
    - www prefix
    - Trailing slash on non-root paths
    - Uppercase characters in the path
    - Underscores instead of hyphens
    - Fragment identifiers
    """

    # Points deducted per failing check
    PENALTIES = {
        "www_prefix": 5,
        "trailing_slash": 5,
        "uppercase": 10,
        "underscores": 5,
        "fragment": 5,
    }

    @property
    def name(self) -> str:
        return "seo"

    def analyze(self, components: URLComponents) -> CategoryReport:
        report = CategoryReport(score=100)
        path = components.path

        if components.hostname.startswith("www."):
            report.score -= self.PENALTIES["www_prefix"]
            report.recommendations.append("Consider using non-www version")

        if path.endswith("/") and path != "/":
            report.score -= self.PENALTIES["trailing_slash"]
            report.issues.append("Trailing slash present")

        if UPPERCASE_PATTERN.search(path):
            report.score -= self.PENALTIES["uppercase"]
            report.issues.append("Uppercase characters in path")

        if "_" in path:
            report.score -= self.PENALTIES["underscores"]
            report.recommendations.append("Use hyphens instead of underscores")

        if components.fragment:
            report.score -= self.PENALTIES["fragment"]
            report.issues.append("Fragment identifier present")

        report.score = clamp_score(report.score)
        return report
