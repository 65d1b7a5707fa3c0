"""Accessibility heuristics for URL readability."""

import re

from analyzers.base import BaseAnalyzer, CategoryReport, clamp_score
from analyzers.url import URLComponents

NON_ASCII_PATTERN = re.compile(r"[^\x00-\x7F]")
ENCODED_OCTET_PATTERN = re.compile(r"%[0-9A-Fa-f]{2}")
TRAILING_DIGITS_PATTERN = re.compile(r"\d+$")


def calculate_readability(path: str) -> int:
    """
    Rate how easy a path is to read aloud or type.

    Starts at 50. Long paths and underscores lower the rating, hyphenated
    words raise it, and trailing numeric IDs lower it.

    Args:
        path: URL path, including the leading slash

    Returns:
        Readability rating clamped to 0-100
    """
    score = 50

    if len(path) > 100:
        score -= 20
    elif len(path) > 50:
        score -= 10

    score += min(path.count("-") * 5, 20)
    score -= path.count("_") * 3

    if TRAILING_DIGITS_PATTERN.search(path):
        score -= 10

    return clamp_score(score)


class AccessibilityAnalyzer(BaseAnalyzer):
    """Scores how easily people can read, type and share a URL."""

    @property
    def name(self) -> str:
        return "accessibility"

    def analyze(self, components: URLComponents) -> CategoryReport:
        report = CategoryReport(score=100)
        href = components.href

        if NON_ASCII_PATTERN.search(href):
            report.score -= 10
            report.issues.append("Non-ASCII characters present")

        if ENCODED_OCTET_PATTERN.search(href):
            report.score -= 5
            report.issues.append("URL-encoded characters present")

        readability = calculate_readability(components.path)
        report.metrics["readability"] = readability
        report.score += readability - 50
        if readability < 50:
            report.recommendations.append("Use short, hyphen-separated words in the path")

        report.score = clamp_score(report.score)
        return report
