"""General URL hygiene checks."""

import re
from dataclasses import dataclass
from typing import Callable

from analyzers.base import BaseAnalyzer, CategoryReport, clamp_score
from analyzers.url import URLComponents, count_query_params

UNSAFE_CHARACTERS_PATTERN = re.compile(r"[<>'\"&]")


@dataclass(frozen=True)
class Practice:
    """A single best-practice condition."""

    id: str
    points: int
    violation: str
    condition: Callable[[URLComponents], bool]


PRACTICES = [
    Practice(
        id="length",
        points=15,
        violation="URL exceeds recommended length",
        condition=lambda c: len(c.href) <= 2048,
    ),
    Practice(
        id="no-spaces",
        points=10,
        violation="URL contains spaces",
        condition=lambda c: " " not in c.href,
    ),
    Practice(
        id="shallow-path",
        points=10,
        violation="URL path too deep",
        # Counts the pieces around each "/", so "/a/b/c/d" is the deepest allowed
        condition=lambda c: len(c.path.split("/")) <= 5,
    ),
    Practice(
        id="few-parameters",
        points=10,
        violation="Too many query parameters",
        condition=lambda c: count_query_params(c.query) <= 10,
    ),
    Practice(
        id="safe-characters",
        points=15,
        violation="Suspicious characters detected",
        condition=lambda c: not UNSAFE_CHARACTERS_PATTERN.search(c.href),
    ),
]


class BestPracticesAnalyzer(BaseAnalyzer):
    """Deducts points for each violated URL best practice."""

    def __init__(self, practices: list[Practice] | None = None):
        self.practices = practices if practices is not None else PRACTICES

    @property
    def name(self) -> str:
        return "best_practices"

    def analyze(self, components: URLComponents) -> CategoryReport:
        report = CategoryReport(score=100)

        for practice in self.practices:
            if not practice.condition(components):
                report.score -= practice.points
                report.issues.append(practice.violation)

        report.score = clamp_score(report.score)
        return report
