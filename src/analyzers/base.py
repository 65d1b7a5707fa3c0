"""Base analyzer interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from analyzers.url import URLComponents


def clamp_score(score: int) -> int:
    """Clamp a score to the 0-100 range."""
    return max(0, min(100, score))


@dataclass
class CategoryReport:
    """Standard result format for all analyzers."""

    score: int  # Category score (0-100)
    issues: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    metrics: dict = field(default_factory=dict)  # Raw measurements, if any

    def as_dict(self) -> dict:
        return {
            "score": self.score,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
            "metrics": dict(self.metrics),
        }


class BaseAnalyzer(ABC):
    """Abstract base class for all analyzers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return analyzer name."""
        pass

    @abstractmethod
    def analyze(self, components: URLComponents) -> CategoryReport:
        """
        Score one quality dimension of an already-parsed URL.

        Args:
            components: Parsed URL components

        Returns:
            CategoryReport with score, issues and recommendations
        """
        pass
