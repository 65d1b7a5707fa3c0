"""Performance heuristics for URL size and shape."""

from analyzers.base import BaseAnalyzer, CategoryReport, clamp_score
from analyzers.url import URLComponents, count_query_params, path_depth


class PerformanceAnalyzer(BaseAnalyzer):
    """
    Penalizes URLs that are expensive to transmit, cache or route.

    Checks:
    - Overall URL length
    - Number of query parameters
    - Path depth
    """

    MAX_URL_LENGTH = 2048
    LONG_URL_LENGTH = 1024
    MAX_PARAMETERS = 20
    MANY_PARAMETERS = 10
    MAX_PATH_DEPTH = 8

    @property
    def name(self) -> str:
        return "performance"

    def analyze(self, components: URLComponents) -> CategoryReport:
        report = CategoryReport(score=100)

        url_length = len(components.href)
        report.metrics["url_length"] = url_length
        if url_length > self.MAX_URL_LENGTH:
            report.score -= 20
            report.issues.append(f"URL too long (>{self.MAX_URL_LENGTH} chars)")
        elif url_length > self.LONG_URL_LENGTH:
            report.score -= 10
            report.issues.append("URL moderately long")

        parameter_count = count_query_params(components.query)
        report.metrics["parameter_count"] = parameter_count
        if parameter_count > self.MAX_PARAMETERS:
            report.score -= 15
            report.issues.append("Too many query parameters")
        elif parameter_count > self.MANY_PARAMETERS:
            report.score -= 5

        depth = path_depth(components.path)
        report.metrics["path_depth"] = depth
        if depth > self.MAX_PATH_DEPTH:
            report.score -= 10
            report.issues.append("Deep URL structure")

        report.score = clamp_score(report.score)
        return report
