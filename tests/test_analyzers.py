"""Category analyzer tests."""

import pytest

from analyzers import (
    AccessibilityAnalyzer,
    BestPracticesAnalyzer,
    PerformanceAnalyzer,
    SecurityAnalyzer,
    SEOAnalyzer,
    parse_url,
)
from analyzers.accessibility import calculate_readability
from analyzers.security import has_injection_patterns, is_ip_address, is_valid_domain


def _query(count: int) -> str:
    return "&".join(f"p{i}={i}" for i in range(count))


class TestSecurityAnalyzer:
    def test_clean_https_url(self) -> None:
        report = SecurityAnalyzer().analyze(parse_url("https://example.com/"))
        assert report.score == 95
        assert report.issues == []
        assert report.recommendations == []

    def test_plain_http_on_custom_port(self) -> None:
        report = SecurityAnalyzer().analyze(parse_url("http://example.com:8080/"))
        assert report.score == 55
        assert report.issues == ["Not using HTTPS", "Using non-standard port: 8080"]
        assert "Switch to HTTPS for better security" in report.recommendations
        assert len(report.recommendations) == 2

    def test_standard_port_written_explicitly(self) -> None:
        report = SecurityAnalyzer().analyze(parse_url("http://example.com:80/"))
        assert report.score == 65

    @pytest.mark.parametrize("url", ["https://192.168.0.1/", "https://[2001:db8::1]/"])
    def test_ip_literal_is_not_a_valid_domain(self, url: str) -> None:
        report = SecurityAnalyzer().analyze(parse_url(url))
        assert report.score == 75
        assert report.issues == ["Invalid domain format"]

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/?q=<script>alert(1)</script>",
            "https://example.com/?next=JavaScript:alert(1)",
            "https://example.com/search?q=1%20UNION%20SELECT%20password",
            "https://example.com/?img=x&onerror=steal()",
            "https://example.com/?a=vbscript:msgbox(1)",
            "https://example.com/?onload=run()",
            "https://example.com/?code=eval(atob(x))",
            "https://example.com/?q=1;DROP%20TABLE%20users",
        ],
    )
    def test_injection_signature(self, url: str) -> None:
        report = SecurityAnalyzer().analyze(parse_url(url))
        assert "Potential injection patterns detected" in report.issues
        assert report.score == 80

    def test_password_in_url(self) -> None:
        report = SecurityAnalyzer().analyze(parse_url("https://user:pw@example.com/"))
        assert report.score == 85
        assert report.issues == ["Password visible in URL"]

    def test_suspicious_tld(self) -> None:
        report = SecurityAnalyzer().analyze(parse_url("https://free-stuff.tk/"))
        assert report.score == 85
        assert report.issues == ["Suspicious top-level domain"]

    def test_custom_suspicious_tlds(self) -> None:
        analyzer = SecurityAnalyzer(suspicious_tlds=(".zip",))
        assert analyzer.analyze(parse_url("https://files.zip/")).score == 85
        assert analyzer.analyze(parse_url("https://free-stuff.tk/")).score == 95

    def test_every_check_failing(self) -> None:
        url = "http://user:pw@1.2.3.4:8080/?x=javascript:alert(1)"
        report = SecurityAnalyzer().analyze(parse_url(url))
        assert report.score == 10
        assert len(report.issues) == 5

    def test_helpers(self) -> None:
        assert is_ip_address("10.0.0.1")
        assert is_ip_address("2001:0db8:0000:0000:0000:ff00:0042:8329")
        assert not is_ip_address("example.com")
        assert is_valid_domain("sub.example-site.co.uk")
        assert not is_valid_domain("-bad.example.com")
        assert not is_valid_domain("a" * 64 + ".com")
        assert has_injection_patterns("https://x.com/?q=drop%20users%20table")
        assert not has_injection_patterns("https://example.com/docs/evaluation")


class TestPerformanceAnalyzer:
    def test_short_url(self) -> None:
        report = PerformanceAnalyzer().analyze(parse_url("https://example.com/"))
        assert report.score == 100
        assert report.issues == []
        assert report.metrics == {"url_length": 20, "parameter_count": 0, "path_depth": 0}

    def test_too_many_query_parameters(self) -> None:
        report = PerformanceAnalyzer().analyze(parse_url(f"https://example.com/?{_query(25)}"))
        assert report.score == 85
        assert report.issues == ["Too many query parameters"]
        assert report.metrics["parameter_count"] == 25

    def test_many_query_parameters_penalized_silently(self) -> None:
        report = PerformanceAnalyzer().analyze(parse_url(f"https://example.com/?{_query(15)}"))
        assert report.score == 95
        assert report.issues == []

    def test_moderately_long_url(self) -> None:
        report = PerformanceAnalyzer().analyze(parse_url("https://example.com/" + "a" * 1100))
        assert report.score == 90
        assert report.issues == ["URL moderately long"]

    def test_very_long_url(self) -> None:
        report = PerformanceAnalyzer().analyze(parse_url("https://example.com/" + "a" * 3000))
        assert report.score == 80
        assert report.issues == ["URL too long (>2048 chars)"]

    @pytest.mark.parametrize(
        "length, score, issues",
        [
            (1024, 100, []),
            (1025, 90, ["URL moderately long"]),
            (2048, 90, ["URL moderately long"]),
            (2049, 80, ["URL too long (>2048 chars)"]),
        ],
    )
    def test_length_thresholds(self, length: int, score: int, issues: list[str]) -> None:
        base = "https://example.com/"
        report = PerformanceAnalyzer().analyze(parse_url(base + "a" * (length - len(base))))
        assert report.metrics["url_length"] == length
        assert report.score == score
        assert report.issues == issues

    @pytest.mark.parametrize(
        "count, score, issues",
        [
            (10, 100, []),
            (11, 95, []),
            (20, 95, []),
            (21, 85, ["Too many query parameters"]),
        ],
    )
    def test_parameter_thresholds(self, count: int, score: int, issues: list[str]) -> None:
        report = PerformanceAnalyzer().analyze(parse_url(f"https://example.com/?{_query(count)}"))
        assert report.metrics["parameter_count"] == count
        assert report.score == score
        assert report.issues == issues

    def test_deep_path(self) -> None:
        report = PerformanceAnalyzer().analyze(parse_url("https://example.com/a/b/c/d/e/f/g/h/i"))
        assert report.score == 90
        assert report.issues == ["Deep URL structure"]
        assert report.metrics["path_depth"] == 9


class TestSEOAnalyzer:
    def test_clean_url(self) -> None:
        report = SEOAnalyzer().analyze(parse_url("https://example.com/"))
        assert report.score == 100
        assert report.issues == []
        assert report.recommendations == []

    def test_every_check_failing(self) -> None:
        report = SEOAnalyzer().analyze(parse_url("https://www.example.com/Blog_Posts/#top"))
        assert report.score == 70
        assert report.issues == [
            "Trailing slash present",
            "Uppercase characters in path",
            "Fragment identifier present",
        ]
        assert report.recommendations == [
            "Consider using non-www version",
            "Use hyphens instead of underscores",
        ]

    def test_uppercase_host_is_not_penalized(self) -> None:
        report = SEOAnalyzer().analyze(parse_url("https://EXAMPLE.com/page"))
        assert report.score == 100


class TestAccessibilityAnalyzer:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/", 50),
            ("/my-blue-widget", 60),
            ("/a-b-c-d-e-f", 70),
            ("/item_42", 37),
            ("/" + "a" * 59, 40),
            ("/" + "a" * 120, 30),
            ("/" + "_" * 30, 0),
        ],
    )
    def test_readability(self, path: str, expected: int) -> None:
        assert calculate_readability(path) == expected

    def test_root_path(self) -> None:
        report = AccessibilityAnalyzer().analyze(parse_url("https://example.com/"))
        assert report.score == 100
        assert report.issues == []

    def test_score_is_capped_at_100(self) -> None:
        report = AccessibilityAnalyzer().analyze(parse_url("https://example.com/my-blue-widget"))
        assert report.score == 100
        assert report.metrics["readability"] == 60

    def test_encoded_characters_and_trailing_digits(self) -> None:
        report = AccessibilityAnalyzer().analyze(parse_url("https://example.com/caf%C3%A9"))
        assert report.issues == ["URL-encoded characters present"]
        assert report.score == 85
        assert report.recommendations == ["Use short, hyphen-separated words in the path"]

    def test_non_ascii_characters(self) -> None:
        report = AccessibilityAnalyzer().analyze(parse_url("https://example.com/café"))
        assert report.issues == ["Non-ASCII characters present"]
        assert report.score == 90

    def test_underscores_and_ids(self) -> None:
        report = AccessibilityAnalyzer().analyze(parse_url("https://example.com/item_42"))
        assert report.score == 87


class TestBestPracticesAnalyzer:
    def test_clean_url(self) -> None:
        report = BestPracticesAnalyzer().analyze(parse_url("https://example.com/"))
        assert report.score == 100
        assert report.issues == []

    def test_path_segment_limit(self) -> None:
        analyzer = BestPracticesAnalyzer()
        assert analyzer.analyze(parse_url("https://example.com/a/b/c/d")).score == 100
        report = analyzer.analyze(parse_url("https://example.com/a/b/c/d/e"))
        assert report.score == 90
        assert report.issues == ["URL path too deep"]

    def test_ampersand_counts_as_suspicious(self) -> None:
        report = BestPracticesAnalyzer().analyze(parse_url("https://example.com/?a=1&b=2"))
        assert report.score == 85
        assert report.issues == ["Suspicious characters detected"]

    def test_spaces(self) -> None:
        report = BestPracticesAnalyzer().analyze(parse_url("https://example.com/my page"))
        assert report.score == 90
        assert report.issues == ["URL contains spaces"]

    def test_too_many_parameters(self) -> None:
        report = BestPracticesAnalyzer().analyze(parse_url(f"https://example.com/?{_query(11)}"))
        assert report.score == 75
        assert report.issues == ["Too many query parameters", "Suspicious characters detected"]

    def test_every_practice_violated(self) -> None:
        url = "https://example.com/a/b/c/d/e/<x> y?" + _query(11) + "&z=" + "q" * 2100
        report = BestPracticesAnalyzer().analyze(parse_url(url))
        assert report.score == 40
        assert len(report.issues) == 5
