"""Security heuristics for URL structure."""

import logging
import re

from analyzers.base import BaseAnalyzer, CategoryReport, clamp_score
from analyzers.url import URLComponents

logger = logging.getLogger(__name__)

DEFAULT_SUSPICIOUS_TLDS = (".tk", ".ml", ".ga", ".cf")

DOMAIN_PATTERN = re.compile(
    r"^[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(\.[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)
IPV4_PATTERN = re.compile(r"^(\d{1,3}\.){3}\d{1,3}$")
IPV6_PATTERN = re.compile(r"^([0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}$")

INJECTION_PATTERNS = [
    re.compile(r"<script", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"vbscript:", re.IGNORECASE),
    re.compile(r"onload=", re.IGNORECASE),
    re.compile(r"onerror=", re.IGNORECASE),
    re.compile(r"eval\(", re.IGNORECASE),
    re.compile(r"union.*select", re.IGNORECASE | re.DOTALL),
    re.compile(r"drop.*table", re.IGNORECASE | re.DOTALL),
]


def is_ip_address(hostname: str) -> bool:
    """Check whether a host is a literal IPv4 or full-form IPv6 address."""
    return bool(IPV4_PATTERN.match(hostname) or IPV6_PATTERN.match(hostname))


def is_valid_domain(hostname: str) -> bool:
    """Check a host against DNS label grammar, rejecting IP literals."""
    return bool(DOMAIN_PATTERN.match(hostname)) and not is_ip_address(hostname)


def has_injection_patterns(url: str) -> bool:
    """Check a URL for script or SQL injection signatures."""
    return any(pattern.search(url) for pattern in INJECTION_PATTERNS)


class SecurityAnalyzer(BaseAnalyzer):
    """
    Scores a URL's security posture from its structure alone.

    Checks:
    - HTTPS scheme
    - Standard port
    - Well-formed domain name (not an IP literal)
    - Script/SQL injection signatures
    - Credentials embedded in the URL
    - Suspicious top-level domain
    """

    # Points earned per passing check (total = 95, capped at 100)
    WEIGHTS = {
        "https": 30,
        "standard_port": 10,
        "valid_domain": 20,
        "no_injection": 15,
        "no_password": 10,
        "trusted_tld": 10,
    }

    # Standard port per scheme
    STANDARD_PORTS = {
        "http": 80,
        "https": 443,
        "ftp": 21,
    }

    def __init__(self, suspicious_tlds: tuple[str, ...] = DEFAULT_SUSPICIOUS_TLDS):
        self.suspicious_tlds = tuple(tld.lower() for tld in suspicious_tlds)

    @property
    def name(self) -> str:
        return "security"

    def analyze(self, components: URLComponents) -> CategoryReport:
        report = CategoryReport(score=0)

        if components.protocol == "https":
            report.score += self.WEIGHTS["https"]
        else:
            report.issues.append("Not using HTTPS")
            report.recommendations.append("Switch to HTTPS for better security")

        port = components.explicit_port
        if port is None or port == self.STANDARD_PORTS.get(components.protocol):
            report.score += self.WEIGHTS["standard_port"]
        else:
            report.issues.append(f"Using non-standard port: {port}")
            report.recommendations.append("Serve the site on the standard port for its protocol")

        if is_valid_domain(components.hostname):
            report.score += self.WEIGHTS["valid_domain"]
        else:
            report.issues.append("Invalid domain format")

        if has_injection_patterns(components.href):
            logger.info(f"Injection signature found in {components.origin}")
            report.issues.append("Potential injection patterns detected")
        else:
            report.score += self.WEIGHTS["no_injection"]

        if components.has_password:
            report.issues.append("Password visible in URL")
        else:
            report.score += self.WEIGHTS["no_password"]

        if components.hostname.endswith(self.suspicious_tlds):
            report.issues.append("Suspicious top-level domain")
        else:
            report.score += self.WEIGHTS["trusted_tld"]

        report.score = clamp_score(report.score)
        return report
