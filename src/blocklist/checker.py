"""Static blocklist lookup for URLs and domains."""

import logging
from dataclasses import dataclass

from analyzers.url import ParseError, URLComponents, parse_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BlocklistVerdict:
    """Result of checking one URL against the blocklist."""

    url: str
    normalized: str
    blocked: bool
    matched_entry: str | None = None

    def as_dict(self) -> dict:
        return {
            "url": self.url,
            "normalized": self.normalized,
            "blocked": self.blocked,
            "matched_entry": self.matched_entry,
        }


def normalize_for_match(components: URLComponents) -> str:
    """
    Canonical form used for blocklist comparison.

    Scheme and host are lowercase, userinfo and the default port are
    dropped, and a bare "/" path is omitted. Path, query and fragment keep
    their case.
    """
    normalized = components.origin
    if components.path != "/":
        normalized += components.path
    if components.query:
        normalized += f"?{components.query}"
    if components.fragment:
        normalized += f"#{components.fragment}"
    return normalized


class BlocklistChecker:
    """
    Checks URLs against a fixed list of blocked URLs and domains.

    Entries containing "://" are URL entries and match the normalized URL
    exactly. Other entries are domain entries and match the host and any
    of its subdomains.
    """

    def __init__(
        self,
        entries: tuple[str, ...],
        allowed_schemes: tuple[str, ...] = ("http", "https"),
    ):
        self.allowed_schemes = tuple(allowed_schemes)
        self.entries = tuple(entries)
        self._urls: dict[str, str] = {}
        self._domains: dict[str, str] = {}

        for entry in self.entries:
            value = entry.strip()
            if not value:
                continue
            if "://" in value:
                scheme = value.split("://", 1)[0].lower()
                try:
                    components = parse_url(value, (scheme,))
                except ParseError as e:
                    raise ValueError(f"Invalid blocklist entry {entry!r}: {e.message}") from e
                self._urls.setdefault(normalize_for_match(components), entry)
            else:
                domain = value.lower().lstrip("*.").rstrip("/")
                self._domains.setdefault(domain, entry)

    def check(self, url: str) -> BlocklistVerdict:
        """
        Validate a URL and look it up in the blocklist.

        Args:
            url: URL string to check

        Returns:
            BlocklistVerdict for the URL

        Raises:
            ParseError: If the URL is invalid; validation runs before lookup
        """
        components = parse_url(url, self.allowed_schemes)
        normalized = normalize_for_match(components)

        matched = self._urls.get(normalized) or self._match_domain(components.hostname)
        if matched:
            logger.info(f"Blocked URL {normalized} (entry {matched!r})")

        return BlocklistVerdict(
            url=url,
            normalized=normalized,
            blocked=matched is not None,
            matched_entry=matched,
        )

    def is_blocked(self, url: str) -> bool:
        """Return True if the URL is blocked. Raises ParseError if invalid."""
        return self.check(url).blocked

    def _match_domain(self, hostname: str) -> str | None:
        labels = hostname.split(".")
        for i in range(len(labels)):
            entry = self._domains.get(".".join(labels[i:]))
            if entry:
                return entry
        return None

    @classmethod
    def from_settings(cls, settings) -> "BlocklistChecker":
        """Build a checker from application settings."""
        return cls(settings.blocked_urls, allowed_schemes=settings.allowed_schemes)
