"""URL parsing and validation."""

import re
from dataclasses import dataclass
from urllib.parse import parse_qsl, urlsplit

# Ports implied by a scheme when none is written
DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ftp": 21,
    "ws": 80,
    "wss": 443,
}

# Characters that can never appear in a host name
_FORBIDDEN_HOST_CHARS = re.compile(r"[\s<>\\^|%\"'`{}]")

# A bracketed IPv6 host may only be followed by ":port"
_BRACKETED_NETLOC = re.compile(r"(?:[^@]*@)?\[[0-9A-Fa-f:.]+\](?::\d*)?")


class ParseError(ValueError):
    """Raised when a string cannot be used as an absolute URL."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class URLComponents:
    """Decomposed parts of a parsed absolute URL."""

    protocol: str  # scheme, lowercase, without ":"
    hostname: str
    port: int | None  # explicit port, else scheme default
    explicit_port: int | None
    path: str
    query: str
    fragment: str
    origin: str
    username: str
    has_password: bool
    href: str  # normalized URL; password masked

    def as_dict(self) -> dict:
        return {
            "protocol": self.protocol,
            "hostname": self.hostname,
            "port": self.port,
            "path": self.path,
            "query": self.query,
            "fragment": self.fragment,
            "origin": self.origin,
            "username": self.username,
            "password": "***" if self.has_password else "",
            "href": self.href,
        }


def count_query_params(query: str) -> int:
    """Count form-encoded query pairs, skipping empty ones."""
    return len(parse_qsl(query, keep_blank_values=True))


def path_depth(path: str) -> int:
    """Count the non-empty segments of a path."""
    return len([segment for segment in path.split("/") if segment])


def parse_url(raw: str, allowed_schemes: tuple[str, ...] = ("http", "https")) -> URLComponents:
    """
    Parse and validate an absolute URL.

    Args:
        raw: The URL string as entered by the user
        allowed_schemes: Schemes accepted as valid

    Returns:
        URLComponents for the URL

    Raises:
        ParseError: If the string is not an absolute URL with an allowed
            scheme and a host
    """
    text = (raw or "").strip()
    if not text:
        raise ParseError("URL cannot be empty")

    try:
        parts = urlsplit(text)
    except ValueError:
        raise ParseError("Invalid URL format")

    scheme = parts.scheme.lower()
    if not scheme or not text[len(scheme) + 1:].startswith("//"):
        raise ParseError("Invalid URL format")
    if "[" in parts.netloc or "]" in parts.netloc:
        if not _BRACKETED_NETLOC.fullmatch(parts.netloc):
            raise ParseError("Invalid URL format")

    if scheme not in allowed_schemes:
        allowed = " and ".join(s.upper() for s in allowed_schemes)
        raise ParseError(f"Invalid protocol: {scheme}. Only {allowed} are allowed.")

    hostname = parts.hostname
    if not hostname:
        raise ParseError("Invalid URL: missing domain")
    if _FORBIDDEN_HOST_CHARS.search(hostname):
        raise ParseError("Invalid URL format")

    try:
        explicit_port = parts.port
    except ValueError:
        raise ParseError("Invalid port in URL")

    default_port = DEFAULT_PORTS.get(scheme)
    port = explicit_port if explicit_port is not None else default_port

    host = f"[{hostname}]" if ":" in hostname else hostname
    if explicit_port is not None and explicit_port != default_port:
        host = f"{host}:{explicit_port}"

    username = parts.username or ""
    has_password = bool(parts.password)
    userinfo = ""
    if username or has_password:
        userinfo = f"{username}:***@" if has_password else f"{username}@"

    path = parts.path or "/"
    href = f"{scheme}://{userinfo}{host}{path}"
    if parts.query:
        href += f"?{parts.query}"
    if parts.fragment:
        href += f"#{parts.fragment}"

    return URLComponents(
        protocol=scheme,
        hostname=hostname,
        port=port,
        explicit_port=explicit_port,
        path=path,
        query=parts.query,
        fragment=parts.fragment,
        origin=f"{scheme}://{host}",
        username=username,
        has_password=has_password,
        href=href,
    )
