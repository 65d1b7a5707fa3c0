"""Lantern blocklist package."""

from blocklist.checker import BlocklistChecker, BlocklistVerdict, normalize_for_match

__all__ = [
    "BlocklistChecker",
    "BlocklistVerdict",
    "normalize_for_match",
]
