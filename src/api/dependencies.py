"""FastAPI dependencies for the scoring engine."""

from fastapi import Depends

from blocklist import BlocklistChecker
from config import Settings, get_settings
from engine import URLInspector


def get_inspector(settings: Settings = Depends(get_settings)) -> URLInspector:
    """Provide a URL inspector configured from settings."""
    return URLInspector.from_settings(settings)


def get_blocklist(settings: Settings = Depends(get_settings)) -> BlocklistChecker:
    """Provide a blocklist checker configured from settings."""
    return BlocklistChecker.from_settings(settings)
