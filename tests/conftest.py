"""Shared fixtures: inspector, blocklist checker and an API client with overridden settings."""

import pytest
from fastapi.testclient import TestClient

from blocklist import BlocklistChecker
from config import Settings, get_settings
from engine import URLInspector
from main import app


def make_settings(**overrides) -> Settings:
    defaults = dict(
        blocked_urls=("http://evil.com", "https://malicioussite.com", "bad.tk"),
        debounce_ms=100,
        bulk_max_urls=5,
    )
    defaults.update(overrides)
    return Settings(**defaults)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def inspector() -> URLInspector:
    return URLInspector()


@pytest.fixture
def checker(settings: Settings) -> BlocklistChecker:
    return BlocklistChecker.from_settings(settings)


@pytest.fixture
def client(settings: Settings):
    """Test client whose routes see the fixture settings."""
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()
