"""Pytest configuration and shared fixtures for giphy-client tests."""

import httpx
import pytest

from giphy_client import GiphyClient


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    import os

    test_prefixes = ("TEST_", "GIPHY_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def make_client():
    """Build a client whose requests are answered by ``handler``."""

    def _make(handler, **kwargs) -> GiphyClient:
        return GiphyClient("test-token", transport=httpx.MockTransport(handler), **kwargs)

    return _make
