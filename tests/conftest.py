"""Common test fixtures and utilities for model catalog tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, Mock, patch

import pytest

from model_catalog.config.env_vars import EnvVar
from model_catalog.config.settings import CatalogSettings
from model_catalog.model_management.fetcher import ModelFetcher
from model_catalog.model_management.stores import (
    InMemoryModelCache,
    InMemoryTokenConfigStore,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Make sure no real keys, proxies or overrides leak into tests."""
    for var in EnvVar:
        monkeypatch.delenv(var.value, raising=False)
    yield


@pytest.fixture
def make_settings():
    """Build CatalogSettings with test defaults."""

    def _make(**kwargs) -> CatalogSettings:
        return CatalogSettings(**kwargs)

    return _make


@pytest.fixture
def cache() -> InMemoryModelCache:
    return InMemoryModelCache()


@pytest.fixture
def token_store() -> InMemoryTokenConfigStore:
    return InMemoryTokenConfigStore()


@pytest.fixture
def fake_fetcher():
    """A ModelFetcher stand-in whose fetch() returns a configurable list."""

    def _make(models: list[str] | None = None, side_effect=None) -> Mock:
        fetcher = Mock(spec=ModelFetcher)
        fetcher.fetch = AsyncMock(return_value=list(models or []), side_effect=side_effect)
        return fetcher

    return _make


@pytest.fixture
def http_client():
    """
    Patch ``httpx.AsyncClient`` for the duration of a test.

    Yields a function ``respond(json_body=None, get_side_effect=None)``
    that wires ``client.get`` and returns the mock client. The patched
    class is available as ``respond.client_class``.
    """
    with patch("httpx.AsyncClient") as mock_client_class:

        def respond(json_body=None, get_side_effect=None):
            mock_client = mock_client_class.return_value.__aenter__.return_value
            mock_response = Mock()
            mock_response.raise_for_status = Mock()
            mock_response.json = Mock(return_value=json_body)
            mock_client.get = AsyncMock(
                return_value=mock_response, side_effect=get_side_effect
            )
            return mock_client

        respond.client_class = mock_client_class
        yield respond
