# src/model_catalog/model_management/fetcher.py
"""
Remote model discovery.

``ModelFetcher.fetch`` performs exactly one authenticated listing request
and returns the identifiers it found. It never raises: configuration gaps
return an empty list silently, transport and payload failures are logged
and return an empty list.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from model_catalog.config.defaults import OLLAMA_PROVIDER_PREFIX, OLLAMA_TAGS_PATH
from model_catalog.config.settings import CatalogSettings
from model_catalog.errors import ModelFetchError
from model_catalog.model_management.adapters import ProviderAdapter, adapter_for_fetch
from model_catalog.model_management.models import (
    FetchRequest,
    OllamaTagsPayload,
    PricedModelListPayload,
    build_token_config,
)
from model_catalog.model_management.stores import InMemoryTokenConfigStore
from model_catalog.model_management.urls import derive_origin, join_url
from model_catalog.protocols import TokenConfigStore

logger = logging.getLogger(__name__)

# Enough of an error body to diagnose a bad key or a misrouted proxy
_MAX_ERROR_BODY = 500


def _describe_http_error(error: httpx.HTTPError) -> str:
    if isinstance(error, httpx.HTTPStatusError):
        body = error.response.text[:_MAX_ERROR_BODY] if error.response.text else ""
        detail = f"status {error.response.status_code}"
        return f"{detail}: {body}" if body else detail
    if isinstance(error, httpx.TimeoutException):
        return f"timed out ({type(error).__name__})"
    return f"{type(error).__name__}: {error}"


class OllamaLister:
    """Enumerates the models pulled into a local Ollama server."""

    def __init__(self, settings: CatalogSettings):
        self._settings = settings

    async def fetch_models(self, base_url: str | None) -> list[str]:
        """
        List models via ``<origin>/api/tags``.

        Args:
            base_url: Any URL on the Ollama server (``/v1`` paths are fine)

        Returns:
            Model tags, or an empty list on any failure
        """
        if not base_url:
            return []

        url = join_url(derive_origin(base_url), OLLAMA_TAGS_PATH)
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.discovery_timeout
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                payload = OllamaTagsPayload.model_validate(response.json())
        except httpx.HTTPError as e:
            logger.error(
                f"Failed to fetch models from Ollama API: {_describe_http_error(e)}"
            )
            return []
        except ValueError as e:
            logger.error(f"Failed to fetch models from Ollama API: invalid payload: {e}")
            return []

        return [tag.name for tag in payload.models]


class ModelFetcher:
    """
    Stateless discovery client.

    Args:
        settings: Catalog settings (proxy, organization, timeout, versions)
        token_store: Where derived token configuration is written
        ollama: Lister used for ``ollama*`` provider names
    """

    def __init__(
        self,
        settings: CatalogSettings,
        token_store: TokenConfigStore | None = None,
        ollama: OllamaLister | None = None,
    ) -> None:
        self.settings = settings
        self.token_store = token_store or InMemoryTokenConfigStore()
        self.ollama = ollama or OllamaLister(settings)

    async def fetch(self, request: FetchRequest) -> list[str]:
        """
        Discover the models available at ``request.base_url``.

        Args:
            request: Discovery parameters

        Returns:
            Model identifiers in vendor order, or an empty list
        """
        if not request.is_actionable:
            return []

        if request.provider_name.lower().startswith(OLLAMA_PROVIDER_PREFIX):
            return await self.ollama.fetch_models(request.base_url)

        adapter = adapter_for_fetch(request.provider_name)
        try:
            return await self._fetch(adapter, request)
        except ModelFetchError as e:
            logger.error(str(e))
        except Exception as e:
            logger.exception(
                f"{self._failure_prefix(request)}: unexpected error: {e}"
            )
        return []

    async def _fetch(self, adapter: ProviderAdapter, request: FetchRequest) -> list[str]:
        if not request.base_url:
            logger.debug(f"{self._failure_prefix(request)}: no base URL configured")
            return []

        url = adapter.models_url(request.base_url, azure=request.azure)
        headers = adapter.build_auth_headers(request.api_key, self.settings)
        params = adapter.build_auth_params(request.api_key)

        if self.settings.openai_organization and "openai" in request.base_url:
            headers["OpenAI-Organization"] = self.settings.openai_organization

        if request.user and request.user_id_query:
            params["user"] = request.user

        logger.debug(f"Discovering {request.provider_name} models from {url}")
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.discovery_timeout,
                proxy=self.settings.proxy,
            ) as client:
                response = await client.get(url, headers=headers, params=params or None)
                response.raise_for_status()
                body = response.json()
        except httpx.HTTPError as e:
            raise ModelFetchError(
                request.provider_name,
                f"{self._failure_prefix(request)}: {_describe_http_error(e)}",
                azure=request.azure,
            ) from e
        except ValueError as e:
            raise ModelFetchError(
                request.provider_name,
                f"{self._failure_prefix(request)}: response is not JSON",
                azure=request.azure,
            ) from e

        try:
            models = adapter.parse_response(body)
        except ValidationError as e:
            raise ModelFetchError(
                request.provider_name,
                f"{self._failure_prefix(request)}: unexpected response shape: "
                f"{e.error_count()} validation error(s)",
                azure=request.azure,
            ) from e

        if request.create_token_config:
            await self._store_token_config(request, body)

        logger.debug(f"Discovered {len(models)} {request.provider_name} models")
        return models

    async def _store_token_config(self, request: FetchRequest, body: Any) -> None:
        """Write token config when every listed model carries pricing data."""
        try:
            payload = PricedModelListPayload.model_validate(body)
        except ValidationError:
            return

        try:
            config = build_token_config(payload)
            await self.token_store.set(request.token_config_key, config)
        except Exception as e:
            # The listing stands even when its token config cannot be stored
            logger.warning(
                f"Could not store token config under '{request.token_config_key}': {e}"
            )
            return
        logger.debug(f"Stored token config under '{request.token_config_key}'")

    @staticmethod
    def _failure_prefix(request: FetchRequest) -> str:
        azure = "Azure " if request.azure else ""
        return f"Failed to fetch models from {azure}{request.provider_name} API"
