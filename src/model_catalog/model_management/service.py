# src/model_catalog/model_management/service.py
"""
ModelService - one resolver per provider behind a single facade.

The service owns the shared collaborators (settings, cache, token config
store, credential resolver, fetcher) and hands them to every per-provider
``ModelResolver`` it creates.
"""

from __future__ import annotations

import asyncio
import logging

from model_catalog.config.enums import Provider
from model_catalog.config.settings import CatalogSettings
from model_catalog.model_management.adapters import get_adapter
from model_catalog.model_management.fetcher import ModelFetcher
from model_catalog.model_management.models import FetchRequest, ResolveOptions
from model_catalog.model_management.resolver import ModelResolver
from model_catalog.model_management.stores import (
    InMemoryModelCache,
    InMemoryTokenConfigStore,
    NullCredentialResolver,
)
from model_catalog.protocols import CredentialResolver, ModelCache, TokenConfigStore

logger = logging.getLogger(__name__)

# Endpoint label -> (provider, mode flags) shown by get_models_config()
ENDPOINTS: dict[str, tuple[Provider, dict[str, bool]]] = {
    "openAI": (Provider.OPENAI, {}),
    "gptPlugins": (Provider.OPENAI, {"plugins": True}),
    "assistants": (Provider.OPENAI, {"assistants": True}),
    "azureOpenAI": (Provider.OPENAI, {"azure": True}),
    "azureAssistants": (Provider.OPENAI, {"azure": True, "assistants": True}),
    "anthropic": (Provider.ANTHROPIC, {}),
    "google": (Provider.GOOGLE, {}),
    "bedrock": (Provider.BEDROCK, {}),
    "chatGPTBrowser": (Provider.CHATGPT_BROWSER, {}),
}


class ModelService:
    """
    Facade over the per-provider resolution engines.

    Args:
        settings: Catalog settings; read from the environment when omitted
        cache: Model list cache shared by all providers
        token_store: Token configuration sink
        credentials: Per-user key lookup
    """

    def __init__(
        self,
        settings: CatalogSettings | None = None,
        cache: ModelCache | None = None,
        token_store: TokenConfigStore | None = None,
        credentials: CredentialResolver | None = None,
    ) -> None:
        self.settings = settings or CatalogSettings.from_env()
        self.cache = cache if cache is not None else InMemoryModelCache()
        self.token_store = token_store or InMemoryTokenConfigStore()
        self.credentials = credentials or NullCredentialResolver()
        self.fetcher = ModelFetcher(self.settings, token_store=self.token_store)
        self._resolvers: dict[Provider, ModelResolver] = {}

    def resolver(self, provider: Provider | str) -> ModelResolver:
        """
        Get (or create) the resolver for ``provider``.

        Raises:
            UnknownProviderError: ``provider`` is not a known provider.
        """
        adapter = get_adapter(provider)
        key = Provider(adapter.name)
        if key not in self._resolvers:
            self._resolvers[key] = ModelResolver(
                adapter,
                self.settings,
                fetcher=self.fetcher,
                cache=self.cache,
                credentials=self.credentials,
            )
        return self._resolvers[key]

    async def get_models(
        self,
        provider: Provider | str,
        options: ResolveOptions | None = None,
        fallback: list[str] | None = None,
    ) -> list[str]:
        """Resolve the model list for one provider."""
        return await self.resolver(provider).resolve(options, fallback)

    async def fetch_models(self, request: FetchRequest) -> list[str]:
        """Run a single discovery request (custom endpoints, Ollama servers)."""
        return await self.fetcher.fetch(request)

    async def get_models_config(self, user: str | None = None) -> dict[str, list[str]]:
        """
        Resolve every endpoint concurrently.

        Args:
            user: Caller's user id (for per-user keys)

        Returns:
            Mapping of endpoint label to model list
        """
        labels = list(ENDPOINTS)
        results = await asyncio.gather(
            *(
                self.get_models(
                    provider, ResolveOptions(user=user, **flags)
                )
                for provider, flags in ENDPOINTS.values()
            )
        )
        config = dict(zip(labels, results))
        logger.debug(
            "Resolved model config: "
            + ", ".join(f"{label}={len(models)}" for label, models in config.items())
        )
        return config
