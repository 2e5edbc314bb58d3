# src/model_catalog/model_management/resolver.py
"""
Per-provider model list resolution.

``ModelResolver.resolve`` walks the precedence chain once, first match wins:

1. explicit override variable (no network, no cache)
2. Azure requested but not supported for discovery -> Azure defaults
3. cached list for the effective base URL
4. sentinel key -> per-user key from the credential resolver
5. discovery with the resolved or service-wide key

Anything that goes wrong ends in the fallback list; ``resolve`` never raises.
"""

from __future__ import annotations

import asyncio
import logging

from model_catalog.config.defaults import USER_PROVIDED_KEY
from model_catalog.config.settings import CatalogSettings
from model_catalog.errors import CredentialLookupError
from model_catalog.model_management.adapters import ProviderAdapter
from model_catalog.model_management.fetcher import ModelFetcher
from model_catalog.model_management.filters import filter_plugin_models
from model_catalog.model_management.models import FetchRequest, ResolveOptions
from model_catalog.model_management.stores import (
    InMemoryModelCache,
    NullCredentialResolver,
)
from model_catalog.protocols import CredentialResolver, ModelCache

logger = logging.getLogger(__name__)


def is_user_provided(api_key: str | None) -> bool:
    """True when ``api_key`` is the per-user sentinel rather than a real key."""
    return api_key == USER_PROVIDED_KEY


class ModelResolver:
    """
    Resolution engine for one provider.

    Args:
        adapter: Provider adapter
        settings: Catalog settings (keys, proxies, overrides)
        fetcher: Discovery client
        cache: Model list cache keyed by base URL
        credentials: Per-user key lookup used with the sentinel key
    """

    def __init__(
        self,
        adapter: ProviderAdapter,
        settings: CatalogSettings,
        fetcher: ModelFetcher | None = None,
        cache: ModelCache | None = None,
        credentials: CredentialResolver | None = None,
    ) -> None:
        self.adapter = adapter
        self.settings = settings
        self.fetcher = fetcher or ModelFetcher(settings)
        self.cache = cache if cache is not None else InMemoryModelCache()
        self.credentials = credentials or NullCredentialResolver()
        self._inflight: dict[tuple[str, str], asyncio.Task[list[str]]] = {}

    @property
    def provider(self) -> str:
        return self.adapter.name

    async def resolve(
        self,
        options: ResolveOptions | None = None,
        fallback: list[str] | None = None,
    ) -> list[str]:
        """
        Resolve the ordered model list for this provider.

        Args:
            options: Request context (user, azure, plugins, assistants)
            fallback: List returned when discovery yields nothing
                      (defaults to the provider's static list)

        Returns:
            Model identifiers; never raises
        """
        options = options or ResolveOptions()

        override = self.settings.override_for(self.adapter.override_env_var(options))
        if override is not None:
            logger.debug(f"{self.provider}: using explicit model list ({len(override)})")
            return override

        if fallback is None:
            fallback = self.adapter.default_models(options)
            if options.plugins:
                fallback = filter_plugin_models(fallback)
        fallback = list(fallback)

        try:
            return await self._resolve(options, fallback)
        except Exception as e:
            logger.exception(f"{self.provider}: model resolution failed: {e}")
            return fallback

    async def _resolve(self, options: ResolveOptions, fallback: list[str]) -> list[str]:
        if not self.adapter.supports_discovery:
            return fallback

        base_url = self._base_url(options)
        if base_url is None:
            logger.debug(f"{self.provider}: no base URL for this mode, using defaults")
            return fallback

        cached = await self.cache.get(base_url)
        if cached:
            logger.debug(f"{self.provider}: cache hit for {base_url}")
            return self._finalize(cached, options, fallback)

        api_key = await self._api_key(options)
        if not api_key:
            return fallback

        models = await self._discover(base_url, api_key, options)
        return self._finalize(models, options, fallback)

    def _azure_mode(self, options: ResolveOptions) -> bool:
        # An assistants base URL takes precedence over the Azure endpoint
        if options.assistants and self.settings.assistants_base_url:
            return False
        return options.azure and self.adapter.supports_azure

    def _base_url(self, options: ResolveOptions) -> str | None:
        """Effective base URL, or None when Azure discovery is requested but unsupported."""
        if self._azure_mode(options):
            return self.adapter.azure_base_url(self.settings)
        return self.adapter.resolve_base_url(self.settings, options)

    async def _api_key(self, options: ResolveOptions) -> str | None:
        api_key = self.adapter.api_key(self.settings)
        if not is_user_provided(api_key):
            if not api_key:
                logger.debug(f"{self.provider}: no API key configured")
            return api_key

        try:
            user_key = await self.credentials.get_user_key(options.user, self.provider)
        except CredentialLookupError as e:
            logger.debug(f"{self.provider}: {e}")
            return None

        if not user_key:
            logger.debug(f"{self.provider}: user {options.user!r} has no saved key")
        return user_key

    async def _discover(
        self, base_url: str, api_key: str, options: ResolveOptions
    ) -> list[str]:
        """Run (or join) the discovery for ``base_url`` and cache a non-empty result."""
        key = (base_url, api_key)
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.ensure_future(self._fetch_and_cache(base_url, api_key, options))
            self._inflight[key] = task
            task.add_done_callback(lambda _: self._inflight.pop(key, None))
        else:
            logger.debug(f"{self.provider}: joining in-flight discovery for {base_url}")
        return list(await asyncio.shield(task))

    async def _fetch_and_cache(
        self, base_url: str, api_key: str, options: ResolveOptions
    ) -> list[str]:
        request = FetchRequest(
            user=options.user,
            api_key=api_key,
            base_url=base_url,
            provider_name=self.provider,
            azure=self._azure_mode(options),
            user_id_query=self.adapter.user_id_query,
            create_token_config=self.adapter.create_token_config,
            token_key=self.adapter.token_key,
        )
        models = await self.fetcher.fetch(request)
        models = self.adapter.post_process(models, base_url)
        if models:
            await self.cache.set(base_url, models)
        return models

    @staticmethod
    def _finalize(
        models: list[str], options: ResolveOptions, fallback: list[str]
    ) -> list[str]:
        if options.plugins:
            models = filter_plugin_models(models)
        return list(models) if models else fallback
