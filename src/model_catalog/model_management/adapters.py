# src/model_catalog/model_management/adapters.py
"""
Provider adapters.

Each adapter holds one provider's knowledge: canonical base URL, how the
discovery request is authenticated, how the listing is parsed, the static
default list and which environment variables override it. The resolution
engine and the fetcher select adapters through ``get_adapter`` and never
branch on provider names themselves.
"""

from __future__ import annotations

import logging
from typing import Any

from model_catalog.config.defaults import (
    ANTHROPIC_BASE_URL,
    DEFAULT_ANTHROPIC_MODELS,
    DEFAULT_ASSISTANTS_MODELS,
    DEFAULT_AZURE_ASSISTANTS_MODELS,
    DEFAULT_BEDROCK_MODELS,
    DEFAULT_CHATGPT_BROWSER_MODELS,
    DEFAULT_GOOGLE_MODELS,
    DEFAULT_OPENAI_MODELS,
    GOOGLE_BASE_URL,
    MODELS_PATH,
    OPENAI_BASE_URL,
)
from model_catalog.config.enums import Provider
from model_catalog.config.env_vars import EnvVar
from model_catalog.config.settings import CatalogSettings
from model_catalog.errors import UnknownProviderError
from model_catalog.model_management.filters import filter_vendor_models
from model_catalog.model_management.models import (
    ModelListPayload,
    NamedModelEntry,
    NamedModelListPayload,
    ResolveOptions,
)
from model_catalog.model_management.urls import extract_base_url, join_url

logger = logging.getLogger(__name__)


class ProviderAdapter:
    """
    OpenAI-compatible behaviour shared by most providers.

    Subclasses override only what their vendor does differently.
    """

    name: str = "custom"
    canonical_base_url: str | None = None
    api_key_env_var: EnvVar | None = None
    override_var: EnvVar | None = None

    supports_discovery: bool = True
    supports_azure: bool = False
    user_id_query: bool = False
    create_token_config: bool = True
    token_key: str | None = None

    def __init__(self, name: str | None = None):
        if name is not None:
            self.name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    # ── Configuration lookups ───────────────────────────────────────────────

    def default_models(self, options: ResolveOptions) -> list[str]:
        return []

    def override_env_var(self, options: ResolveOptions) -> EnvVar | None:
        return self.override_var

    def api_key(self, settings: CatalogSettings) -> str | None:
        return None

    def reverse_proxy(
        self, settings: CatalogSettings, options: ResolveOptions
    ) -> str | None:
        return None

    def azure_base_url(self, settings: CatalogSettings) -> str | None:
        """Azure listing URL; None while Azure discovery is not supported."""
        return None

    def resolve_base_url(
        self, settings: CatalogSettings, options: ResolveOptions
    ) -> str | None:
        """Canonical URL, or the normalized reverse proxy when one is set."""
        proxy = self.reverse_proxy(settings, options)
        if proxy:
            return extract_base_url(proxy)
        return self.canonical_base_url

    # ── Request building ────────────────────────────────────────────────────

    def models_url(self, base_url: str, azure: bool = False) -> str:
        return base_url if azure else join_url(base_url, MODELS_PATH)

    def build_auth_headers(
        self, api_key: str, settings: CatalogSettings
    ) -> dict[str, str]:
        return {"Authorization": f"Bearer {api_key}"}

    def build_auth_params(self, api_key: str) -> dict[str, str]:
        return {}

    # ── Response handling ───────────────────────────────────────────────────

    def parse_response(self, body: Any) -> list[str]:
        """
        Validate a listing body and extract identifiers in vendor order.

        Raises:
            pydantic.ValidationError: The body does not have the expected shape.
        """
        payload = ModelListPayload.model_validate(body)
        return [self.extract_identifier(entry) for entry in payload.data]

    def extract_identifier(self, entry: Any) -> str:
        return entry.id

    def post_process(self, models: list[str], base_url: str) -> list[str]:
        """Provider-specific filtering applied to freshly fetched lists."""
        return models


class OpenAIAdapter(ProviderAdapter):
    """OpenAI, including the assistants, Azure and plugins flavours."""

    name = Provider.OPENAI.value
    canonical_base_url = OPENAI_BASE_URL
    api_key_env_var = EnvVar.OPENAI_API_KEY
    override_var = EnvVar.OPENAI_MODELS
    supports_azure = True

    def default_models(self, options: ResolveOptions) -> list[str]:
        if options.assistants:
            return list(DEFAULT_ASSISTANTS_MODELS)
        if options.azure:
            return list(DEFAULT_AZURE_ASSISTANTS_MODELS)
        return list(DEFAULT_OPENAI_MODELS)

    def override_env_var(self, options: ResolveOptions) -> EnvVar | None:
        if options.assistants:
            return EnvVar.ASSISTANTS_MODELS
        if options.azure:
            return EnvVar.AZURE_OPENAI_MODELS
        if options.plugins:
            return EnvVar.PLUGIN_MODELS
        return EnvVar.OPENAI_MODELS

    def api_key(self, settings: CatalogSettings) -> str | None:
        return settings.openai_api_key

    def reverse_proxy(
        self, settings: CatalogSettings, options: ResolveOptions
    ) -> str | None:
        if options.assistants and settings.assistants_base_url:
            return settings.assistants_base_url
        return settings.openai_reverse_proxy

    def post_process(self, models: list[str], base_url: str) -> list[str]:
        # Reverse proxies may serve other vendors' models; only filter the real API
        if base_url == self.canonical_base_url:
            return filter_vendor_models(models)
        return models


class AnthropicAdapter(ProviderAdapter):
    """Anthropic: ``x-api-key`` plus ``anthropic-version`` instead of bearer auth."""

    name = Provider.ANTHROPIC.value
    canonical_base_url = ANTHROPIC_BASE_URL
    api_key_env_var = EnvVar.ANTHROPIC_API_KEY
    override_var = EnvVar.ANTHROPIC_MODELS
    token_key = Provider.ANTHROPIC.value

    def default_models(self, options: ResolveOptions) -> list[str]:
        return list(DEFAULT_ANTHROPIC_MODELS)

    def api_key(self, settings: CatalogSettings) -> str | None:
        return settings.anthropic_api_key

    def reverse_proxy(
        self, settings: CatalogSettings, options: ResolveOptions
    ) -> str | None:
        return settings.anthropic_reverse_proxy

    def build_auth_headers(
        self, api_key: str, settings: CatalogSettings
    ) -> dict[str, str]:
        return {
            "x-api-key": api_key,
            "anthropic-version": settings.anthropic_version,
        }


class GoogleAdapter(ProviderAdapter):
    """Google Generative Language API: key in the query string, ``{models: [{name}]}``."""

    name = Provider.GOOGLE.value
    canonical_base_url = GOOGLE_BASE_URL
    api_key_env_var = EnvVar.GOOGLE_KEY
    override_var = EnvVar.GOOGLE_MODELS
    create_token_config = False

    def default_models(self, options: ResolveOptions) -> list[str]:
        return list(DEFAULT_GOOGLE_MODELS)

    def api_key(self, settings: CatalogSettings) -> str | None:
        return settings.google_key

    def reverse_proxy(
        self, settings: CatalogSettings, options: ResolveOptions
    ) -> str | None:
        return settings.google_reverse_proxy

    def build_auth_headers(
        self, api_key: str, settings: CatalogSettings
    ) -> dict[str, str]:
        return {}

    def build_auth_params(self, api_key: str) -> dict[str, str]:
        return {"key": api_key}

    def parse_response(self, body: Any) -> list[str]:
        payload = NamedModelListPayload.model_validate(body)
        return [
            identifier
            for identifier in (self.extract_identifier(m) for m in payload.models)
            if identifier
        ]

    def extract_identifier(self, entry: NamedModelEntry) -> str:
        # "models/gemini-1.5-pro" -> "gemini-1.5-pro"
        name = entry.name or entry.model or ""
        return name.rsplit("/", 1)[-1]


class StaticAdapter(ProviderAdapter):
    """Providers without a listing endpoint: override variable or defaults only."""

    supports_discovery = False
    create_token_config = False
    defaults: tuple[str, ...] = ()

    def default_models(self, options: ResolveOptions) -> list[str]:
        return list(self.defaults)


class BedrockAdapter(StaticAdapter):
    name = Provider.BEDROCK.value
    override_var = EnvVar.BEDROCK_AWS_MODELS
    defaults = DEFAULT_BEDROCK_MODELS


class ChatGPTBrowserAdapter(StaticAdapter):
    name = Provider.CHATGPT_BROWSER.value
    override_var = EnvVar.CHATGPT_MODELS
    defaults = DEFAULT_CHATGPT_BROWSER_MODELS


# ── Registry ─────────────────────────────────────────────────────────────────

_REGISTRY: dict[Provider, ProviderAdapter] = {
    Provider.OPENAI: OpenAIAdapter(),
    Provider.ANTHROPIC: AnthropicAdapter(),
    Provider.GOOGLE: GoogleAdapter(),
    Provider.BEDROCK: BedrockAdapter(),
    Provider.CHATGPT_BROWSER: ChatGPTBrowserAdapter(),
}


def get_adapter(provider: Provider | str) -> ProviderAdapter:
    """
    Look up the adapter for a known provider.

    Raises:
        UnknownProviderError: ``provider`` is not one of ``Provider``.
    """
    if not isinstance(provider, Provider):
        try:
            provider = Provider.parse(provider)
        except ValueError:
            raise UnknownProviderError(str(provider)) from None
    return _REGISTRY[provider]


def adapter_for_fetch(provider_name: str) -> ProviderAdapter:
    """
    Adapter used to build and parse a discovery request.

    Unknown names (custom OpenAI-compatible endpoints such as a self-hosted
    gateway) get the generic bearer-token adapter.
    """
    try:
        return get_adapter(provider_name)
    except UnknownProviderError:
        logger.debug(f"No adapter for '{provider_name}', using OpenAI-compatible")
        return ProviderAdapter(provider_name)


def registered_adapters() -> list[ProviderAdapter]:
    """All registered adapters in ``Provider`` order."""
    return [_REGISTRY[provider] for provider in Provider]
