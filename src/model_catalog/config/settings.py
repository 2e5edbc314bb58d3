"""Catalog settings - the one configuration object the resolvers read.

Everything environment-derived lives on ``CatalogSettings`` so the
resolution engine never touches ``os.environ`` directly. Build it once with
``CatalogSettings.from_env()`` or construct it explicitly in tests.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

from model_catalog.config.defaults import DEFAULT_ANTHROPIC_VERSION, DISCOVERY_TIMEOUT
from model_catalog.config.env_vars import EnvVar, get_env, get_env_float, get_env_list

logger = logging.getLogger(__name__)

# Variables that carry an explicit, comma-separated model list
OVERRIDE_VARS: tuple[EnvVar, ...] = (
    EnvVar.OPENAI_MODELS,
    EnvVar.PLUGIN_MODELS,
    EnvVar.ASSISTANTS_MODELS,
    EnvVar.AZURE_OPENAI_MODELS,
    EnvVar.ANTHROPIC_MODELS,
    EnvVar.GOOGLE_MODELS,
    EnvVar.BEDROCK_AWS_MODELS,
    EnvVar.CHATGPT_MODELS,
)


class CatalogSettings(BaseModel):
    """Resolved configuration for every provider the catalog knows about."""

    # OpenAI
    openai_api_key: str | None = Field(None, description="OpenAI key or sentinel")
    openai_organization: str | None = Field(None, description="OpenAI org id")
    openai_reverse_proxy: str | None = Field(None, description="OpenAI base override")
    assistants_base_url: str | None = Field(
        None, description="Base override used in assistants mode"
    )

    # Anthropic
    anthropic_api_key: str | None = Field(None, description="Anthropic key or sentinel")
    anthropic_reverse_proxy: str | None = Field(
        None, description="Anthropic base override"
    )
    anthropic_version: str = Field(
        DEFAULT_ANTHROPIC_VERSION, description="anthropic-version header value"
    )

    # Google
    google_key: str | None = Field(None, description="Google key or sentinel")
    google_reverse_proxy: str | None = Field(None, description="Google base override")

    # Network
    proxy: str | None = Field(None, description="Outbound proxy for discovery")
    discovery_timeout: float = Field(DISCOVERY_TIMEOUT, gt=0)

    # Explicit model lists, keyed by the variable that carried them
    model_overrides: dict[EnvVar, list[str]] = Field(default_factory=dict)

    model_config = {"frozen": True}

    @field_validator(
        "openai_api_key",
        "openai_organization",
        "openai_reverse_proxy",
        "assistants_base_url",
        "anthropic_api_key",
        "anthropic_reverse_proxy",
        "google_key",
        "google_reverse_proxy",
        "proxy",
    )
    @classmethod
    def _blank_is_unset(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    def override_for(self, var: EnvVar | None) -> list[str] | None:
        """Return the explicit model list carried by ``var``, if any."""
        if var is None:
            return None
        models = self.model_overrides.get(var)
        return list(models) if models is not None else None

    @classmethod
    def from_env(cls) -> "CatalogSettings":
        """Read settings from the process environment."""
        overrides: dict[EnvVar, list[str]] = {}
        for var in OVERRIDE_VARS:
            models = get_env_list(var)
            # A set variable wins even when it lists nothing
            if models is not None:
                overrides[var] = models

        settings = cls(
            openai_api_key=get_env(EnvVar.OPENAI_API_KEY),
            openai_organization=get_env(EnvVar.OPENAI_ORGANIZATION),
            openai_reverse_proxy=get_env(EnvVar.OPENAI_REVERSE_PROXY),
            assistants_base_url=get_env(EnvVar.ASSISTANTS_BASE_URL),
            anthropic_api_key=get_env(EnvVar.ANTHROPIC_API_KEY),
            anthropic_reverse_proxy=get_env(EnvVar.ANTHROPIC_REVERSE_PROXY),
            anthropic_version=get_env(
                EnvVar.ANTHROPIC_VERSION, DEFAULT_ANTHROPIC_VERSION
            )
            or DEFAULT_ANTHROPIC_VERSION,
            google_key=get_env(EnvVar.GOOGLE_KEY),
            google_reverse_proxy=get_env(EnvVar.GOOGLE_REVERSE_PROXY),
            proxy=get_env(EnvVar.PROXY),
            discovery_timeout=get_env_float(
                EnvVar.DISCOVERY_TIMEOUT, DISCOVERY_TIMEOUT
            )
            or DISCOVERY_TIMEOUT,
            model_overrides=overrides,
        )
        logger.debug(
            "Loaded catalog settings (overrides: %s)",
            ", ".join(var.value for var in overrides) or "none",
        )
        return settings
