# src/model_catalog/model_management/models.py
"""
Discovery data models.

Pydantic models for discovery requests, resolution options, token
configuration and the vendor payloads a discovery request can return.
"""

from __future__ import annotations

from typing import Optional, List, Dict

from pydantic import BaseModel, Field

from model_catalog.config.defaults import (
    OPENROUTER_AUTO_MODEL,
    OPENROUTER_AUTO_PRICING,
    TOKEN_PRICE_SCALE,
)
from model_catalog.config.enums import Provider


class FetchRequest(BaseModel):
    """
    One discovery request against a provider's model listing endpoint.

    Built per call and never persisted.
    """

    user: Optional[str] = Field(None, description="Caller's user id")
    api_key: Optional[str] = Field(None, description="Resolved API key")
    base_url: Optional[str] = Field(None, description="Provider base URL")
    provider_name: str = Field(
        default=Provider.OPENAI.value, description="Provider / endpoint name"
    )
    azure: bool = Field(default=False, description="Use the Azure URL as-is")
    user_id_query: bool = Field(
        default=False, description="Send the user id as a query parameter"
    )
    create_token_config: bool = Field(
        default=True, description="Derive and store token config on success"
    )
    token_key: Optional[str] = Field(
        None, description="Token config store key (defaults to provider_name)"
    )

    model_config = {"frozen": True}

    @property
    def is_actionable(self) -> bool:
        """False when there is nothing to call: no key, or no URL outside Azure."""
        if not self.api_key:
            return False
        return bool(self.base_url) or self.azure

    @property
    def token_config_key(self) -> str:
        return self.token_key or self.provider_name


class ResolveOptions(BaseModel):
    """Request context for a resolution run."""

    user: Optional[str] = Field(None, description="Caller's user id")
    azure: bool = Field(default=False, description="Azure endpoint requested")
    plugins: bool = Field(default=False, description="Plugins endpoint requested")
    assistants: bool = Field(
        default=False, description="Assistants endpoint requested"
    )

    model_config = {"frozen": True}


# ── Vendor payloads ──────────────────────────────────────────────────────────


class ModelEntry(BaseModel):
    """One item of an OpenAI-compatible ``{data: [...]}`` listing."""

    id: str

    model_config = {"extra": "allow"}


class ModelListPayload(BaseModel):
    """``{"data": [{"id": ...}, ...]}`` (OpenAI, Anthropic, most gateways)."""

    data: List[ModelEntry]

    model_config = {"extra": "allow"}


class NamedModelEntry(BaseModel):
    """One item of a Google ``{models: [...]}`` listing."""

    name: str = ""
    model: Optional[str] = None

    model_config = {"extra": "allow"}


class NamedModelListPayload(BaseModel):
    """``{"models": [{"name": "models/gemini-1.5-pro"}, ...]}``."""

    models: List[NamedModelEntry] = Field(default_factory=list)

    model_config = {"extra": "allow"}


class OllamaTag(BaseModel):
    name: str

    model_config = {"extra": "allow"}


class OllamaTagsPayload(BaseModel):
    """``{"models": [{"name": "llama3:latest"}, ...]}`` from ``/api/tags``."""

    models: List[OllamaTag] = Field(default_factory=list)

    model_config = {"extra": "allow"}


# ── Token configuration ──────────────────────────────────────────────────────


class ModelPricing(BaseModel):
    prompt: str
    completion: str

    model_config = {"extra": "allow"}


class PricedModelEntry(BaseModel):
    """A listing item that carries pricing and a context window (OpenRouter style)."""

    id: str
    pricing: ModelPricing
    context_length: int

    model_config = {"extra": "allow"}


class PricedModelListPayload(BaseModel):
    data: List[PricedModelEntry]

    model_config = {"extra": "allow"}


class TokenConfigEntry(BaseModel):
    """Token metadata for one model: prices per million tokens and context size."""

    prompt: float
    completion: float
    context: int

    model_config = {"frozen": True}


TokenConfig = Dict[str, TokenConfigEntry]


def build_token_config(payload: PricedModelListPayload) -> TokenConfig:
    """
    Derive a token configuration from a priced model listing.

    Args:
        payload: Validated listing whose items all carry pricing

    Returns:
        Mapping of model id to TokenConfigEntry
    """
    config: TokenConfig = {}
    for entry in payload.data:
        pricing = entry.pricing
        if entry.id == OPENROUTER_AUTO_MODEL:
            pricing = ModelPricing(**OPENROUTER_AUTO_PRICING)
        config[entry.id] = TokenConfigEntry(
            prompt=float(pricing.prompt) * TOKEN_PRICE_SCALE,
            completion=float(pricing.completion) * TOKEN_PRICE_SCALE,
            context=entry.context_length,
        )
    return config
