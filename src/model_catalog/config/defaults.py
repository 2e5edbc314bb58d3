"""Default configuration values - no more magic numbers!

All default values should be defined here, not hardcoded in the code.
"""

from __future__ import annotations


# ================================================================
# Timeout Defaults (in seconds)
# ================================================================

DISCOVERY_TIMEOUT = 5.0
"""Timeout for a single model discovery request. Discovery never retries."""


# ================================================================
# Credentials
# ================================================================

USER_PROVIDED_KEY = "user_provided"
"""Sentinel API key: look the real key up per user instead of using it."""

DEFAULT_ANTHROPIC_VERSION = "2023-06-01"
"""Value of the anthropic-version header when ANTHROPIC_VERSION is unset."""


# ================================================================
# Canonical Vendor Endpoints
# ================================================================

OPENAI_BASE_URL = "https://api.openai.com/v1"
ANTHROPIC_BASE_URL = "https://api.anthropic.com/v1"
GOOGLE_BASE_URL = "https://generativelanguage.googleapis.com/v1"

MODELS_PATH = "/models"
"""Suffix appended to a base URL for discovery (skipped for Azure)."""

OLLAMA_TAGS_PATH = "/api/tags"
"""Local model listing endpoint of an Ollama server."""

OLLAMA_PROVIDER_PREFIX = "ollama"
"""Provider names starting with this are enumerated through Ollama."""


# ================================================================
# Token Configuration
# ================================================================

TOKEN_PRICE_SCALE = 1_000_000
"""Per-token vendor prices are stored per million tokens."""

OPENROUTER_AUTO_MODEL = "openrouter/auto"
OPENROUTER_AUTO_PRICING = {"prompt": "0.00001", "completion": "0.00003"}
"""The auto router reports no pricing of its own."""


# ================================================================
# Static Model Lists (last resort)
# ================================================================

_SHARED_OPENAI_MODELS = (
    "gpt-4o-mini",
    "gpt-4o",
    "gpt-4.5-preview",
    "gpt-4.5-preview-2025-02-27",
    "gpt-3.5-turbo",
    "gpt-3.5-turbo-0125",
    "gpt-4-turbo",
    "gpt-4-turbo-2024-04-09",
    "gpt-4-0125-preview",
    "gpt-4-turbo-preview",
    "gpt-4-1106-preview",
    "gpt-3.5-turbo-1106",
    "gpt-3.5-turbo-16k-0613",
    "gpt-3.5-turbo-16k",
    "gpt-4",
    "gpt-4-0314",
    "gpt-4-32k-0314",
    "gpt-4-0613",
    "gpt-3.5-turbo-0613",
)

DEFAULT_OPENAI_MODELS: tuple[str, ...] = (
    "o1",
    "o1-mini",
    "o3-mini",
    "chatgpt-4o-latest",
    *_SHARED_OPENAI_MODELS,
    "gpt-4-vision-preview",
    "gpt-3.5-turbo-instruct-0914",
    "gpt-3.5-turbo-instruct",
)

DEFAULT_ASSISTANTS_MODELS: tuple[str, ...] = _SHARED_OPENAI_MODELS

DEFAULT_AZURE_ASSISTANTS_MODELS: tuple[str, ...] = (
    "gpt-4o-mini",
    "gpt-4o",
    "gpt-4-turbo",
    "gpt-4",
    "gpt-35-turbo",
)

DEFAULT_ANTHROPIC_MODELS: tuple[str, ...] = (
    "claude-3-7-sonnet-latest",
    "claude-3-7-sonnet-20250219",
    "claude-3-5-haiku-20241022",
    "claude-3-5-sonnet-20241022",
    "claude-3-5-sonnet-20240620",
    "claude-3-5-sonnet-latest",
    "claude-3-opus-20240229",
    "claude-3-sonnet-20240229",
    "claude-3-haiku-20240307",
    "claude-2.1",
    "claude-2",
    "claude-instant-1",
)

DEFAULT_GOOGLE_MODELS: tuple[str, ...] = (
    "gemini-2.0-flash",
    "gemini-2.0-flash-lite",
    "gemini-1.5-pro",
    "gemini-1.5-flash",
    "gemini-1.5-flash-8b",
)

DEFAULT_BEDROCK_MODELS: tuple[str, ...] = (
    "anthropic.claude-3-5-sonnet-20240620-v1:0",
    "anthropic.claude-3-haiku-20240307-v1:0",
    "meta.llama3-1-70b-instruct-v1:0",
    "mistral.mistral-large-2407-v1:0",
    "amazon.titan-text-premier-v1:0",
    "cohere.command-r-plus-v1:0",
    "ai21.jamba-1-5-large-v1:0",
)

DEFAULT_CHATGPT_BROWSER_MODELS: tuple[str, ...] = (
    "text-davinci-002-render-sha",
    "gpt-4",
)


# ================================================================
# Logging Defaults
# ================================================================

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_MAX_BYTES = 5 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 3
