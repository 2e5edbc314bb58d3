"""Environment variable names - centralized, type-safe, no magic strings!

All environment variable access should go through this module.
"""

from __future__ import annotations

import os
from enum import Enum


class EnvVar(str, Enum):
    """All environment variable names read by the model catalog.

    Use these instead of hardcoded strings for type safety.
    """

    # ================================================================
    # OpenAI
    # ================================================================
    OPENAI_API_KEY = "OPENAI_API_KEY"
    OPENAI_ORGANIZATION = "OPENAI_ORGANIZATION"
    OPENAI_REVERSE_PROXY = "OPENAI_REVERSE_PROXY"
    OPENAI_MODELS = "OPENAI_MODELS"
    PLUGIN_MODELS = "PLUGIN_MODELS"

    # ================================================================
    # Assistants / Azure
    # ================================================================
    ASSISTANTS_BASE_URL = "ASSISTANTS_BASE_URL"
    ASSISTANTS_MODELS = "ASSISTANTS_MODELS"
    AZURE_OPENAI_MODELS = "AZURE_OPENAI_MODELS"

    # ================================================================
    # Anthropic
    # ================================================================
    ANTHROPIC_API_KEY = "ANTHROPIC_API_KEY"
    ANTHROPIC_REVERSE_PROXY = "ANTHROPIC_REVERSE_PROXY"
    ANTHROPIC_MODELS = "ANTHROPIC_MODELS"
    ANTHROPIC_VERSION = "ANTHROPIC_VERSION"

    # ================================================================
    # Google
    # ================================================================
    GOOGLE_KEY = "GOOGLE_KEY"
    GOOGLE_REVERSE_PROXY = "GOOGLE_REVERSE_PROXY"
    GOOGLE_MODELS = "GOOGLE_MODELS"

    # ================================================================
    # Static-only providers
    # ================================================================
    BEDROCK_AWS_MODELS = "BEDROCK_AWS_MODELS"
    CHATGPT_MODELS = "CHATGPT_MODELS"

    # ================================================================
    # Network
    # ================================================================
    PROXY = "PROXY"
    DISCOVERY_TIMEOUT = "MODEL_CATALOG_DISCOVERY_TIMEOUT"

    # ================================================================
    # Logging
    # ================================================================
    LOG_LEVEL = "MODEL_CATALOG_LOG_LEVEL"


# ================================================================
# Type-Safe Helper Functions
# ================================================================


def get_env(var: EnvVar, default: str | None = None) -> str | None:
    """Get environment variable value (type-safe).

    Args:
        var: EnvVar enum member
        default: Default value if not set

    Returns:
        Environment variable value or default

    Example:
        >>> key = get_env(EnvVar.OPENAI_API_KEY)
    """
    return os.getenv(var.value, default)


def get_env_float(var: EnvVar, default: float | None = None) -> float | None:
    """Get environment variable as float.

    Args:
        var: EnvVar enum member
        default: Default value if not set or invalid

    Returns:
        Float value or default

    Example:
        >>> timeout = get_env_float(EnvVar.DISCOVERY_TIMEOUT, 5.0)
    """
    value = get_env(var)
    if value is None:
        return default

    try:
        return float(value)
    except ValueError:
        return default


def get_env_list(
    var: EnvVar, separator: str = ",", default: list[str] | None = None
) -> list[str] | None:
    """Get environment variable as list of strings.

    Unlike the scalar getters, an empty variable counts as unset so that
    ``OPENAI_MODELS=""`` does not wipe out a provider's model list.

    Args:
        var: EnvVar enum member
        separator: String separator (default: comma)
        default: Returned when the variable is unset or empty

    Returns:
        List of strings (stripped of whitespace, empties dropped)

    Example:
        >>> models = get_env_list(EnvVar.OPENAI_MODELS)
        # "gpt-4o, gpt-4o-mini" -> ["gpt-4o", "gpt-4o-mini"]
    """
    value = get_env(var)
    if not value:
        return default

    return [item.strip() for item in value.split(separator) if item.strip()]
