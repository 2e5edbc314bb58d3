"""Configuration enums - no magic strings!"""

from __future__ import annotations

from enum import Enum


class Provider(str, Enum):
    """Provider (endpoint) names the catalog can resolve models for."""

    OPENAI = "openAI"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    BEDROCK = "bedrock"
    CHATGPT_BROWSER = "chatGPTBrowser"

    @classmethod
    def parse(cls, value: str) -> "Provider":
        """Look up a provider by name, ignoring case."""
        lowered = value.strip().lower()
        for member in cls:
            if member.value.lower() == lowered or member.name.lower() == lowered:
                return member
        raise ValueError(f"Unknown provider: {value}")


class CacheNamespace(str, Enum):
    """Logical stores the catalog writes to."""

    MODEL_QUERIES = "model_queries"
