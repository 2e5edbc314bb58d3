"""Model-name filtering and ordering rules."""

from __future__ import annotations

import re
from typing import Iterable

# Chat/completion families served by the canonical OpenAI endpoint
VENDOR_CHAT_PATTERN = re.compile(r"(text-davinci-003|gpt-|o\d+)")
VENDOR_EXCLUDE_PATTERN = re.compile(r"audio|realtime")

INSTRUCT_MARKER = "instruct"

# Not usable with the plugins (function calling) endpoint
PLUGIN_EXCLUDED_MARKERS: tuple[str, ...] = (
    "text-davinci",
    "instruct",
    "0613",
    "0314",
    "0301",
)


def instruct_last(models: Iterable[str]) -> list[str]:
    """Stable-partition ``models`` so instruct variants come after the rest."""
    models = list(models)
    others = [m for m in models if INSTRUCT_MARKER not in m]
    instruct = [m for m in models if INSTRUCT_MARKER in m]
    return others + instruct


def filter_vendor_models(models: Iterable[str]) -> list[str]:
    """
    Keep the chat/completion models of the canonical OpenAI listing.

    Embeddings, moderation, TTS and image models are dropped, as are
    audio and realtime variants. Instruct models are moved last.

    Example:
        >>> filter_vendor_models(["gpt-4", "gpt-4-instruct", "o1-preview"])
        ['gpt-4', 'o1-preview', 'gpt-4-instruct']
    """
    kept = [
        m
        for m in models
        if VENDOR_CHAT_PATTERN.search(m) and not VENDOR_EXCLUDE_PATTERN.search(m)
    ]
    return instruct_last(kept)


def filter_plugin_models(models: Iterable[str]) -> list[str]:
    """Drop legacy completion, instruct and deprecated dated-snapshot models."""
    return [
        m for m in models if not any(marker in m for marker in PLUGIN_EXCLUDED_MARKERS)
    ]
