# src/model_catalog/model_management/stores.py
"""
In-process collaborator implementations.

Used by the CLI and tests. Services embedding the catalog are expected to
pass their own cache and credential service instead.
"""

from __future__ import annotations

import logging
import time
from typing import Mapping

from model_catalog.config.enums import CacheNamespace
from model_catalog.errors import CredentialLookupError
from model_catalog.model_management.models import TokenConfig

logger = logging.getLogger(__name__)


class InMemoryModelCache:
    """
    Dict-backed model list cache with an optional time-to-live.

    Entries are copied on the way in and out so callers cannot mutate
    what other callers will read.
    """

    def __init__(
        self,
        ttl: float | None = None,
        namespace: CacheNamespace = CacheNamespace.MODEL_QUERIES,
    ) -> None:
        self._ttl = ttl
        self._namespace = namespace
        self._entries: dict[str, tuple[float, list[str]]] = {}

    async def get(self, key: str) -> list[str] | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        stored_at, value = entry
        if self._ttl is not None and time.monotonic() - stored_at > self._ttl:
            logger.debug(f"[{self._namespace.value}] expired entry for {key}")
            del self._entries[key]
            return None
        return list(value)

    async def set(self, key: str, value: list[str]) -> None:
        self._entries[key] = (time.monotonic(), list(value))

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


class InMemoryTokenConfigStore:
    """Keeps the latest token configuration written for each key."""

    def __init__(self) -> None:
        self.configs: dict[str, TokenConfig] = {}

    async def set(self, key: str, value: TokenConfig) -> None:
        self.configs[key] = dict(value)

    def get(self, key: str) -> TokenConfig | None:
        return self.configs.get(key)


class StaticCredentialResolver:
    """
    Resolve user keys from a fixed ``{(user, provider): key}`` mapping.

    A ``None`` user matches entries saved under ``None``, which lets the
    CLI supply a single key per provider.
    """

    def __init__(self, keys: Mapping[tuple[str | None, str], str] | None = None):
        self._keys = dict(keys or {})

    async def get_user_key(self, user_id: str | None, provider: str) -> str | None:
        return self._keys.get((user_id, provider))


class NullCredentialResolver:
    """Credential resolver for deployments without per-user keys."""

    async def get_user_key(self, user_id: str | None, provider: str) -> str | None:
        raise CredentialLookupError(user_id, provider, "no credential service configured")
