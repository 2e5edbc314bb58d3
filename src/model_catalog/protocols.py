"""Protocol definitions for the catalog's collaborators.

The resolution engine only talks to these interfaces; storage, eviction,
expiry and credential storage belong to the implementations.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from model_catalog.model_management.models import TokenConfig


@runtime_checkable
class ModelCache(Protocol):
    """Short-lived store of discovered model lists, keyed by base URL."""

    async def get(self, key: str) -> list[str] | None:
        """Return the cached list for ``key``, or None when absent/expired."""
        ...

    async def set(self, key: str, value: list[str]) -> None:
        """Store ``value`` under ``key`` (last writer wins)."""
        ...


@runtime_checkable
class TokenConfigStore(Protocol):
    """Write-only sink for token configuration derived during discovery."""

    async def set(self, key: str, value: TokenConfig) -> None:
        ...


@runtime_checkable
class CredentialResolver(Protocol):
    """Looks up the API key a user saved for a provider."""

    async def get_user_key(self, user_id: str | None, provider: str) -> str | None:
        """Return the user's key, or None if they have not saved one.

        Raises:
            CredentialLookupError: The credential service failed.
        """
        ...
