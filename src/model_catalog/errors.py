"""Exception hierarchy for the model catalog.

Only ``UnknownProviderError`` is meant to reach callers. The others are
raised by collaborators or internally and folded into a model list.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for all model catalog errors."""


class UnknownProviderError(CatalogError, KeyError):
    """No adapter is registered for the requested provider."""

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unknown provider: {provider}")

    def __str__(self) -> str:
        return self.args[0]


class CredentialLookupError(CatalogError):
    """The credential service could not produce a user's API key."""

    def __init__(self, user: str | None, provider: str, reason: str = ""):
        self.user = user
        self.provider = provider
        message = f"Could not resolve {provider} key for user {user!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ModelFetchError(CatalogError):
    """A discovery request failed (transport, status or payload shape)."""

    def __init__(self, provider: str, message: str, *, azure: bool = False):
        self.provider = provider
        self.azure = azure
        super().__init__(message)
