# src/model_catalog/__init__.py
"""
model-catalog: resolve the model lists LLM providers expose to callers.

Sources, highest precedence first: explicit environment lists, a cache of
earlier discoveries, live discovery against the provider API, static
defaults.
"""

from model_catalog.config import CatalogSettings, Provider, setup_logging
from model_catalog.errors import (
    CatalogError,
    CredentialLookupError,
    ModelFetchError,
    UnknownProviderError,
)
from model_catalog.model_management import (
    FetchRequest,
    ModelFetcher,
    ModelResolver,
    ModelService,
    ResolveOptions,
)

__version__ = "0.3.0"

__all__ = [
    "CatalogError",
    "CatalogSettings",
    "CredentialLookupError",
    "FetchRequest",
    "ModelFetchError",
    "ModelFetcher",
    "ModelResolver",
    "ModelService",
    "Provider",
    "ResolveOptions",
    "UnknownProviderError",
    "setup_logging",
    "__version__",
]
