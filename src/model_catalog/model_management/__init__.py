# src/model_catalog/model_management/__init__.py
"""
Model management package for model-catalog.

- Pydantic models for discovery requests, options and vendor payloads
- Provider adapters and their registry
- ModelFetcher for one-shot discovery requests
- ModelResolver implementing the per-provider precedence chain
- ModelService tying it all together
"""

from model_catalog.model_management.adapters import (
    ProviderAdapter,
    get_adapter,
    registered_adapters,
)
from model_catalog.model_management.fetcher import ModelFetcher, OllamaLister
from model_catalog.model_management.filters import (
    filter_plugin_models,
    filter_vendor_models,
)
from model_catalog.model_management.models import (
    FetchRequest,
    ResolveOptions,
    TokenConfigEntry,
)
from model_catalog.model_management.resolver import ModelResolver
from model_catalog.model_management.service import ModelService
from model_catalog.model_management.stores import (
    InMemoryModelCache,
    InMemoryTokenConfigStore,
    NullCredentialResolver,
    StaticCredentialResolver,
)

__all__ = [
    "FetchRequest",
    "InMemoryModelCache",
    "InMemoryTokenConfigStore",
    "ModelFetcher",
    "ModelResolver",
    "ModelService",
    "NullCredentialResolver",
    "OllamaLister",
    "ProviderAdapter",
    "ResolveOptions",
    "StaticCredentialResolver",
    "TokenConfigEntry",
    "filter_plugin_models",
    "filter_vendor_models",
    "get_adapter",
    "registered_adapters",
]
