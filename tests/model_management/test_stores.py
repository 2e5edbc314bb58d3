# tests/model_management/test_stores.py
"""Tests for the in-process cache, token store and credential resolvers."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from model_catalog.errors import CredentialLookupError
from model_catalog.model_management import stores
from model_catalog.model_management.models import TokenConfigEntry
from model_catalog.model_management.stores import (
    InMemoryModelCache,
    InMemoryTokenConfigStore,
    NullCredentialResolver,
    StaticCredentialResolver,
)
from model_catalog.protocols import CredentialResolver, ModelCache, TokenConfigStore


class TestInMemoryModelCache:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryModelCache(), ModelCache)

    @pytest.mark.asyncio
    async def test_miss_returns_none(self) -> None:
        assert await InMemoryModelCache().get("https://api.openai.com/v1") is None

    @pytest.mark.asyncio
    async def test_values_are_copied(self) -> None:
        cache = InMemoryModelCache()
        models = ["gpt-4o"]
        await cache.set("k", models)
        models.append("mutated")

        first = await cache.get("k")
        first.append("also-mutated")

        assert await cache.get("k") == ["gpt-4o"]

    @pytest.mark.asyncio
    async def test_ttl_expiry(self, monkeypatch) -> None:
        now = [1000.0]
        monkeypatch.setattr(stores, "time", SimpleNamespace(monotonic=lambda: now[0]))
        cache = InMemoryModelCache(ttl=60)
        await cache.set("k", ["a"])

        now[0] += 30
        assert await cache.get("k") == ["a"]

        now[0] += 31
        assert await cache.get("k") is None
        assert "k" not in cache

    @pytest.mark.asyncio
    async def test_clear(self) -> None:
        cache = InMemoryModelCache()
        await cache.set("a", ["x"])
        await cache.set("b", ["y"])
        assert len(cache) == 2

        cache.clear()
        assert len(cache) == 0


class TestInMemoryTokenConfigStore:
    @pytest.mark.asyncio
    async def test_set_and_get(self) -> None:
        store = InMemoryTokenConfigStore()
        assert isinstance(store, TokenConfigStore)

        config = {"m": TokenConfigEntry(prompt=1.0, completion=2.0, context=4096)}
        await store.set("openrouter", config)

        assert store.get("openrouter") == config
        assert store.get("missing") is None


class TestCredentialResolvers:
    @pytest.mark.asyncio
    async def test_static_lookup(self) -> None:
        resolver = StaticCredentialResolver({("u1", "openAI"): "sk-1"})
        assert isinstance(resolver, CredentialResolver)
        assert await resolver.get_user_key("u1", "openAI") == "sk-1"
        assert await resolver.get_user_key("u2", "openAI") is None
        assert await resolver.get_user_key("u1", "google") is None

    @pytest.mark.asyncio
    async def test_null_resolver_raises(self) -> None:
        with pytest.raises(CredentialLookupError) as exc_info:
            await NullCredentialResolver().get_user_key("u1", "anthropic")
        assert exc_info.value.provider == "anthropic"
