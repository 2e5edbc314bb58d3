# tests/model_management/test_adapters.py
"""Tests for provider adapters and the registry."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from model_catalog.config.defaults import (
    ANTHROPIC_BASE_URL,
    DEFAULT_ASSISTANTS_MODELS,
    DEFAULT_AZURE_ASSISTANTS_MODELS,
    DEFAULT_CHATGPT_BROWSER_MODELS,
    DEFAULT_OPENAI_MODELS,
    GOOGLE_BASE_URL,
    OPENAI_BASE_URL,
)
from model_catalog.config.enums import Provider
from model_catalog.config.env_vars import EnvVar
from model_catalog.config.settings import CatalogSettings
from model_catalog.errors import UnknownProviderError
from model_catalog.model_management.adapters import (
    AnthropicAdapter,
    BedrockAdapter,
    ChatGPTBrowserAdapter,
    GoogleAdapter,
    OpenAIAdapter,
    ProviderAdapter,
    adapter_for_fetch,
    get_adapter,
    registered_adapters,
)
from model_catalog.model_management.models import ResolveOptions


class TestRegistry:
    @pytest.mark.parametrize(
        "name, adapter_type",
        [
            ("openAI", OpenAIAdapter),
            ("openai", OpenAIAdapter),
            ("anthropic", AnthropicAdapter),
            ("Google", GoogleAdapter),
            ("bedrock", BedrockAdapter),
            ("chatGPTBrowser", ChatGPTBrowserAdapter),
            (Provider.GOOGLE, GoogleAdapter),
        ],
    )
    def test_get_adapter(self, name, adapter_type) -> None:
        assert isinstance(get_adapter(name), adapter_type)

    def test_unknown_provider(self) -> None:
        with pytest.raises(UnknownProviderError, match="Unknown provider: mystery"):
            get_adapter("mystery")

    def test_adapter_for_fetch_falls_back_to_generic(self) -> None:
        adapter = adapter_for_fetch("groq")
        assert type(adapter) is ProviderAdapter
        assert adapter.name == "groq"

    def test_registered_adapters_cover_every_provider(self) -> None:
        names = [a.name for a in registered_adapters()]
        assert names == [p.value for p in Provider]

    def test_static_only_providers(self) -> None:
        static = {a.name for a in registered_adapters() if not a.supports_discovery}
        assert static == {"bedrock", "chatGPTBrowser"}


class TestOpenAIAdapter:
    adapter = OpenAIAdapter()

    def test_bearer_headers(self) -> None:
        headers = self.adapter.build_auth_headers("sk-test", CatalogSettings())
        assert headers == {"Authorization": "Bearer sk-test"}
        assert self.adapter.build_auth_params("sk-test") == {}

    @pytest.mark.parametrize(
        "flags, var, defaults",
        [
            ({}, EnvVar.OPENAI_MODELS, DEFAULT_OPENAI_MODELS),
            ({"plugins": True}, EnvVar.PLUGIN_MODELS, DEFAULT_OPENAI_MODELS),
            ({"assistants": True}, EnvVar.ASSISTANTS_MODELS, DEFAULT_ASSISTANTS_MODELS),
            ({"azure": True}, EnvVar.AZURE_OPENAI_MODELS, DEFAULT_AZURE_ASSISTANTS_MODELS),
            (
                {"azure": True, "assistants": True},
                EnvVar.ASSISTANTS_MODELS,
                DEFAULT_ASSISTANTS_MODELS,
            ),
        ],
    )
    def test_mode_dependent_lookups(self, flags, var, defaults) -> None:
        options = ResolveOptions(**flags)
        assert self.adapter.override_env_var(options) == var
        assert self.adapter.default_models(options) == list(defaults)

    def test_base_url_canonical(self) -> None:
        url = self.adapter.resolve_base_url(CatalogSettings(), ResolveOptions())
        assert url == OPENAI_BASE_URL

    def test_base_url_reverse_proxy(self) -> None:
        settings = CatalogSettings(
            openai_reverse_proxy="https://proxy.example.com/v1/chat/completions"
        )
        url = self.adapter.resolve_base_url(settings, ResolveOptions())
        assert url == "https://proxy.example.com/v1"

    def test_assistants_base_url_wins_in_assistants_mode(self) -> None:
        settings = CatalogSettings(
            openai_reverse_proxy="https://proxy.example.com/v1",
            assistants_base_url="https://assist.example.com/v1/",
        )
        assert (
            self.adapter.resolve_base_url(settings, ResolveOptions(assistants=True))
            == "https://assist.example.com/v1"
        )
        assert (
            self.adapter.resolve_base_url(settings, ResolveOptions())
            == "https://proxy.example.com/v1"
        )

    def test_azure_discovery_not_configured(self) -> None:
        assert self.adapter.azure_base_url(CatalogSettings()) is None

    def test_post_process_filters_canonical_only(self) -> None:
        raw = ["gpt-4-instruct", "gpt-4", "text-embedding-3-small"]
        assert self.adapter.post_process(raw, OPENAI_BASE_URL) == [
            "gpt-4",
            "gpt-4-instruct",
        ]
        assert self.adapter.post_process(raw, "https://proxy.example.com/v1") == raw

    def test_models_url(self) -> None:
        assert self.adapter.models_url(OPENAI_BASE_URL) == f"{OPENAI_BASE_URL}/models"
        azure = "https://res.openai.azure.com/openai/models?api-version=2024-02-01"
        assert self.adapter.models_url(azure, azure=True) == azure


class TestAnthropicAdapter:
    adapter = AnthropicAdapter()

    def test_header_pair(self) -> None:
        headers = self.adapter.build_auth_headers(
            "ant-key", CatalogSettings(anthropic_version="2024-10-22")
        )
        assert headers == {"x-api-key": "ant-key", "anthropic-version": "2024-10-22"}
        assert "Authorization" not in headers

    def test_token_key_and_url(self) -> None:
        assert self.adapter.token_key == "anthropic"
        assert (
            self.adapter.resolve_base_url(CatalogSettings(), ResolveOptions())
            == ANTHROPIC_BASE_URL
        )

    def test_parses_openai_shape(self) -> None:
        body = {"data": [{"id": "claude-3-5-sonnet-latest", "type": "model"}]}
        assert self.adapter.parse_response(body) == ["claude-3-5-sonnet-latest"]


class TestGoogleAdapter:
    adapter = GoogleAdapter()

    def test_key_in_query(self) -> None:
        assert self.adapter.build_auth_headers("AIza", CatalogSettings()) == {}
        assert self.adapter.build_auth_params("AIza") == {"key": "AIza"}

    def test_extracts_last_path_segment(self) -> None:
        body = {"models": [{"name": "models/gemini-1.5-pro"}]}
        assert self.adapter.parse_response(body) == ["gemini-1.5-pro"]

    def test_name_without_slash_and_model_field(self) -> None:
        body = {"models": [{"name": "gemini-pro"}, {"model": "tunedModels/mine"}, {}]}
        assert self.adapter.parse_response(body) == ["gemini-pro", "mine"]

    def test_wrong_shape_raises(self) -> None:
        with pytest.raises(ValidationError):
            self.adapter.parse_response({"models": "nope"})

    def test_reverse_proxy(self) -> None:
        settings = CatalogSettings(google_reverse_proxy="https://g.example.com/v1beta/")
        assert (
            self.adapter.resolve_base_url(settings, ResolveOptions())
            == "https://g.example.com/v1beta"
        )
        assert (
            self.adapter.resolve_base_url(CatalogSettings(), ResolveOptions())
            == GOOGLE_BASE_URL
        )

    def test_no_token_config(self) -> None:
        assert self.adapter.create_token_config is False


class TestStaticAdapters:
    def test_chatgpt_browser_defaults(self) -> None:
        adapter = ChatGPTBrowserAdapter()
        assert adapter.default_models(ResolveOptions()) == list(
            DEFAULT_CHATGPT_BROWSER_MODELS
        )
        assert adapter.override_env_var(ResolveOptions()) == EnvVar.CHATGPT_MODELS

    def test_bedrock_override_var(self) -> None:
        assert BedrockAdapter().override_env_var(ResolveOptions()) == (
            EnvVar.BEDROCK_AWS_MODELS
        )

    def test_default_lists_are_copies(self) -> None:
        adapter = BedrockAdapter()
        models = adapter.default_models(ResolveOptions())
        models.clear()
        assert adapter.default_models(ResolveOptions())
