"""Base-URL helpers used to build discovery URLs and cache keys."""

from __future__ import annotations

from urllib.parse import urlsplit

# Cloudflare AI Gateway routes by a provider segment after the gateway id
_GATEWAY_HOST = "gateway.ai.cloudflare.com"
_GATEWAY_PROVIDERS = (
    "azure-openai",
    "openai",
    "anthropic",
    "google-ai-studio",
    "google-vertex-ai",
    "aws-bedrock",
    "groq",
    "mistral",
    "openrouter",
    "workers-ai",
)


def extract_base_url(url: str) -> str:
    """
    Reduce a reverse-proxy URL to the base path models are listed under.

    Everything after the first ``/v1`` segment (``/chat/completions``,
    ``/messages``, ...) is dropped. URLs without a ``/v1`` segment are
    returned without their trailing slash. Cloudflare AI Gateway URLs keep
    their provider segment, e.g.
    ``https://gateway.ai.cloudflare.com/v1/acct/gw/openai/chat/completions``
    becomes ``https://gateway.ai.cloudflare.com/v1/acct/gw/openai``.

    Args:
        url: Reverse proxy URL from configuration

    Returns:
        Normalized base URL without trailing slash
    """
    url = url.strip()
    if _GATEWAY_HOST in url:
        for provider in _GATEWAY_PROVIDERS:
            marker = f"/{provider}"
            index = url.find(marker + "/")
            if index == -1 and url.rstrip("/").endswith(marker):
                index = url.rstrip("/").rfind(marker)
            if index != -1:
                return url[: index + len(marker)]

    index = url.find("/v1")
    if index == -1:
        return url.rstrip("/")

    tail = url[index + 3 :]
    if tail and not tail.startswith(("/", "?")):
        # "/v1beta", "/v10" ... keep the whole segment
        segment_end = tail.find("/")
        if segment_end == -1:
            return url.rstrip("/")
        return url[: index + 3 + segment_end]
    return url[: index + 3]


def derive_origin(url: str) -> str:
    """Return ``scheme://host[:port]`` of a URL (used for Ollama servers)."""
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return url.rstrip("/")
    return f"{parts.scheme}://{parts.netloc}"


def join_url(base_url: str, path: str) -> str:
    """Join ``base_url`` and ``path`` with exactly one slash between them."""
    if not path:
        return base_url
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
