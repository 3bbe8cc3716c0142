"""Provider URL templates and payload encoding."""

from __future__ import annotations

import logging
import urllib.parse

from llmlaunch.core.errors import UnsupportedProvider

log = logging.getLogger(__name__)

_ENDPOINTS: dict[str, str] = {
    "claude": "https://claude.ai/new?q={query}",
    "chatgpt": "https://chatgpt.com/?q={query}",
}

# quote() never escapes these four, even with safe="".
_ALWAYS_SAFE = str.maketrans({
    "_": "%5F",
    ".": "%2E",
    "-": "%2D",
    "~": "%7E",
})


def encode_payload(payload: str) -> str:
    """Percent-encode every UTF-8 byte that is not an ASCII letter or digit."""
    return urllib.parse.quote(payload, safe="", encoding="utf-8").translate(_ALWAYS_SAFE)


def get_provider_url(provider: str, payload: str) -> str:
    """Build the provider URL with the payload as its ``q`` parameter.

    Args:
        provider: Provider name ('claude', 'chatgpt'). Case-sensitive.
        payload: Formatted payload text.

    Returns:
        The full URL to open.

    Raises:
        UnsupportedProvider: Provider name is not a known endpoint.
    """
    template = _ENDPOINTS.get(provider)
    if template is None:
        raise UnsupportedProvider(provider)
    url = template.format(query=encode_payload(payload))
    log.debug("Resolved %s URL (%d chars)", provider, len(url))
    return url


def list_providers() -> list[str]:
    """Return all known provider names."""
    return sorted(_ENDPOINTS.keys())
