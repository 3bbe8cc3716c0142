"""Tests for llmlaunch.core.endpoints."""

import urllib.parse

import pytest

from llmlaunch.core.endpoints import encode_payload, get_provider_url, list_providers
from llmlaunch.core.errors import LaunchAppError, UnsupportedProvider


def _decoded_query(url: str) -> str:
    query = urllib.parse.urlsplit(url).query
    assert query.startswith("q=")
    return urllib.parse.unquote(query[2:], encoding="utf-8")


class TestGetProviderUrl:
    def test_claude(self):
        assert get_provider_url("claude", "x") == "https://claude.ai/new?q=x"

    def test_chatgpt_encodes_space(self):
        assert get_provider_url("chatgpt", "hello world") == "https://chatgpt.com/?q=hello%20world"

    def test_unknown_provider(self):
        with pytest.raises(UnsupportedProvider) as exc_info:
            get_provider_url("unknown", "x")
        assert exc_info.value.name == "unknown"
        assert "unknown" in str(exc_info.value)

    def test_provider_name_is_case_sensitive(self):
        with pytest.raises(UnsupportedProvider):
            get_provider_url("Claude", "x")

    def test_unsupported_is_launch_app_error(self):
        assert issubclass(UnsupportedProvider, LaunchAppError)

    def test_empty_payload(self):
        assert get_provider_url("claude", "") == "https://claude.ai/new?q="

    @pytest.mark.parametrize("payload", [
        "what is 2+2?",
        "```paste\nfn main() {}\n```\nexplain",
        "a&b=c#frag/path",
        "naïve café — 日本語",
        "  leading and trailing  \n\t",
        "under_score.dot-dash~tilde%25",
    ])
    def test_query_decodes_to_original_payload(self, payload: str):
        url = get_provider_url("claude", payload)
        assert _decoded_query(url) == payload

    def test_url_has_single_query_parameter(self):
        url = get_provider_url("chatgpt", "a&q=b#c")
        parts = urllib.parse.urlsplit(url)
        assert parts.fragment == ""
        assert list(urllib.parse.parse_qs(parts.query).keys()) == ["q"]


class TestEncodePayload:
    def test_alphanumerics_untouched(self):
        assert encode_payload("abcXYZ019") == "abcXYZ019"

    def test_unreserved_punctuation_escaped(self):
        assert encode_payload("_.-~") == "%5F%2E%2D%7E"

    def test_slash_and_newline_escaped(self):
        assert encode_payload("a/b\nc") == "a%2Fb%0Ac"

    def test_non_ascii_utf8_bytes(self):
        assert encode_payload("é") == "%C3%A9"


class TestListProviders:
    def test_known_providers(self):
        assert list_providers() == ["chatgpt", "claude"]
