"""Tests for llmlaunch.core.formatter."""

from llmlaunch.core.formatter import build_payload, format_content


class TestFormatContent:
    def test_plain_content_gets_paste_fence(self):
        result = format_content("print('hi')", [])
        assert result == "```paste\nprint('hi')\n```"

    def test_fenced_content_gets_paste_tags(self):
        content = "see:\n```python\nx = 1\n```"
        result = format_content(content, [])
        assert result == f"<paste>\n{content}\n</paste>"
        assert not result.startswith("```")
        assert not result.endswith("```")

    def test_backticks_anywhere_trigger_tags(self):
        result = format_content("inline ``` marker", ["q"])
        assert result.startswith("<paste>\n")
        assert "```paste" not in result

    def test_two_backticks_still_fenced(self):
        result = format_content("a `` b", [])
        assert result.startswith("```paste\n")

    def test_query_appended_after_one_newline(self):
        result = format_content("body", ["explain", "this"])
        assert result == "```paste\nbody\n```\nexplain this"

    def test_query_appended_after_tags(self):
        result = format_content("```x```", ["why"])
        assert result.endswith("</paste>\nwhy")

    def test_query_tokens_joined_with_single_spaces(self):
        result = format_content("body", ["a", "b", "c"])
        assert result.splitlines()[-1] == "a b c"

    def test_empty_query_leaves_wrapped_content_only(self):
        assert format_content("body", []) == "```paste\nbody\n```"

    def test_multiline_content_preserved(self):
        content = "line 1\n  line 2\n\nline 4"
        result = format_content(content, [])
        assert content in result


class TestBuildPayload:
    def test_absent_content_joins_query(self):
        assert build_payload(None, ["hello", "world"]) == "hello world"

    def test_absent_content_empty_query_is_empty_string(self):
        assert build_payload(None, []) == ""

    def test_present_content_is_formatted(self):
        assert build_payload("x", ["q"]) == "```paste\nx\n```\nq"
