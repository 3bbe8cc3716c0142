"""Payload formatting: wrap pasted content and append the typed query."""

from __future__ import annotations

FENCE = "```"


def format_content(content: str, query_tokens: list[str]) -> str:
    """Wrap clipboard content and append the query on its own line.

    Content that already holds a triple-backtick fence is wrapped in
    <paste> tags so the outer delimiter cannot close an inner block.
    """
    if FENCE in content:
        formatted = f"<paste>\n{content}\n</paste>"
    else:
        formatted = f"{FENCE}paste\n{content}\n{FENCE}"

    if query_tokens:
        return f"{formatted}\n{' '.join(query_tokens)}"
    return formatted


def build_payload(content: str | None, query_tokens: list[str]) -> str:
    """Return the final payload for either pure-query or content mode."""
    if content is None:
        return " ".join(query_tokens)
    return format_content(content, query_tokens)
