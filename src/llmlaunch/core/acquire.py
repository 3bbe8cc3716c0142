"""Content acquisition: clipboard, context tool, or nothing."""

from __future__ import annotations

import logging

from llmlaunch.core.errors import EmptyClipboard, ExternalToolError
from llmlaunch.core.models import Request
from llmlaunch.core.runner import CommandRunner
from llmlaunch.providers.clipboard.base import ClipboardReader

log = logging.getLogger(__name__)

DEFAULT_CONTEXT_COMMAND = ["contextualize", "cat", "--output", "clipboard"]


def run_context_tool(
    runner: CommandRunner,
    paths: list[str],
    command: list[str] | str | None = None,
) -> None:
    """Run the context-gathering tool so it fills the clipboard.

    Raises:
        ExternalToolError: The tool is missing or exited non-zero.
    """
    if isinstance(command, str):
        command = command.split()
    program, *args = command or DEFAULT_CONTEXT_COMMAND
    display = " ".join([program, *args])
    try:
        result = runner.run(program, [*args, *paths])
    except OSError as e:
        raise ExternalToolError(display, 127, str(e)) from e
    if not result.ok:
        raise ExternalToolError(display, result.exit_code, result.stderr)
    log.info("Context for %d path(s) copied to clipboard", len(paths))


def acquire_content(
    request: Request,
    clipboard: ClipboardReader,
    runner: CommandRunner,
    context_command: list[str] | str | None = None,
) -> str | None:
    """Resolve the content for a request.

    Returns None in pure query mode. When clipboard or context was
    requested, a blank clipboard is an error rather than absent content.

    Raises:
        ConflictingFlags: Both clipboard and context were requested.
        ExternalToolError: The context tool failed.
        ClipboardUnavailable: No clipboard strategy worked.
        EmptyClipboard: The clipboard held only whitespace.
    """
    request.validate()

    if not request.wants_content:
        return None

    if request.context_paths:
        run_context_tool(runner, request.context_paths, context_command)
    text = clipboard.read()

    if not text.strip():
        raise EmptyClipboard("Clipboard is empty")
    return text
