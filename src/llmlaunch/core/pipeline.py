"""The launch pipeline: acquire -> format -> resolve -> dispatch."""

from __future__ import annotations

import logging

from llmlaunch.core.acquire import acquire_content
from llmlaunch.core.endpoints import get_provider_url
from llmlaunch.core.formatter import build_payload
from llmlaunch.core.models import Request
from llmlaunch.core.runner import CommandRunner
from llmlaunch.providers.clipboard.base import ClipboardReader
from llmlaunch.providers.dispatch.base import Dispatcher

log = logging.getLogger(__name__)


def run(
    request: Request,
    clipboard: ClipboardReader,
    runner: CommandRunner,
    dispatcher: Dispatcher,
    context_command: list[str] | str | None = None,
) -> str:
    """Run one invocation end to end and return the URL that was dispatched.

    Every step raises a LaunchAppError subclass on failure; nothing is retried.
    """
    content = acquire_content(request, clipboard, runner, context_command)
    payload = build_payload(content, request.query_tokens)
    url = get_provider_url(request.provider, payload)

    log.debug("Dispatching via %s (payload %d chars)", dispatcher.name, len(payload))
    dispatcher.dispatch(url, payload)
    return url
