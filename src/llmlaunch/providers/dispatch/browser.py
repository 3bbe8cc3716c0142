"""Open the provider URL in the default web browser."""

from __future__ import annotations

import logging
import webbrowser
from collections.abc import Callable

from llmlaunch.core.errors import LaunchError

log = logging.getLogger(__name__)


class BrowserDispatcher:
    """Hand the URL to the OS default browser via webbrowser."""

    def __init__(
        self,
        config: dict | None = None,
        opener: Callable[[str], bool] | None = None,
        **_: object,
    ) -> None:
        self._open = opener or webbrowser.open

    @property
    def name(self) -> str:
        return "browser"

    def dispatch(self, url: str, payload: str) -> None:
        log.debug("Opening %s", url)
        try:
            opened = self._open(url)
        except webbrowser.Error as e:
            raise LaunchError(f"Failed to open browser: {e}") from e
        if not opened:
            raise LaunchError("Failed to open browser: no browser could be launched")
