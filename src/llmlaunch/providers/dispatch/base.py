"""Dispatcher Protocol: the last step that hands the request off."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import click


@runtime_checkable
class Dispatcher(Protocol):
    """Contract for launching a resolved request."""

    @property
    def name(self) -> str:
        """Unique dispatcher ID: 'browser', 'command'."""
        ...

    def dispatch(self, url: str, payload: str) -> None:
        """Launch the request.

        Args:
            url: Provider URL with the encoded payload.
            payload: The formatted payload text.

        Raises:
            LaunchError: The browser or command could not be started.
        """
        ...


class EchoDispatcher:
    """Write what would be launched instead of launching it (--dry-run)."""

    def __init__(self, show: str = "url", echo=None) -> None:
        self._show = show
        self._echo = echo or click.echo

    @property
    def name(self) -> str:
        return "echo"

    def dispatch(self, url: str, payload: str) -> None:
        self._echo(payload if self._show == "payload" else url)
