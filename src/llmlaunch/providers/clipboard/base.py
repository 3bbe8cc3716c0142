"""ClipboardReader Protocol and the fall-through chain."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from llmlaunch.core.errors import ClipboardUnavailable

log = logging.getLogger(__name__)


@runtime_checkable
class ClipboardReader(Protocol):
    """Contract for reading text from the system clipboard."""

    @property
    def name(self) -> str:
        """Unique strategy ID: 'native', 'wl-paste', 'xclip'."""
        ...

    def read(self) -> str:
        """Return the clipboard text.

        Raises:
            ClipboardUnavailable: This strategy cannot reach the clipboard.
        """
        ...


class ChainedClipboard:
    """Try each reader in order; the first one that succeeds wins."""

    def __init__(self, readers: list[ClipboardReader]) -> None:
        self._readers = list(readers)

    @property
    def name(self) -> str:
        return "chain"

    def read(self) -> str:
        failures: list[str] = []
        for reader in self._readers:
            try:
                text = reader.read()
            except ClipboardUnavailable as e:
                log.debug("Clipboard strategy %s failed: %s", reader.name, e)
                failures.append(f"{reader.name}: {e}")
                continue
            log.debug("Read %d chars from clipboard via %s", len(text), reader.name)
            return text

        if not failures:
            raise ClipboardUnavailable("No clipboard strategies configured")
        raise ClipboardUnavailable("Could not read clipboard (" + "; ".join(failures) + ")")
