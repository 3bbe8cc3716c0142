"""Native clipboard access through pyperclip."""

from __future__ import annotations

import pyperclip

from llmlaunch.core.errors import ClipboardUnavailable


class NativeClipboard:
    """Read the clipboard with the platform API pyperclip selects."""

    def __init__(self, config: dict | None = None, **_: object) -> None:
        """Takes the registry constructor arguments; pyperclip needs no settings."""

    @property
    def name(self) -> str:
        return "native"

    def read(self) -> str:
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardUnavailable(str(e)) from e
        return text or ""
