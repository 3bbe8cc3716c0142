"""Clipboard readers that shell out to wl-paste and xclip."""

from __future__ import annotations

from llmlaunch.core.errors import ClipboardUnavailable
from llmlaunch.core.runner import CommandRunner, SubprocessRunner


class CommandClipboard:
    """Read the clipboard from a utility's standard output."""

    program: str = ""
    args: list[str] = []

    def __init__(
        self,
        config: dict | None = None,
        runner: CommandRunner | None = None,
        **_: object,
    ) -> None:
        self._runner = runner or SubprocessRunner()

    @property
    def name(self) -> str:
        return self.program

    def read(self) -> str:
        try:
            result = self._runner.run(self.program, list(self.args))
        except OSError as e:
            raise ClipboardUnavailable(f"{self.program} not available: {e}") from e
        if not result.ok:
            detail = result.stderr.strip() or f"exit status {result.exit_code}"
            raise ClipboardUnavailable(f"{self.program} failed: {detail}")
        return result.stdout


class WlPasteClipboard(CommandClipboard):
    """Wayland clipboard via wl-paste."""

    program = "wl-paste"
    args: list[str] = []


class XclipClipboard(CommandClipboard):
    """X11 clipboard selection via xclip."""

    program = "xclip"
    args = ["-selection", "clipboard", "-o"]
