"""Error types raised along the launch pipeline."""

from __future__ import annotations


class LaunchAppError(Exception):
    """Base error for every failure the `ask` command reports."""


class UsageError(LaunchAppError):
    """Malformed or conflicting command-line flags."""


class ConflictingFlags(UsageError):
    """--clipboard and --context were requested together."""


class AcquisitionError(LaunchAppError):
    """Content could not be obtained from the clipboard or context tool."""


class ClipboardUnavailable(AcquisitionError):
    """No clipboard access strategy succeeded."""


class EmptyClipboard(AcquisitionError):
    """Clipboard was read but held only whitespace."""


class ExternalToolError(AcquisitionError):
    """The context-gathering tool exited non-zero."""

    def __init__(self, command: str, exit_code: int, stderr: str = "") -> None:
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        detail = stderr.strip() or "no diagnostic output"
        super().__init__(f"{command} exited with status {exit_code}: {detail}")


class UnsupportedProvider(LaunchAppError):
    """Provider name is not in the built-in endpoint table."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unsupported provider: {name}")


class LaunchError(LaunchAppError):
    """The browser or delegated search command could not be started."""
