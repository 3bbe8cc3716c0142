"""Delegate the payload to an external search command."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from llmlaunch.core.errors import LaunchError
from llmlaunch.core.runner import CommandRunner, SubprocessRunner

log = logging.getLogger(__name__)


class CommandDispatcher:
    """Run `search_command <payload>` and relay its output streams verbatim."""

    def __init__(
        self,
        config: dict | None = None,
        runner: CommandRunner | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        **_: object,
    ) -> None:
        config = config or {}
        command = config.get("search_command") or ["search"]
        if isinstance(command, str):
            command = command.split()
        self._command: list[str] = list(command)
        self._runner = runner or SubprocessRunner()
        self._stdout = stdout
        self._stderr = stderr

    @property
    def name(self) -> str:
        return "command"

    def dispatch(self, url: str, payload: str) -> None:
        program, *args = self._command
        try:
            result = self._runner.run(program, [*args, payload])
        except OSError as e:
            raise LaunchError(f"Failed to run {program}: {e}") from e

        # Resolved at call time, not in __init__.
        out = self._stdout or sys.stdout
        err = self._stderr or sys.stderr
        out.write(result.stdout)
        err.write(result.stderr)
        out.flush()
        err.flush()

        if not result.ok:
            raise LaunchError(f"{program} exited with status {result.exit_code}")
