"""CommandRunner Protocol and the subprocess-backed implementation."""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol, runtime_checkable

from llmlaunch.core.models import CommandResult

log = logging.getLogger(__name__)


@runtime_checkable
class CommandRunner(Protocol):
    """Contract for running an external program to completion."""

    def run(self, name: str, args: list[str]) -> CommandResult:
        """Run `name` with `args`, wait for it, and capture both streams.

        Raises:
            FileNotFoundError: The executable is not on PATH.
        """
        ...


class SubprocessRunner:
    """Run commands with subprocess.run, no timeout."""

    def run(self, name: str, args: list[str]) -> CommandResult:
        log.debug("Running %s %s", name, " ".join(args))
        proc = subprocess.run(
            [name, *args],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        log.debug("%s exited with %d", name, proc.returncode)
        return CommandResult(
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
            exit_code=proc.returncode,
        )
