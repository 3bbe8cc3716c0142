"""Core data models for llmlaunch."""

from __future__ import annotations

from dataclasses import dataclass, field

from llmlaunch.core.errors import ConflictingFlags


@dataclass
class Request:
    """One parsed invocation of the `ask` command."""

    provider: str
    query_tokens: list[str] = field(default_factory=list)
    clipboard: bool = False
    context_paths: list[str] | None = None

    def validate(self) -> None:
        """Reject flag combinations that cannot be acquired together."""
        if self.clipboard and self.context_paths:
            raise ConflictingFlags("--clipboard and --context cannot be used together")

    @property
    def wants_content(self) -> bool:
        return self.clipboard or bool(self.context_paths)


@dataclass
class CommandResult:
    """Captured outcome of an external command."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
