"""CLI entry point for llmlaunch (ask command)."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from llmlaunch import __version__
from llmlaunch.core import endpoints, pipeline
from llmlaunch.core.config import load_config
from llmlaunch.core.errors import LaunchAppError, UsageError
from llmlaunch.core.models import Request
from llmlaunch.core.runner import CommandRunner, SubprocessRunner
from llmlaunch.providers.clipboard.base import ChainedClipboard
from llmlaunch.providers.dispatch.base import Dispatcher, EchoDispatcher
from llmlaunch.providers.registry import ProviderRegistry, build_default_registry

log = logging.getLogger(__name__)


def _setup_logging(level_name: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, str(level_name).upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _split_paths(values: tuple[str, ...]) -> list[str] | None:
    """Flatten repeated --context values, splitting each on whitespace."""
    paths = [p for value in values for p in value.split()]
    return paths or None


def _build_clipboard(
    config: dict,
    registry: ProviderRegistry,
    runner: CommandRunner,
) -> ChainedClipboard:
    """Build the clipboard strategy chain named in config."""
    strategies = config["clipboard"]["strategies"]
    if isinstance(strategies, str):
        strategies = strategies.split()
    readers = []
    for name in strategies:
        try:
            readers.append(registry.get("clipboard", name, config, runner=runner))
        except (KeyError, TypeError):
            log.warning("Ignoring unknown clipboard strategy %r", name)
    return ChainedClipboard(readers)


def _build_dispatcher(
    name: str,
    config: dict,
    registry: ProviderRegistry,
    runner: CommandRunner,
    dry_run: bool,
) -> Dispatcher:
    try:
        entry = registry.get_entry("dispatch", name)
    except KeyError as e:
        available = ", ".join(registry.names("dispatch"))
        raise click.ClickException(
            f"Unknown dispatch strategy '{name}'. Available: {available}"
        ) from e
    if dry_run:
        return EchoDispatcher(show="payload" if name == "command" else "url")
    return entry.cls(config, runner=runner)


@click.command(
    "ask",
    context_settings={"allow_interspersed_args": False},
)
@click.argument("query", nargs=-1)
@click.option("--clipboard", "-c", is_flag=True, help="Inject clipboard content into the prompt.")
@click.option(
    "--context",
    "-x",
    "context",
    multiple=True,
    metavar="PATHS",
    help="Gather these paths with contextualize and inject them (repeatable, space-separated).",
)
@click.option("--provider", "-p", default=None, help="LLM provider (default: from config, 'claude').")
@click.option(
    "--dispatch",
    type=click.Choice(["browser", "command"]),
    default=None,
    help="Open the browser or hand off to the search command (default: from config).",
)
@click.option("--dry-run", is_flag=True, help="Print the URL (or payload) instead of launching.")
@click.option("--list-providers", is_flag=True, help="List known providers and exit.")
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override config.yaml path.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.version_option(version=__version__, prog_name="llmlaunch")
def cli(
    query: tuple[str, ...],
    clipboard: bool,
    context: tuple[str, ...],
    provider: str | None,
    dispatch: str | None,
    dry_run: bool,
    list_providers: bool,
    config_file: Path | None,
    verbose: bool,
) -> None:
    """Ask an LLM in the browser.

    QUERY words are joined with spaces. With --clipboard or --context the
    clipboard text is wrapped in a fenced block and the query follows it.
    """
    if list_providers:
        for name in endpoints.list_providers():
            click.echo(name)
        return

    config = load_config(config_file)
    _setup_logging(config.get("log_level", "warning"), verbose)

    request = Request(
        provider=provider or config.get("provider", "claude"),
        query_tokens=list(query),
        clipboard=clipboard,
        context_paths=_split_paths(context),
    )

    try:
        request.validate()
    except UsageError as e:
        raise click.UsageError(str(e)) from e

    registry = build_default_registry()
    runner = SubprocessRunner()
    dispatch_name = dispatch or config.get("dispatch", "browser")
    dispatcher = _build_dispatcher(dispatch_name, config, registry, runner, dry_run)
    reader = _build_clipboard(config, registry, runner)

    try:
        pipeline.run(
            request,
            clipboard=reader,
            runner=runner,
            dispatcher=dispatcher,
            context_command=config.get("context_command"),
        )
    except UsageError as e:
        raise click.UsageError(str(e)) from e
    except LaunchAppError as e:
        log.debug("Launch failed", exc_info=True)
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    cli()
