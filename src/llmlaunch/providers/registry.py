"""Central registry for pluggable strategies (clipboard readers, dispatchers)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass
class ProviderEntry:
    """Metadata about a registered strategy."""

    family: str  # "clipboard", "dispatch"
    name: str  # "native", "wl-paste", "browser"
    cls: type


class ProviderRegistry:
    """Name -> class lookup, grouped by family."""

    def __init__(self) -> None:
        self._providers: dict[str, dict[str, ProviderEntry]] = {}

    def register(self, family: str, name: str, cls: type) -> None:
        """Register a strategy class under a family."""
        self._providers.setdefault(family, {})[name] = ProviderEntry(
            family=family, name=name, cls=cls
        )
        log.debug("Registered provider: %s/%s", family, name)

    def get(self, family: str, name: str, config: dict | None = None, **kwargs) -> object:
        """Instantiate a strategy by family and name.

        Extra keyword arguments (runner, streams) are passed to the constructor.
        """
        entry = self.get_entry(family, name)
        return entry.cls(config, **kwargs)

    def get_entry(self, family: str, name: str) -> ProviderEntry:
        """Get a ProviderEntry without instantiating."""
        fam = self._providers.get(family)
        if fam is None:
            raise KeyError(f"Unknown provider family: {family!r}")
        entry = fam.get(name)
        if entry is None:
            raise KeyError(f"Unknown provider: {family}/{name!r}")
        return entry

    def names(self, family: str) -> list[str]:
        """List registered names in a family, in registration order."""
        return list(self._providers.get(family, {}).keys())


def build_default_registry() -> ProviderRegistry:
    """Return a registry holding every built-in strategy."""
    from llmlaunch.providers.clipboard.command import WlPasteClipboard, XclipClipboard
    from llmlaunch.providers.clipboard.native import NativeClipboard
    from llmlaunch.providers.dispatch.browser import BrowserDispatcher
    from llmlaunch.providers.dispatch.command import CommandDispatcher

    reg = ProviderRegistry()
    reg.register("clipboard", "native", NativeClipboard)
    reg.register("clipboard", "wl-paste", WlPasteClipboard)
    reg.register("clipboard", "xclip", XclipClipboard)
    reg.register("dispatch", "browser", BrowserDispatcher)
    reg.register("dispatch", "command", CommandDispatcher)
    return reg
