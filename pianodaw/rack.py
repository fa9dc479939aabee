"""A chain of plugins that a signal runs through."""

from __future__ import annotations

from collections.abc import Sequence

from .plugin import Plugin


class Rack:
    """An ordered list of plugins applied one after another."""

    def __init__(self) -> None:
        self.plugins: list[Plugin] = []

    def process(self, buffer: Sequence[float]) -> list[float]:
        """Run ``buffer`` through every plugin and return the signal to mix in."""
        signal = list(buffer)
        for plugin in self.plugins:
            signal = plugin.render(len(signal))
        return signal

    def add_plugin(self, filepath: str) -> Plugin:
        """Append a plugin loaded from ``filepath`` and return it."""
        plugin = Plugin(filepath)
        self.plugins.append(plugin)
        return plugin