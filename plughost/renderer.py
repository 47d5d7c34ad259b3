"""Rich terminal renderer for plugin listings and host status."""

from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from plughost.host import Host
    from plughost.plugins.manager import PluginManager
    from plughost.plugins.registry import PluginRegistry


def _make_console() -> Console:
    """Create a Rich Console that works on Windows (force UTF-8)."""
    if sys.platform == "win32" and hasattr(sys.stdout, "buffer"):
        utf8_stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
        return Console(file=utf8_stdout, force_terminal=True)
    return Console()


# (text, style) per capability flag
CAPABILITY_DISPLAY = {
    True: ("yes", "bold green"),
    False: ("-", "grey50"),
}


class Renderer:
    """Rich terminal renderer for the plugin system."""

    def __init__(self, console: Console | None = None):
        self.console = console or _make_console()

    def render_available(self, registry: PluginRegistry) -> Table:
        """Table of every registered plugin, in registration order."""
        table = Table(title="Available plugins")
        table.add_column("#", justify="right", style="grey50")
        table.add_column("Name", style="bold cyan")
        table.add_column("Version")

        for idx, info in enumerate(registry.available_plugins):
            table.add_row(str(idx), info.name, info.version)

        return table

    def render_status(self, manager: PluginManager) -> Table:
        """Table of the boot objects a manager drives and their capabilities."""
        table = Table(title=f"Plugins ({manager.state.value})")
        table.add_column("Plugin", style="bold cyan")
        table.add_column("boot")
        table.add_column("update")

        for entry in manager.entries:
            table.add_row(
                entry.plugin_name,
                self._capability_cell(entry.boot is not None),
                self._capability_cell(entry.update is not None),
            )

        return table

    def render_summary(self, host: Host) -> str:
        """One-line frame timing summary."""
        summary = host.perf_monitor.summary
        if not summary:
            return f"  Frame {host.frame} | no frames recorded"
        failures = sum(summary["plugin_failures"].values())
        return (
            f"  Frames: {summary['total_frames']} | "
            f"avg {summary['avg_frame_ms']:.3f} ms | "
            f"slowest {summary['slowest_frame_ms']:.3f} ms | "
            f"plugin failures: {failures}"
        )

    def print(self, renderable: Any) -> None:
        self.console.print(renderable)

    @staticmethod
    def _capability_cell(present: bool) -> str:
        text, style = CAPABILITY_DISPLAY[present]
        return f"[{style}]{text}[/{style}]"
