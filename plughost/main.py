"""Entry point for running a plughost host from the command line."""

from __future__ import annotations

import logging
import sys

from plughost.config import PlughostConfig
from plughost.host import Host
from plughost.plugins import PluginLoader, default_registry
from plughost.renderer import Renderer


def main(argv: list[str] | None = None) -> int:
    """Load plugins, then list them or run a host with them."""
    config = PlughostConfig()
    args = sys.argv[1:] if argv is None else argv

    list_only = False
    plugin_dirs: list[str] = []

    for arg in args:
        if arg.startswith("--plugins="):
            value = arg.split("=", 1)[1]
            config.plugins = [name.strip() for name in value.split(",") if name.strip()]
        elif arg.startswith("--plugin-dir="):
            plugin_dirs.append(arg.split("=", 1)[1])
        elif arg.startswith("--frames="):
            config.max_frames = int(arg.split("=")[1])
        elif arg.startswith("--delay="):
            config.frame_delay = float(arg.split("=")[1])
        elif arg == "--isolate":
            config.isolate_plugin_errors = True
        elif arg == "--list":
            list_only = True
        elif arg.startswith("--log-level="):
            config.log_level = arg.split("=", 1)[1].upper()
        elif arg == "--help" or arg == "-h":
            print("plughost v0.1.0")
            print()
            print("Usage: python -m plughost.main [OPTIONS]")
            print()
            print("Options:")
            print("  --plugins=A,B         Plugins the host should use, in order")
            print("  --plugin-dir=PATH     Directory of plugin modules (repeatable, default: plugins)")
            print("  --frames=N            Frames to run (default: 600)")
            print("  --delay=N             Seconds between frames (default: 0.0)")
            print("  --isolate             Log plugin exceptions instead of aborting")
            print("  --list                List available plugins and exit")
            print("  --log-level=LEVEL     Logging level (default: INFO)")
            print()
            print("Environment variables (override any setting):")
            print("  PLUGHOST_PLUGINS, PLUGHOST_PLUGIN_DIRS, PLUGHOST_MAX_FRAMES, etc.")
            return 0
        else:
            print(f"Unknown option: {arg} (see --help)", file=sys.stderr)
            return 2

    if plugin_dirs:
        config.plugin_dirs = plugin_dirs

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    stats = PluginLoader.load_all(config.plugin_dirs)
    for error in stats["errors"]:
        print(f"  {error}", file=sys.stderr)

    renderer = Renderer()
    if list_only:
        renderer.print(renderer.render_available(default_registry()))
        return 0

    host = Host(config)
    renderer.print(renderer.render_status(host.plugins))
    host.run()
    renderer.print(renderer.render_status(host.plugins))
    print(renderer.render_summary(host))
    return 0


if __name__ == "__main__":
    sys.exit(main())
