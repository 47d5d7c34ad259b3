"""plughost Quickstart: Your First Plugin

This script shows the whole plugin lifecycle programmatically: a plugin
registers itself, a host requests it by name, the host boots it once and
then updates it every frame.

Run with:
    python examples/quickstart.py
"""

from plughost.config import PlughostConfig
from plughost.host import Host
from plughost.plugins import PluginDescriptor, PluginManager


class Gravity:
    """Toy physics plugin: accelerates a single falling body."""

    def __init__(self, host):
        self.host = host
        self.velocity = 0.0
        self.height = 0.0

    def boot(self):
        self.velocity = 0.0
        self.height = 100.0

    def update(self):
        self.velocity += 9.81 / 60
        self.height = max(0.0, self.height - self.velocity / 60)


def main():
    # Registration happens once per process, normally when the plugin's module is imported
    PluginManager.register(PluginDescriptor(name="Gravity", version="1.0", create=Gravity))

    print("Available plugins:")
    for info in PluginManager.available_plugins():
        print(f"  - {info.name} {info.version}")
    print()

    # "Ghost" was never registered, so the manager drops it and logs why
    config = PlughostConfig(plugins=["Gravity", "Ghost"], plugin_dirs=[], max_frames=120)
    host = Host(config)
    print(f"Selected plugins: {host.plugins.plugins}")

    host.run()

    gravity = host.plugins.boot_objects[0]
    print(f"After {host.frame} frames the body is at height {gravity.height:.2f}")


if __name__ == "__main__":
    main()
