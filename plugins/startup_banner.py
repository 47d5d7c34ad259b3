"""Example plugin: Startup Banner.

Logs the host's plugin list once at boot. Its boot object has no update(),
so the manager skips it every frame.
"""

from __future__ import annotations

import logging

from plughost.plugins import default_registry

logger = logging.getLogger(__name__)


class StartupBanner:
    def __init__(self, host):
        self.host = host

    def boot(self) -> None:
        names = ", ".join(self.host.plugins.plugins) or "(none)"
        logger.info(f"Host starting with plugins: {names}")


@default_registry().plugin("StartupBanner", "0.2")
def create(host):
    return StartupBanner(host)
