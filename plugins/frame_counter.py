"""Example plugin: Frame Counter.

Counts the frames its host has run and logs a line every `interval` frames.
Demonstrates a boot object exposing both boot() and update().

To use this plugin, place it in the plugins/ directory and request it with
`--plugins=FrameCounter`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from plughost.plugins import PluginDescriptor, PluginManager

if TYPE_CHECKING:
    from plughost.host import Host

logger = logging.getLogger(__name__)


class FrameCounter:
    """Per-host frame counter."""

    def __init__(self, host: Host, interval: int = 60):
        self.host = host
        self.interval = interval
        self.frames = 0

    def boot(self) -> None:
        self.frames = 0
        logger.info("FrameCounter booted")

    def update(self) -> None:
        self.frames += 1
        if self.frames % self.interval == 0:
            logger.info(f"FrameCounter: {self.frames} frames")


PluginManager.register(PluginDescriptor(name="FrameCounter", version="1.0", create=FrameCounter))
