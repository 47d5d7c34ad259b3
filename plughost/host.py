"""Minimal frame-driven host application.

Owns a `PluginManager` and drives it the way an application's main loop
would: boot once after construction, then one `update()` per frame.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from typing import Any

from plughost.config import PlughostConfig
from plughost.errors import HostStateError
from plughost.metrics.timing import FrameTiming, PerformanceMonitor
from plughost.plugins.manager import PluginManager
from plughost.plugins.registry import PluginRegistry

logger = logging.getLogger(__name__)


class Host:
    """Frame loop host that plugins are attached to.

    Plugins receive the host as the argument of their create step, so they
    can read `host.config` and `host.frame`.
    """

    def __init__(
        self,
        config: PlughostConfig | None = None,
        registry: PluginRegistry | None = None,
        namespace: Mapping[str, Any] | None = None,
    ):
        self.config = config if config is not None else PlughostConfig()
        self.frame: int = 0
        self.booted: bool = False
        self.max_frames: int = self.config.max_frames
        self._perf_monitor = PerformanceMonitor()

        # Built last: create steps see config and frame, but host.plugins is
        # only assigned once every create step has returned
        self.plugins = PluginManager(
            self,
            self.config.plugins,
            registry=registry,
            namespace=namespace,
            isolate_errors=self.config.isolate_plugin_errors,
        )
        self._record_new_failures(0)

    @property
    def perf_monitor(self) -> PerformanceMonitor:
        return self._perf_monitor

    def boot(self) -> None:
        """Boot all plugins. A host boots exactly once."""
        if self.booted:
            raise HostStateError("Host has already been booted")

        seen = len(self.plugins.failures)
        start = time.perf_counter()
        self.plugins.boot()
        self._perf_monitor.record_boot((time.perf_counter() - start) * 1000)
        self._record_new_failures(seen)
        self.booted = True
        logger.info(f"Host booted with plugins: {self.plugins.plugins}")

    def step(self) -> FrameTiming:
        """Advance one frame, updating every plugin once."""
        if not self.booted:
            raise HostStateError("Host must be booted before stepping")
        if self.is_over():
            raise HostStateError(f"Host finished after {self.max_frames} frames")

        frame_start = time.perf_counter()
        seen = len(self.plugins.failures)

        update_start = time.perf_counter()
        self.plugins.update()
        update_ms = (time.perf_counter() - update_start) * 1000

        self._record_new_failures(seen)
        self.frame += 1

        timing = FrameTiming(
            update_ms=update_ms,
            total_ms=(time.perf_counter() - frame_start) * 1000,
        )
        self._perf_monitor.record_frame(timing)
        return timing

    def run(self, max_frames: int | None = None, frame_delay: float | None = None) -> int:
        """Boot if needed, then step until the frame budget is used.

        Returns:
            Number of frames run by this call
        """
        if max_frames is not None:
            self.max_frames = self.frame + max_frames
        delay = self.config.frame_delay if frame_delay is None else frame_delay

        if not self.booted:
            self.boot()

        start_frame = self.frame
        while not self.is_over():
            self.step()
            if delay > 0:
                time.sleep(delay)

        logger.info(f"Host ran {self.frame - start_frame} frames")
        return self.frame - start_frame

    def is_over(self) -> bool:
        return self.frame >= self.max_frames

    def _record_new_failures(self, seen: int) -> None:
        for failure in self.plugins.failures[seen:]:
            self._perf_monitor.record_failure(failure.plugin_name)
