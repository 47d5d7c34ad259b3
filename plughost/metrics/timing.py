"""Frame timing instrumentation for plughost hosts."""

from collections import defaultdict
from dataclasses import dataclass


@dataclass
class FrameTiming:
    """Timing breakdown for a single frame."""

    update_ms: float = 0.0
    total_ms: float = 0.0


class PerformanceMonitor:
    """Tracks per-frame timing and per-plugin failure counts."""

    def __init__(self):
        self._frame_timings: list[FrameTiming] = []
        self._boot_ms: float = 0.0
        self._failure_counts: dict[str, int] = defaultdict(int)

    def record_boot(self, duration_ms: float) -> None:
        self._boot_ms = duration_ms

    def record_frame(self, timing: FrameTiming) -> None:
        self._frame_timings.append(timing)

    def record_failure(self, plugin_name: str) -> None:
        self._failure_counts[plugin_name] += 1

    @property
    def summary(self) -> dict:
        if not self._frame_timings:
            return {}
        n = len(self._frame_timings)
        return {
            "total_frames": n,
            "boot_ms": round(self._boot_ms, 2),
            "avg_frame_ms": sum(t.total_ms for t in self._frame_timings) / n,
            "avg_update_ms": sum(t.update_ms for t in self._frame_timings) / n,
            "slowest_frame_ms": max(t.total_ms for t in self._frame_timings),
            "plugin_failures": dict(self._failure_counts),
        }
