"""Tests for frame timing instrumentation."""

from plughost.metrics.timing import FrameTiming, PerformanceMonitor


def test_frame_timing_defaults():
    timing = FrameTiming()
    assert timing.update_ms == 0.0
    assert timing.total_ms == 0.0


def test_performance_monitor_records_frames():
    monitor = PerformanceMonitor()
    monitor.record_frame(FrameTiming(update_ms=10.0, total_ms=20.0))
    monitor.record_frame(FrameTiming(update_ms=12.0, total_ms=25.0))

    summary = monitor.summary
    assert summary["total_frames"] == 2
    assert summary["avg_frame_ms"] == 22.5
    assert summary["avg_update_ms"] == 11.0
    assert summary["slowest_frame_ms"] == 25.0


def test_performance_monitor_empty_summary():
    assert PerformanceMonitor().summary == {}


def test_performance_monitor_boot_and_failures():
    monitor = PerformanceMonitor()
    monitor.record_boot(1.234)
    monitor.record_failure("Bad")
    monitor.record_failure("Bad")
    monitor.record_frame(FrameTiming(total_ms=1.0))

    summary = monitor.summary
    assert summary["boot_ms"] == 1.23
    assert summary["plugin_failures"] == {"Bad": 2}
