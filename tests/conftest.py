"""Shared test fixtures for the plughost test suite."""

from __future__ import annotations

import pytest

from plughost.config import PlughostConfig
from plughost.plugins.registry import PluginDescriptor, PluginRegistry, default_registry
from tests.helpers import FakeHost, FullPlugin


@pytest.fixture(autouse=True)
def clear_default_registry():
    """Clear the process-wide registry before and after each test."""
    default_registry().clear()
    yield
    default_registry().clear()


@pytest.fixture
def registry() -> PluginRegistry:
    """A fresh, isolated plugin registry."""
    return PluginRegistry()


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def call_log() -> list[tuple[str, str]]:
    """Shared (plugin, phase) log filled by the helper boot objects."""
    return []


@pytest.fixture
def config() -> PlughostConfig:
    """Config with a short frame budget and no plugin directories."""
    return PlughostConfig(plugins=[], plugin_dirs=[], max_frames=10, frame_delay=0.0)


def register_full(
    registry: PluginRegistry, name: str, log: list[tuple[str, str]], version: str = "1.0"
) -> PluginDescriptor:
    """Register a plugin whose create() returns a FullPlugin writing to log."""
    descriptor = PluginDescriptor(
        name=name, version=version, create=lambda host: FullPlugin(name, log)
    )
    registry.register(descriptor)
    return descriptor
