"""Plugin system for plughost.

Provides a registry where plugins announce themselves, a per-host manager
that selects, creates and drives them, and a loader that imports
self-registering plugin modules.
"""

from __future__ import annotations

from plughost.plugins.loader import PluginLoader
from plughost.plugins.manager import ManagerState, PluginManager
from plughost.plugins.registry import (
    PluginDescriptor,
    PluginInfo,
    PluginRegistry,
    default_registry,
)

__all__ = [
    "ManagerState",
    "PluginDescriptor",
    "PluginInfo",
    "PluginLoader",
    "PluginManager",
    "PluginRegistry",
    "default_registry",
]
