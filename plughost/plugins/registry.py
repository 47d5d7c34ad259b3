"""Registry of announced plugin descriptors.

Plugins announce themselves once, at module load time, by registering a
`PluginDescriptor`. The first registration of a name wins; later
registrations with the same name, or of the very same descriptor, are
ignored. One registry instance serves as the process-wide default, but any
number of independent registries can be built and handed to managers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from plughost.errors import DescriptorError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PluginDescriptor:
    """Registered record of a plugin.

    Attributes:
        name: Unique plugin name (exact string match)
        version: Free-form version string, reported but never compared
        create: Optional factory called with the host during manager construction
    """

    name: str
    version: str
    create: Callable[[Any], Any] | None = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise DescriptorError(f"Plugin name must be a non-empty string, got {self.name!r}")
        if not isinstance(self.version, str):
            raise DescriptorError(
                f"Plugin '{self.name}' version must be a string, got {self.version!r}"
            )
        if self.create is not None and not callable(self.create):
            raise DescriptorError(f"Plugin '{self.name}' create must be callable")


@dataclass(frozen=True)
class PluginInfo:
    """Name/version pair describing an available plugin."""

    name: str
    version: str


class PluginRegistry(Mapping[str, PluginDescriptor]):
    """Ordered, name-unique collection of plugin descriptors.

    Doubles as the default namespace for `PluginManager`: looking a name up
    yields its descriptor, whose `create` capability was fixed at
    registration time.
    """

    def __init__(self):
        self._descriptors: list[PluginDescriptor] = []

    def register(self, descriptor: PluginDescriptor) -> bool:
        """Register a descriptor unless it or its name is already present.

        Returns:
            True if the descriptor was added, False if it was ignored
        """
        name = getattr(descriptor, "name", None)
        logger.debug(f"Attempting to register plugin: {name}")

        if not isinstance(descriptor, PluginDescriptor):
            logger.warning(f"Cannot register {descriptor!r}: not a PluginDescriptor, ignoring")
            return False

        if any(existing is descriptor for existing in self._descriptors):
            logger.info(f"Plugin '{name}' has already been registered, ignoring second registration")
            return False

        if self.is_registered(name):
            logger.info(
                f"A plugin named '{name}' has already been registered, ignoring this plugin"
            )
            return False

        self._descriptors.append(descriptor)
        logger.info(f"Registered plugin {name}: version {descriptor.version}")
        return True

    def plugin(self, name: str, version: str):
        """Decorator registering a create function as a plugin.

        Usage:
            @registry.plugin("physics", "1.0")
            def create(host):
                return PhysicsWorld(host)
        """

        def decorator(create: Callable[[Any], Any]) -> Callable[[Any], Any]:
            self.register(PluginDescriptor(name=name, version=version, create=create))
            return create

        return decorator

    @property
    def available_plugins(self) -> list[PluginInfo]:
        """Name and version of every registered plugin, in registration order.

        Built fresh on every access.
        """
        return [PluginInfo(name=d.name, version=d.version) for d in self._descriptors]

    def is_registered(self, name: Any) -> bool:
        """True iff some registered descriptor has exactly this name."""
        return any(d.name == name for d in self._descriptors)

    def __getitem__(self, name: str) -> PluginDescriptor:
        for descriptor in self._descriptors:
            if descriptor.name == name:
                return descriptor
        raise KeyError(name)

    def __iter__(self) -> Iterator[str]:
        return iter([d.name for d in self._descriptors])

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name: object) -> bool:
        return self.is_registered(name)

    def clear(self) -> None:
        """Clear all registrations. Useful for testing."""
        self._descriptors.clear()
        logger.debug("Cleared all plugin registrations")


_default_registry = PluginRegistry()


def default_registry() -> PluginRegistry:
    """The process-wide registry used by `PluginManager.register`."""
    return _default_registry
