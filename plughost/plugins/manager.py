"""Per-host plugin manager.

A host builds one `PluginManager` with the names of the plugins it wants.
Construction validates those names, then runs each valid plugin's create
step with the host. The host later calls `boot()` once and `update()` every
frame; both fan out over the objects the create steps returned, in the
order they were created.

Validation and creation problems only shrink the working set and are
logged. Exceptions raised by plugin code propagate to the caller unless the
manager was built with `isolate_errors=True`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any

from plughost.errors import PluginLifecycleError
from plughost.plugins.hooks import BootEntry, resolve_create, resolve_hooks
from plughost.plugins.registry import (
    PluginDescriptor,
    PluginInfo,
    PluginRegistry,
    default_registry,
)

logger = logging.getLogger(__name__)


class ManagerState(Enum):
    """Lifecycle state, tracked for diagnostics only."""

    CREATED = "created"
    BOOTED = "booted"
    UPDATING = "updating"


class PluginManager:
    """Selects, creates and drives the plugins used by one host."""

    @staticmethod
    def register(descriptor: PluginDescriptor) -> bool:
        """Register a plugin with the process-wide registry.

        Any host can then choose to use it. A plugin only needs registering
        once; a second registration, or another plugin with the same name,
        is ignored even if its version differs.
        """
        return default_registry().register(descriptor)

    @staticmethod
    def available_plugins() -> list[PluginInfo]:
        """Name and version of every plugin in the process-wide registry."""
        return default_registry().available_plugins

    def __init__(
        self,
        host: Any,
        plugin_names: Sequence[Any] | None = None,
        *,
        registry: PluginRegistry | None = None,
        namespace: Mapping[str, Any] | None = None,
        isolate_errors: bool = False,
    ):
        """
        Args:
            host: Owning host, passed to every plugin's create()
            plugin_names: Plugin names requested by the host
            registry: Registry to validate against (default: process-wide one)
            namespace: Name -> implementation lookup (default: the registry)
            isolate_errors: Catch and record plugin exceptions instead of raising
        """
        logger.debug("Creating PluginManager")
        self._host = host
        self._registry = registry if registry is not None else default_registry()
        self._namespace = namespace if namespace is not None else self._registry
        self._isolate_errors = isolate_errors
        if isinstance(plugin_names, str):
            logger.warning(
                f"Plugin names should be a sequence of names, got the string {plugin_names!r}; "
                f"treating it as a single name"
            )
            plugin_names = [plugin_names]
        self._plugins: list[Any] = list(plugin_names) if plugin_names else []
        self._boot_objects: list[BootEntry] = []
        self._failures: list[PluginLifecycleError] = []
        self.state = ManagerState.CREATED

        self.validate_plugins()
        self._create_plugins()

    @property
    def obj_type(self) -> str:
        return "PluginManager"

    @property
    def host(self) -> Any:
        return self._host

    @property
    def registry(self) -> PluginRegistry:
        return self._registry

    @property
    def plugins(self) -> list[str]:
        """Validated plugin names, in request order."""
        return list(self._plugins)

    @property
    def boot_objects(self) -> list[Any]:
        """Objects returned by plugin create steps, in creation order."""
        return [entry.instance for entry in self._boot_objects]

    @property
    def entries(self) -> list[BootEntry]:
        return list(self._boot_objects)

    @property
    def failures(self) -> list[PluginLifecycleError]:
        """Plugin exceptions caught while isolation was enabled."""
        return list(self._failures)

    def validate_plugins(self) -> None:
        """Keep only requested names that are strings, in the namespace and registered.

        Order is preserved. Dropped entries are logged with their index.
        """
        valid: list[str] = []

        for index, plugin in enumerate(self._plugins):
            if not isinstance(plugin, str):
                logger.warning(
                    f"The supplied plugin name at index {index} is not a string and will be ignored"
                )
                continue

            if plugin in self._namespace and self.plugin_is_registered(plugin):
                valid.append(plugin)
                descriptor = self._registry[plugin]
                logger.info(
                    f"Plugin '{plugin}' appears to be valid "
                    f"(name: {descriptor.name}, version: {descriptor.version})"
                )
            else:
                logger.warning(
                    f"Plugin '{plugin}' at index {index} appears to be invalid: it is not "
                    f"in the plugin namespace or is not registered. Check that the module "
                    f"defining it has been loaded. This plugin will be ignored"
                )

        self._plugins = valid

    def plugin_is_registered(self, plugin_name: str) -> bool:
        """True if a plugin with exactly this name is registered."""
        return self._registry.is_registered(plugin_name)

    def _create_plugins(self) -> None:
        """Run each validated plugin's create step and collect its boot object."""
        for plugin in self._plugins:
            create = resolve_create(self._namespace[plugin])
            if create is None:
                logger.info(f"No 'create' function found on plugin '{plugin}'")
                continue

            logger.debug(f"'create' function found on plugin '{plugin}'")
            boot_object = self._invoke(plugin, "create", create, self._host)
            if boot_object:
                self._boot_objects.append(resolve_hooks(plugin, boot_object))

    def boot(self) -> None:
        """Call boot() on every boot object that has one, in creation order.

        Not guarded against repeat calls.
        """
        logger.info(f"Booting {len(self._boot_objects)} plugin object(s)")
        for index, entry in enumerate(self._boot_objects):
            logger.debug(f"Booting plugin {index} ('{entry.plugin_name}')")
            if entry.boot is None:
                logger.warning(
                    f"No boot function found on boot object of plugin '{entry.plugin_name}'"
                )
                continue
            self._invoke(entry.plugin_name, "boot", entry.boot)
        if self.state == ManagerState.CREATED:
            self.state = ManagerState.BOOTED

    def update(self) -> None:
        """Call update() on every boot object that has one, in creation order."""
        for entry in self._boot_objects:
            if entry.update is not None:
                self._invoke(entry.plugin_name, "update", entry.update)
        self.state = ManagerState.UPDATING

    def _invoke(self, plugin_name: str, phase: str, fn: Callable, *args: Any) -> Any:
        if not self._isolate_errors:
            return fn(*args)

        try:
            return fn(*args)
        except Exception as e:
            failure = PluginLifecycleError(plugin_name, phase, e)
            logger.exception(str(failure))
            self._failures.append(failure)
            return None
