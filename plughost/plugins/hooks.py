"""Plugin capability contract for plughost.

A plugin offers up to three lifecycle capabilities. Each one is optional and
independent of the others.

## 1. create(host)

Lives on the plugin's namespace entry (normally its `PluginDescriptor`).
Called once per host, during `PluginManager` construction, with the host as
its only argument. Returning a truthy object makes that object a *boot
object*; returning a falsy value (`None`, `False`, ...) means the plugin has
no per-host runtime state.

## 2. boot()

Lives on the boot object. Called by `PluginManager.boot()`, which the host
invokes once after its own subsystems are initialised.

## 3. update()

Lives on the boot object. Called by `PluginManager.update()` once per frame.

**Example:**
```python
from plughost.plugins import PluginManager, PluginDescriptor


class Stopwatch:
    def __init__(self, host):
        self.host = host
        self.frames = 0

    def boot(self):
        self.frames = 0

    def update(self):
        self.frames += 1


PluginManager.register(
    PluginDescriptor(name="Stopwatch", version="1.0", create=Stopwatch)
)
```

Or, with the decorator form:

```python
from plughost.plugins import default_registry


@default_registry().plugin("Stopwatch", "1.0")
def create(host):
    return Stopwatch(host)
```

## Type Imports

```python
from plughost.plugins import PluginDescriptor, PluginManager, default_registry
from plughost.plugins.hooks import Bootable, PluginFactory, Updatable
```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PluginFactory(Protocol):
    """Namespace entry able to build per-host plugin state."""

    def create(self, host: Any) -> Any: ...


@runtime_checkable
class Bootable(Protocol):
    def boot(self) -> None: ...


@runtime_checkable
class Updatable(Protocol):
    def update(self) -> None: ...


@dataclass(frozen=True)
class BootEntry:
    """A boot object with its lifecycle callables resolved once.

    Attributes:
        plugin_name: Name of the plugin that produced the object
        instance: The object returned by the plugin's create()
        boot: Bound boot callable, or None if the object has none
        update: Bound update callable, or None if the object has none
    """

    plugin_name: str
    instance: Any
    boot: Callable[[], Any] | None = None
    update: Callable[[], Any] | None = None


def _capability(obj: Any, name: str) -> Callable | None:
    member = getattr(obj, name, None)
    return member if callable(member) else None


def resolve_create(entry: Any) -> Callable[[Any], Any] | None:
    """Return the create callable of a namespace entry, or None."""
    return _capability(entry, "create")


def resolve_hooks(plugin_name: str, instance: Any) -> BootEntry:
    """Resolve a boot object's boot/update capabilities into a BootEntry."""
    return BootEntry(
        plugin_name=plugin_name,
        instance=instance,
        boot=_capability(instance, "boot"),
        update=_capability(instance, "update"),
    )
