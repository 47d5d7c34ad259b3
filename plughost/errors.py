"""Structured error hierarchy for plughost."""


class PlughostError(Exception):
    """Base for all plughost errors."""

    pass


class DescriptorError(PlughostError):
    """Plugin descriptor built with invalid fields."""

    pass


class PluginLoadError(PlughostError):
    """Plugin module could not be imported."""

    pass


class PluginLifecycleError(PlughostError):
    """A plugin's create/boot/update raised while isolation was enabled."""

    def __init__(self, plugin_name: str, phase: str, cause: BaseException):
        self.plugin_name = plugin_name
        self.phase = phase
        self.cause = cause
        super().__init__(f"Plugin '{plugin_name}' failed during {phase}: {cause}")


class HostStateError(PlughostError):
    """Host in invalid state for requested operation."""

    pass
