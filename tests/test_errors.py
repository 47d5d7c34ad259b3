"""Tests for plughost error hierarchy."""

import pytest

from plughost.errors import (
    DescriptorError,
    HostStateError,
    PlughostError,
    PluginLifecycleError,
    PluginLoadError,
)


def test_plughost_error_hierarchy():
    assert issubclass(DescriptorError, PlughostError)
    assert issubclass(PluginLoadError, PlughostError)
    assert issubclass(PluginLifecycleError, PlughostError)
    assert issubclass(HostStateError, PlughostError)
    assert issubclass(PlughostError, Exception)


def test_plugin_lifecycle_error_attributes():
    cause = RuntimeError("boom")
    error = PluginLifecycleError("Physics", "update", cause)

    assert error.plugin_name == "Physics"
    assert error.phase == "update"
    assert error.cause is cause
    assert str(error) == "Plugin 'Physics' failed during update: boom"


def test_host_state_error_can_be_raised():
    with pytest.raises(HostStateError):
        raise HostStateError("Host not booted")
