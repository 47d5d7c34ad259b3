"""Tests for capability resolution of namespace entries and boot objects."""

from __future__ import annotations

from types import SimpleNamespace

from plughost.plugins.hooks import Bootable, Updatable, resolve_create, resolve_hooks
from plughost.plugins.registry import PluginDescriptor
from tests.helpers import BootOnlyPlugin, FullPlugin, UpdateOnlyPlugin


def test_resolve_create_from_descriptor():
    def create(host):
        return None

    assert resolve_create(PluginDescriptor(name="A", version="1", create=create)) is create
    assert resolve_create(PluginDescriptor(name="A", version="1")) is None


def test_resolve_create_from_plain_object():
    assert resolve_create(SimpleNamespace(create=len)) is len
    assert resolve_create(SimpleNamespace()) is None
    assert resolve_create(SimpleNamespace(create="not callable")) is None


def test_resolve_hooks_full():
    plugin = FullPlugin("A")
    entry = resolve_hooks("A", plugin)

    assert entry.plugin_name == "A"
    assert entry.instance is plugin
    entry.boot()
    entry.update()
    assert plugin.log == [("A", "boot"), ("A", "update")]


def test_resolve_hooks_partial():
    boot_only = resolve_hooks("B", BootOnlyPlugin("B"))
    update_only = resolve_hooks("U", UpdateOnlyPlugin("U"))

    assert boot_only.boot is not None and boot_only.update is None
    assert update_only.boot is None and update_only.update is not None


def test_resolve_hooks_non_callable_members():
    entry = resolve_hooks("X", SimpleNamespace(boot=True, update=None))

    assert entry.boot is None
    assert entry.update is None


class DelegatingProxy:
    """Wrapper forwarding attribute access to the object it wraps."""

    def __init__(self, target):
        self._target = target

    def __getattr__(self, name):
        return getattr(self._target, name)


def test_resolve_hooks_through_delegating_proxy():
    plugin = FullPlugin("X")
    entry = resolve_hooks("X", DelegatingProxy(plugin))

    assert entry.boot is not None
    assert entry.update is not None
    entry.boot()
    entry.update()
    assert plugin.log == [("X", "boot"), ("X", "update")]


def test_resolve_create_through_delegating_proxy():
    assert resolve_create(DelegatingProxy(SimpleNamespace(create=len))) is len


def test_protocols_are_structural():
    assert isinstance(FullPlugin("A"), Bootable)
    assert isinstance(FullPlugin("A"), Updatable)
    assert not isinstance(BootOnlyPlugin("B"), Updatable)
