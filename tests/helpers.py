"""Shared test doubles for plughost test suites.

Dataclass-based plugin doubles, not unittest.mock: each records the calls it
receives into a shared log so tests can assert on dispatch order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# ============================================================================
# Boot objects
# ============================================================================


@dataclass
class FullPlugin:
    """Boot object exposing both boot() and update()."""

    name: str
    log: list[tuple[str, str]] = field(default_factory=list)

    def boot(self) -> None:
        self.log.append((self.name, "boot"))

    def update(self) -> None:
        self.log.append((self.name, "update"))


@dataclass
class BootOnlyPlugin:
    """Boot object with boot() but no update()."""

    name: str
    log: list[tuple[str, str]] = field(default_factory=list)

    def boot(self) -> None:
        self.log.append((self.name, "boot"))


@dataclass
class UpdateOnlyPlugin:
    """Boot object with update() but no boot()."""

    name: str
    log: list[tuple[str, str]] = field(default_factory=list)

    def update(self) -> None:
        self.log.append((self.name, "update"))


@dataclass
class ExplodingPlugin:
    """Boot object whose boot() and update() always raise."""

    name: str
    log: list[tuple[str, str]] = field(default_factory=list)

    def boot(self) -> None:
        self.log.append((self.name, "boot"))
        raise RuntimeError(f"{self.name} boot exploded")

    def update(self) -> None:
        self.log.append((self.name, "update"))
        raise RuntimeError(f"{self.name} update exploded")


# ============================================================================
# Factories
# ============================================================================


@dataclass
class RecordingFactory:
    """create() callable remembering the hosts it was given."""

    product: Any = None
    hosts: list[Any] = field(default_factory=list)

    def __call__(self, host: Any) -> Any:
        self.hosts.append(host)
        return self.product


class NamespaceEntry:
    """Namespace entry exposing an optional create() like a plugin module."""

    def __init__(self, create=None):
        if create is not None:
            self.create = create


@dataclass
class FakeHost:
    """Stand-in for the owning application."""

    name: str = "host"
