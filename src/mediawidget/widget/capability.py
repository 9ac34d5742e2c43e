"""Contracts for the externally supplied upload widget.

The widget factory is published by a loader that finishes at an unknown
time. Consumers never read it from global state directly; they ask a
``CapabilityProvider`` which answers ``None`` until the factory exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol, TypeAlias, runtime_checkable

WidgetCallback: TypeAlias = Callable[[Any, Any], None]


@runtime_checkable
class WidgetHandle(Protocol):
    """Opaque widget instance; it exposes no teardown API."""

    def open(self) -> None:
        """Show the upload UI."""


@runtime_checkable
class UploadWidgetFactory(Protocol):
    def create_upload_widget(
        self, options: Mapping[str, Any], callback: WidgetCallback
    ) -> WidgetHandle:
        """Build a widget bound to ``options`` reporting through ``callback``."""


@runtime_checkable
class CapabilityProvider(Protocol):
    def try_acquire(self) -> UploadWidgetFactory | None:
        """Return the factory when available, ``None`` otherwise."""


@dataclass(slots=True)
class CapabilityRegistry:
    """In-process slot where the host application publishes the factory."""

    factory: UploadWidgetFactory | None = None

    def register(self, factory: UploadWidgetFactory) -> None:
        self.factory = factory

    def unregister(self) -> None:
        self.factory = None

    def try_acquire(self) -> UploadWidgetFactory | None:
        return self.factory


__all__ = [
    "CapabilityProvider",
    "CapabilityRegistry",
    "UploadWidgetFactory",
    "WidgetCallback",
    "WidgetHandle",
]
