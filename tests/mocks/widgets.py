"""Deterministic widget fakes for unit and integration tests."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping


@dataclass(slots=True)
class FakeWidgetHandle:
    """Records ``open`` calls and lets tests fire the widget callback."""

    options: Mapping[str, Any]
    callback: Callable[[Any, Any], None]
    opened: int = 0

    def open(self) -> None:
        self.opened += 1

    def emit(self, error: Any = None, result: Any = None) -> None:
        self.callback(error, result)

    def emit_success(
        self,
        *,
        url: str = "https://res.example.test/uploads/a.png",
        public_id: str = "uploads/a",
        delete_token: str | None = "tok1",
    ) -> None:
        info: dict[str, Any] = {"secure_url": url, "public_id": public_id}
        if delete_token is not None:
            info["delete_token"] = delete_token
        self.callback(None, {"event": "success", "info": info})


@dataclass(slots=True)
class FakeWidgetFactory:
    handles: list[FakeWidgetHandle] = field(default_factory=list)
    fail_next: int = 0

    def create_upload_widget(
        self, options: Mapping[str, Any], callback: Callable[[Any, Any], None]
    ) -> FakeWidgetHandle:
        if self.fail_next > 0:
            self.fail_next -= 1
            raise RuntimeError("widget factory not initialised")
        handle = FakeWidgetHandle(options=dict(options), callback=callback)
        self.handles.append(handle)
        return handle

    @property
    def created(self) -> int:
        return len(self.handles)

    @property
    def last(self) -> FakeWidgetHandle:
        return self.handles[-1]


@dataclass(slots=True)
class FakeCapabilityProvider:
    """Becomes available after ``available_after`` failed probes."""

    factory: FakeWidgetFactory = field(default_factory=FakeWidgetFactory)
    available_after: int | None = 0
    probes: int = 0

    def try_acquire(self) -> FakeWidgetFactory | None:
        self.probes += 1
        if self.available_after is None or self.probes <= self.available_after:
            return None
        return self.factory

    def make_available(self) -> None:
        self.available_after = 0


@dataclass(slots=True)
class RecordingSleep:
    """Sleep replacement storing requested delays without waiting."""

    delays: list[float] = field(default_factory=list)

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        await asyncio.sleep(0)


@dataclass(slots=True)
class GatedSleep:
    """Sleep replacement that blocks until the test releases it."""

    delays: list[float] = field(default_factory=list)
    entered: asyncio.Event = field(default_factory=asyncio.Event)
    gate: asyncio.Event = field(default_factory=asyncio.Event)

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        self.entered.set()
        await self.gate.wait()


__all__ = [
    "FakeCapabilityProvider",
    "FakeWidgetFactory",
    "FakeWidgetHandle",
    "GatedSleep",
    "RecordingSleep",
]
