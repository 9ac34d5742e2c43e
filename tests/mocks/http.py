"""Dummy ``httpx.AsyncClient`` used to intercept delete_by_token calls."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import httpx


class DummyHTTPResponse:
    def __init__(self, status_code: int, json_data: dict[str, Any] | None = None) -> None:
        self.status_code = status_code
        self._json_data = json_data

    def json(self) -> dict[str, Any]:
        if self._json_data is None:
            raise ValueError("No JSON data")
        return self._json_data


@dataclass(slots=True)
class RecordedRequest:
    url: str
    data: dict[str, Any]
    timeout: Any = None


@dataclass
class DummyTransport:
    """Shared state behind every ``DummyAsyncClient`` created in a test."""

    responses: list[DummyHTTPResponse | Exception] = field(default_factory=list)
    requests: list[RecordedRequest] = field(default_factory=list)
    gate: asyncio.Event | None = None

    def client(self, *args: Any, **kwargs: Any) -> "DummyAsyncClient":
        return DummyAsyncClient(self, timeout=kwargs.get("timeout"))


class DummyAsyncClient:
    def __init__(self, transport: DummyTransport, *, timeout: Any = None) -> None:
        self._transport = transport
        self._timeout = timeout

    async def __aenter__(self) -> "DummyAsyncClient":  # pragma: no cover - helper
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:  # pragma: no cover - helper
        return None

    async def post(self, url: str, data: dict[str, Any]) -> DummyHTTPResponse:
        self._transport.requests.append(RecordedRequest(url=url, data=dict(data), timeout=self._timeout))
        if self._transport.gate is not None:
            await self._transport.gate.wait()
        if not self._transport.responses:
            raise RuntimeError("No post responses queued")
        response = self._transport.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def connect_error(message: str = "connection refused") -> httpx.ConnectError:
    return httpx.ConnectError(message, request=httpx.Request("POST", "https://api.example.test"))


def configure_httpx(monkeypatch, transport: DummyTransport) -> DummyTransport:
    monkeypatch.setattr("httpx.AsyncClient", transport.client)
    return transport


__all__ = [
    "DummyAsyncClient",
    "DummyHTTPResponse",
    "DummyTransport",
    "RecordedRequest",
    "configure_httpx",
    "connect_error",
]
