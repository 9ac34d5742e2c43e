from __future__ import annotations

import pytest

from src.mediawidget.config import UploadSettings
from tests.mocks.http import DummyTransport, configure_httpx
from tests.mocks.widgets import FakeCapabilityProvider, RecordingSleep


@pytest.fixture
def settings() -> UploadSettings:
    return UploadSettings(cloud_name="demo-cloud", upload_preset="unsigned-preset")


@pytest.fixture
def provider() -> FakeCapabilityProvider:
    return FakeCapabilityProvider()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def http(monkeypatch) -> DummyTransport:
    return configure_httpx(monkeypatch, DummyTransport())
