from __future__ import annotations

import logging

import pytest
import structlog

from src.mediawidget.config import UploadSettings
from src.mediawidget.logging import configure_logging

pytestmark = pytest.mark.unit


def test_configure_logging_defaults_to_json_at_info(monkeypatch) -> None:
    monkeypatch.delenv("CLOUDINARY_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CLOUDINARY_LOG_RENDERER", raising=False)

    level = configure_logging()

    processors = structlog.get_config()["processors"]
    assert level == logging.INFO
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    assert structlog.stdlib.filter_by_level in processors


def test_configure_logging_reads_level_and_renderer_from_settings() -> None:
    settings = UploadSettings(log_level="debug", log_renderer="console")

    level = configure_logging(settings)

    assert level == logging.DEBUG
    assert logging.getLogger("src.mediawidget").level == logging.DEBUG
    assert isinstance(
        structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer
    )


def test_unknown_level_name_falls_back_to_info() -> None:
    assert configure_logging(UploadSettings(log_level="chatty")) == logging.INFO


def test_invalid_renderer_is_rejected() -> None:
    with pytest.raises(ValueError):
        UploadSettings(log_renderer="xml")
