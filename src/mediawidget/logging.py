"""Logging configuration for mediawidget.

Widget and deletion modules log through stdlib loggers with dotted event
names (``widget.bootstrap.ready``, ``upload.delete.failed`` ...). This module
routes them through structlog; level and renderer come from
:class:`UploadSettings` (``CLOUDINARY_LOG_LEVEL``, ``CLOUDINARY_LOG_RENDERER``).
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from .config import UploadSettings


def _resolve_level(name: str) -> int:
    level = getattr(logging, name.upper(), None)
    if isinstance(level, int):
        return level
    return logging.INFO


def _renderer(kind: str) -> Any:
    if kind == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def configure_logging(settings: UploadSettings | None = None) -> int:
    """Configure stdlib logging and structlog; return the applied level."""
    settings = settings or UploadSettings()
    level = _resolve_level(settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger("mediawidget").setLevel(level)
    logging.getLogger("src.mediawidget").setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(settings.log_renderer),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return level


__all__ = ["configure_logging"]
