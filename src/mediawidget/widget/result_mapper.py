"""Translate widget callback payloads into :class:`UploadOutcome` values.

The widget emits many events per session (``queues-start``, ``upload-added``,
``close`` …); only ``success`` carries an asset. Mapping never raises: any
payload shape that cannot produce a well-formed value becomes a failure or is
ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..domain.models import UploadOutcome, UploadValue
from ..exceptions import UploadCallbackError

logger = logging.getLogger(__name__)

SUCCESS_EVENT = "success"
UPLOAD_FAILED_MESSAGE = "Upload failed. Please try again."


def _field(source: Any, name: str) -> Any:
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def map_upload_result(error: Any, result: Any) -> UploadOutcome:
    """Map one ``(error, result)`` callback invocation."""

    event = _text(_field(result, "event"))

    if error is not None:
        logger.info("widget.callback.error", extra={"event": event, "error": str(error)})
        callback_error = UploadCallbackError(UPLOAD_FAILED_MESSAGE, detail=error)
        if isinstance(error, BaseException):
            callback_error.__cause__ = error
        return UploadOutcome.failure(callback_error, event=event)

    if event != SUCCESS_EVENT:
        return UploadOutcome.ignored(event)

    info = _field(result, "info")
    url = _text(_field(info, "secure_url"))
    public_id = _text(_field(info, "public_id"))
    if url is None or public_id is None:
        logger.warning(
            "widget.callback.incomplete",
            extra={"has_url": url is not None, "has_public_id": public_id is not None},
        )
        return UploadOutcome.failure(
            UploadCallbackError(UPLOAD_FAILED_MESSAGE, detail=info), event=event
        )

    delete_token = _text(_field(info, "delete_token"))
    return UploadOutcome.success(
        UploadValue(url=url, public_id=public_id),
        delete_token=delete_token,
        event=event,
    )


__all__ = ["map_upload_result", "SUCCESS_EVENT", "UPLOAD_FAILED_MESSAGE"]
