"""Error taxonomy for the upload widget integration."""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = [
    "MediaWidgetError",
    "ConfigurationError",
    "InitializationTimeoutError",
    "UploadCallbackError",
    "DeletionErrorKind",
    "DeletionError",
]


class MediaWidgetError(Exception):
    """Base class for upload widget errors."""


class ConfigurationError(MediaWidgetError):
    """Raised when cloud name or upload preset are not configured."""


class InitializationTimeoutError(MediaWidgetError):
    """Raised when the widget factory never became available.

    Terminal: no further automatic retry happens after this error.
    """

    def __init__(self, attempts: int, message: str | None = None) -> None:
        self.attempts = attempts
        super().__init__(
            message or f"upload widget factory unavailable after {attempts} attempts"
        )


class UploadCallbackError(MediaWidgetError):
    """The external widget reported a failure for an upload attempt."""

    def __init__(self, message: str, *, detail: Any = None) -> None:
        self.detail = detail
        super().__init__(message)


class DeletionErrorKind(str, Enum):
    TRANSPORT = "transport"
    STATUS = "status"


class DeletionError(MediaWidgetError):
    """Remote deletion failed; local state is expected to stay intact."""

    def __init__(
        self,
        kind: DeletionErrorKind,
        *,
        status: int | None = None,
        message: str | None = None,
    ) -> None:
        self.kind = kind
        self.status = status
        if message is None:
            if kind is DeletionErrorKind.STATUS:
                message = f"delete_by_token failed with status {status}"
            else:
                message = "delete_by_token request failed before a response"
        super().__init__(message)
