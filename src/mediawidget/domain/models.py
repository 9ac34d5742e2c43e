"""Value objects shared by the widget, deletion and controller layers.

``UploadValue`` is the canonical description of a stored asset. The enums and
tagged results below keep every asynchronous step observable as data instead
of exceptions crossing an event-loop boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from ..exceptions import DeletionError, UploadCallbackError

DeletionToken: TypeAlias = str


@dataclass(frozen=True, slots=True)
class UploadValue:
    """Successfully stored asset: public URL plus provider identifier."""

    url: str
    public_id: str

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("url must be a non-empty string")
        if not self.public_id:
            raise ValueError("public_id must be a non-empty string")


class WidgetState(str, Enum):
    """Bootstrap progress of the upload widget.

    ``PROBING`` may repeat while retries are pending; ``READY`` is final.
    """

    UNINITIALIZED = "uninitialized"
    PROBING = "probing"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class WidgetStatus:
    state: WidgetState = WidgetState.UNINITIALIZED
    reason: Exception | None = None

    @property
    def is_ready(self) -> bool:
        return self.state is WidgetState.READY


class UploadPhase(str, Enum):
    NO_VALUE = "no_value"
    HAS_VALUE = "has_value"
    REMOVING = "removing"


class UploadOutcomeKind(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    IGNORED = "ignored"


@dataclass(frozen=True, slots=True)
class UploadOutcome:
    """Normalised result of a single widget callback invocation."""

    kind: UploadOutcomeKind
    event: str | None = None
    value: UploadValue | None = None
    delete_token: DeletionToken | None = None
    error: UploadCallbackError | None = None

    @classmethod
    def success(
        cls, value: UploadValue, *, delete_token: DeletionToken | None, event: str
    ) -> "UploadOutcome":
        return cls(
            kind=UploadOutcomeKind.SUCCESS,
            event=event,
            value=value,
            delete_token=delete_token,
        )

    @classmethod
    def failure(
        cls, error: UploadCallbackError, *, event: str | None = None
    ) -> "UploadOutcome":
        return cls(kind=UploadOutcomeKind.FAILURE, event=event, error=error)

    @classmethod
    def ignored(cls, event: str | None = None) -> "UploadOutcome":
        return cls(kind=UploadOutcomeKind.IGNORED, event=event)


class DeletionOutcome(str, Enum):
    """How a removal request ended.

    ``LOCAL_ONLY`` is the degraded success used when no deletion token is
    held: the remote asset is left in place.
    """

    DELETED = "deleted"
    LOCAL_ONLY = "local_only"
    FAILED = "failed"
    BUSY = "busy"


@dataclass(frozen=True, slots=True)
class DeletionResult:
    outcome: DeletionOutcome
    error: DeletionError | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome in (DeletionOutcome.DELETED, DeletionOutcome.LOCAL_ONLY)


__all__ = [
    "DeletionToken",
    "UploadValue",
    "WidgetState",
    "WidgetStatus",
    "UploadPhase",
    "UploadOutcomeKind",
    "UploadOutcome",
    "DeletionOutcome",
    "DeletionResult",
]
