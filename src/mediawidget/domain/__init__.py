"""Domain value objects for the upload widget integration."""

from .models import (
    DeletionOutcome,
    DeletionResult,
    DeletionToken,
    UploadOutcome,
    UploadOutcomeKind,
    UploadPhase,
    UploadValue,
    WidgetState,
    WidgetStatus,
)

__all__ = [
    "DeletionOutcome",
    "DeletionResult",
    "DeletionToken",
    "UploadOutcome",
    "UploadOutcomeKind",
    "UploadPhase",
    "UploadValue",
    "WidgetState",
    "WidgetStatus",
]
