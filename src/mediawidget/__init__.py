"""Upload widget integration: retrying bootstrap and token-scoped deletion."""

from .config import UploadSettings
from .controller import UploadController
from .deletion import DeletionCoordinator
from .domain import (
    DeletionOutcome,
    DeletionResult,
    UploadOutcome,
    UploadOutcomeKind,
    UploadPhase,
    UploadValue,
    WidgetState,
    WidgetStatus,
)
from .exceptions import (
    ConfigurationError,
    DeletionError,
    DeletionErrorKind,
    InitializationTimeoutError,
    MediaWidgetError,
    UploadCallbackError,
)
from .scheduling import BackoffPolicy, BackoffScheduler, CancellationToken
from .widget import (
    CapabilityProvider,
    CapabilityRegistry,
    WidgetBootstrapper,
    WidgetOptions,
    map_upload_result,
)

__all__ = [
    "BackoffPolicy",
    "BackoffScheduler",
    "CancellationToken",
    "CapabilityProvider",
    "CapabilityRegistry",
    "ConfigurationError",
    "DeletionCoordinator",
    "DeletionError",
    "DeletionErrorKind",
    "DeletionOutcome",
    "DeletionResult",
    "InitializationTimeoutError",
    "MediaWidgetError",
    "UploadCallbackError",
    "UploadController",
    "UploadOutcome",
    "UploadOutcomeKind",
    "UploadPhase",
    "UploadSettings",
    "UploadValue",
    "WidgetBootstrapper",
    "WidgetOptions",
    "WidgetState",
    "WidgetStatus",
    "map_upload_result",
]
