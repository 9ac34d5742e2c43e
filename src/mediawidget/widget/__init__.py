"""Upload widget acquisition and callback adaptation."""

from .bootstrapper import WIDGET_LOAD_FAILED_MESSAGE, WidgetBootstrapper
from .capability import (
    CapabilityProvider,
    CapabilityRegistry,
    UploadWidgetFactory,
    WidgetHandle,
)
from .options import WidgetOptions
from .result_mapper import map_upload_result

__all__ = [
    "CapabilityProvider",
    "CapabilityRegistry",
    "UploadWidgetFactory",
    "WidgetBootstrapper",
    "WidgetHandle",
    "WidgetOptions",
    "WIDGET_LOAD_FAILED_MESSAGE",
    "map_upload_result",
]
