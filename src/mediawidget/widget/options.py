"""Construction parameters handed to the widget factory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..config import UploadSettings

BANNER_FORMATS = ("png", "jpg", "jpeg", "webp")
BANNER_SOURCES = ("local", "url", "camera")


@dataclass(frozen=True, slots=True)
class WidgetOptions:
    cloud_name: str
    upload_preset: str
    multiple: bool = False
    folder: str | None = "uploads"
    max_file_size: int | None = 5_000_000
    client_allowed_formats: tuple[str, ...] = ("png", "jpg", "jpeg")
    max_files: int | None = None
    sources: tuple[str, ...] | None = None
    resource_type: str | None = None

    @classmethod
    def for_form_field(cls, settings: UploadSettings) -> "WidgetOptions":
        """Single-image form field widget."""

        return cls(
            cloud_name=settings.cloud_name,
            upload_preset=settings.upload_preset,
            folder=settings.folder or None,
            max_file_size=settings.max_file_size,
            client_allowed_formats=tuple(settings.allowed_formats),
        )

    @classmethod
    def for_banner(cls, settings: UploadSettings) -> "WidgetOptions":
        """Page-level banner widget: adds webp, camera and URL sources."""

        formats = tuple(dict.fromkeys([*settings.allowed_formats, *BANNER_FORMATS]))
        return cls(
            cloud_name=settings.cloud_name,
            upload_preset=settings.upload_preset,
            folder=settings.folder or None,
            max_file_size=settings.max_file_size,
            client_allowed_formats=formats,
            max_files=1,
            sources=BANNER_SOURCES,
            resource_type="image",
        )

    def to_payload(self) -> dict[str, Any]:
        """Render options with the widget's camelCase keys, omitting unset ones."""

        payload: dict[str, Any] = {
            "cloudName": self.cloud_name,
            "uploadPreset": self.upload_preset,
            "multiple": self.multiple,
            "clientAllowedFormats": list(self.client_allowed_formats),
        }
        if self.folder is not None:
            payload["folder"] = self.folder
        if self.max_file_size is not None:
            payload["maxFileSize"] = self.max_file_size
        if self.max_files is not None:
            payload["maxFiles"] = self.max_files
        if self.sources is not None:
            payload["sources"] = list(self.sources)
        if self.resource_type is not None:
            payload["resourceType"] = self.resource_type
        return payload


__all__ = ["WidgetOptions", "BANNER_FORMATS", "BANNER_SOURCES"]
