"""Settings for the upload widget integration.

Values come from ``CLOUDINARY_*`` environment variables. Defaults mirror the
form-field widget: single file, ``uploads`` folder, 5 MB limit and PNG/JPEG
formats, with an eight-attempt linear backoff while the widget factory loads.
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .scheduling.backoff import BackoffPolicy


class UploadSettings(BaseSettings):
    """Pydantic settings container for widget and deletion parameters."""

    model_config = SettingsConfigDict(env_prefix="CLOUDINARY_", extra="ignore")

    cloud_name: str = Field(
        default="",
        description="Target cloud namespace used for uploads and deletions.",
    )
    upload_preset: str = Field(
        default="",
        description="Unsigned upload preset passed to the widget.",
    )
    api_host: str = Field(
        default="api.cloudinary.com",
        min_length=1,
        description="Host serving the delete_by_token endpoint.",
    )
    folder: str = Field(
        default="uploads",
        description="Remote folder receiving uploaded assets.",
    )
    max_file_size: int = Field(
        default=5_000_000,
        ge=1,
        description="Client-side upload size limit in bytes.",
    )
    allowed_formats: List[str] = Field(
        default_factory=lambda: ["png", "jpg", "jpeg"],
        description="File extensions accepted by the widget.",
    )
    retry_max_attempts: int = Field(
        default=8,
        ge=1,
        description="Probes made before the widget is reported as unavailable.",
    )
    retry_base_delay_ms: int = Field(
        default=300,
        ge=0,
        description="Delay before the first retry in milliseconds.",
    )
    retry_increment_ms: int = Field(
        default=200,
        ge=0,
        description="Linear increment added to each subsequent retry delay.",
    )
    delete_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout applied to delete_by_token requests.",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level name (DEBUG, INFO, WARNING ...).",
    )
    log_renderer: Literal["json", "console"] = Field(
        default="json",
        description="structlog renderer: JSON lines or human-readable console output.",
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.cloud_name and self.upload_preset)

    def ensure_configured(self) -> None:
        """Raise :class:`ConfigurationError` when credentials are missing."""

        if not self.is_configured:
            raise ConfigurationError("Cloudinary is not configured.")

    def backoff_policy(self) -> BackoffPolicy:
        return BackoffPolicy(
            max_attempts=self.retry_max_attempts,
            base_delay_ms=self.retry_base_delay_ms,
            increment_ms=self.retry_increment_ms,
        )


__all__ = ["UploadSettings"]
