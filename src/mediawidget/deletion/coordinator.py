"""Token-scoped deletion of the most recently uploaded asset.

Deletion tokens are only returned for uploads made in the current session.
Without one the asset cannot be removed remotely; the removal then succeeds
locally only and the remote asset stays orphaned. Callers that need a
guaranteed remote cleanup must delete through an authenticated admin API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from ..domain.models import DeletionOutcome, DeletionResult, DeletionToken, UploadValue
from ..exceptions import DeletionError, DeletionErrorKind

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeletionCoordinator:
    """Issue ``delete_by_token`` requests, at most one at a time."""

    cloud_name: str
    api_host: str = "api.cloudinary.com"
    timeout_seconds: float = 10.0
    log: logging.Logger = field(default_factory=lambda: logger)
    _in_flight: bool = field(default=False, init=False, repr=False)

    @property
    def busy(self) -> bool:
        return self._in_flight

    @property
    def endpoint(self) -> str:
        return f"https://{self.api_host}/v1_1/{self.cloud_name}/delete_by_token"

    async def remove(
        self, value: UploadValue | None, token: DeletionToken | None
    ) -> DeletionResult:
        """Delete ``value`` remotely when ``token`` allows it.

        Never raises for remote failures; they are returned as ``FAILED``.
        A call made while another is pending returns ``BUSY`` without I/O.
        """

        if self._in_flight:
            self.log.debug("upload.delete.busy")
            return DeletionResult(DeletionOutcome.BUSY)

        public_id = value.public_id if value is not None else None
        if not token:
            self.log.warning(
                "upload.delete.local_only",
                extra={"public_id": public_id},
            )
            return DeletionResult(DeletionOutcome.LOCAL_ONLY)

        self._in_flight = True
        try:
            error = await self._delete_by_token(token)
        finally:
            self._in_flight = False

        if error is not None:
            self.log.error(
                "upload.delete.failed",
                extra={"public_id": public_id, "kind": error.kind.value, "status": error.status},
            )
            return DeletionResult(DeletionOutcome.FAILED, error=error)

        self.log.info("upload.delete.done", extra={"public_id": public_id})
        return DeletionResult(DeletionOutcome.DELETED)

    async def _delete_by_token(self, token: DeletionToken) -> DeletionError | None:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(self.endpoint, data={"token": token})
        except httpx.TransportError as exc:
            error = DeletionError(DeletionErrorKind.TRANSPORT, message=str(exc) or None)
            error.__cause__ = exc
            return error
        if not 200 <= response.status_code < 300:
            return DeletionError(DeletionErrorKind.STATUS, status=response.status_code)
        return None


__all__ = ["DeletionCoordinator"]
