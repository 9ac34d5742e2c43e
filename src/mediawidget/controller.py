"""Composition root driving the upload widget for one form field.

The controller owns a :class:`WidgetBootstrapper`, a
:class:`DeletionCoordinator` and the local ``value``/``delete_token`` pair.
Widget callbacks are queued and applied by a consumer task, so every state
mutation happens inside the controller's own coroutines and only after the
disposal token has been checked.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Callable

from .config import UploadSettings
from .deletion.coordinator import DeletionCoordinator
from .domain.models import (
    DeletionResult,
    DeletionToken,
    UploadOutcome,
    UploadOutcomeKind,
    UploadPhase,
    UploadValue,
    WidgetState,
    WidgetStatus,
)
from .exceptions import ConfigurationError
from .scheduling.backoff import BackoffScheduler, CancellationToken
from .widget.bootstrapper import WidgetBootstrapper
from .widget.capability import CapabilityProvider
from .widget.options import WidgetOptions

logger = logging.getLogger(__name__)

REMOVE_FAILED_MESSAGE = "Failed to remove image. Please try again."

ChangeCallback = Callable[[UploadValue | None], None]
ErrorCallback = Callable[[Exception], None]


class UploadController:
    """Expose ``open``/``remove`` and the current value to a consuming form."""

    def __init__(
        self,
        *,
        provider: CapabilityProvider,
        settings: UploadSettings,
        value: UploadValue | None = None,
        on_change: ChangeCallback | None = None,
        on_error: ErrorCallback | None = None,
        disabled: bool = False,
        options: WidgetOptions | None = None,
        scheduler: BackoffScheduler | None = None,
        coordinator: DeletionCoordinator | None = None,
    ) -> None:
        self._settings = settings
        self._token = CancellationToken()
        self._value = value
        self._delete_token: DeletionToken | None = None
        self._removing = False
        self._disabled = disabled
        self._error: str | None = None
        self.on_change = on_change
        self.on_error = on_error

        self._outcomes: asyncio.Queue[UploadOutcome] = asyncio.Queue()
        self._consumer: asyncio.Task[None] | None = None
        self._bootstrap_task: asyncio.Task[WidgetStatus] | None = None
        self._mounted = False

        self._bootstrapper = WidgetBootstrapper(
            provider,
            options or WidgetOptions.for_form_field(settings),
            scheduler=scheduler or BackoffScheduler(settings.backoff_policy()),
            token=self._token,
            on_outcome=self._enqueue_outcome,
        )
        self._bootstrapper.subscribe(self._on_widget_status)
        self._coordinator = coordinator or DeletionCoordinator(
            cloud_name=settings.cloud_name,
            api_host=settings.api_host,
            timeout_seconds=settings.delete_timeout_seconds,
        )

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def value(self) -> UploadValue | None:
        return self._value

    @property
    def delete_token(self) -> DeletionToken | None:
        return self._delete_token

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def busy(self) -> bool:
        return self._removing

    @property
    def disabled(self) -> bool:
        return self._disabled

    @property
    def disposed(self) -> bool:
        return self._token.cancelled

    @property
    def phase(self) -> UploadPhase:
        if self._removing:
            return UploadPhase.REMOVING
        if self._value is None:
            return UploadPhase.NO_VALUE
        return UploadPhase.HAS_VALUE

    @property
    def widget_status(self) -> WidgetStatus:
        return self._bootstrapper.status

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    async def mount(self) -> None:
        """Start widget bootstrap and the outcome consumer."""

        if self._mounted or self._token.cancelled:
            return
        self._mounted = True
        try:
            self._settings.ensure_configured()
        except ConfigurationError as exc:
            self._report(exc, str(exc))
            return
        loop = asyncio.get_running_loop()
        self._consumer = loop.create_task(self._consume_outcomes())
        self._bootstrap_task = self._bootstrapper.start()

    async def dispose(self) -> None:
        """Stop retries and callbacks; the widget itself has no teardown."""

        if self._token.cancelled:
            return
        self._token.cancel()
        await self._bootstrapper.dispose()
        consumer, self._consumer = self._consumer, None
        if consumer is not None:
            consumer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await consumer
        logger.debug("upload.controller.disposed")

    async def __aenter__(self) -> "UploadController":
        await self.mount()
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.dispose()

    async def wait_until_settled(self) -> WidgetStatus:
        """Await the bootstrap attempt started by :meth:`mount`."""

        task = self._bootstrap_task
        if task is None or self.disposed:
            return self._bootstrapper.status
        return await task

    async def wait_for_outcomes(self) -> None:
        """Block until every queued widget callback has been applied."""

        await self._outcomes.join()

    # ------------------------------------------------------------------
    # Consumer inputs
    # ------------------------------------------------------------------
    def set_value(self, value: UploadValue | None) -> None:
        """Apply an external value change.

        Echoes of the controller's own ``on_change`` keep the deletion token;
        any other value drops it because the token only covers the local upload.
        """

        if self._token.cancelled or value == self._value:
            return
        self._value = value
        self._delete_token = None

    def set_disabled(self, disabled: bool) -> None:
        self._disabled = disabled

    def open(self) -> bool:
        """Open the widget; inert unless it is ready and not disabled."""

        return self._bootstrapper.open(disabled=self._disabled)

    async def remove(self) -> DeletionResult | None:
        """Delete the current asset and clear local state on success.

        Returns ``None`` when the call was inert (no value, disabled, disposed
        or a removal already running).
        """

        if self._token.cancelled or self._disabled or self._removing:
            return None
        value = self._value
        if value is None:
            return None

        self._removing = True
        try:
            result = await self._coordinator.remove(value, self._delete_token)
        finally:
            self._removing = False

        if self._token.cancelled:
            return result
        if result.succeeded:
            if self._value is value:
                self._value = None
                self._delete_token = None
                self._error = None
                self._emit_change(None)
        elif result.error is not None:
            self._report(result.error, REMOVE_FAILED_MESSAGE)
        return result

    # ------------------------------------------------------------------
    # Internal callbacks
    # ------------------------------------------------------------------
    def _enqueue_outcome(self, outcome: UploadOutcome) -> None:
        if self._token.cancelled:
            return
        self._outcomes.put_nowait(outcome)

    async def _consume_outcomes(self) -> None:
        while True:
            outcome = await self._outcomes.get()
            try:
                if not self._token.cancelled:
                    self._apply_outcome(outcome)
            except Exception:
                logger.exception("upload.outcome.apply_failed")
            finally:
                self._outcomes.task_done()

    def _apply_outcome(self, outcome: UploadOutcome) -> None:
        if outcome.kind is UploadOutcomeKind.SUCCESS and outcome.value is not None:
            self._value = outcome.value
            self._delete_token = outcome.delete_token
            self._error = None
            logger.info(
                "upload.stored",
                extra={
                    "public_id": outcome.value.public_id,
                    "has_delete_token": outcome.delete_token is not None,
                },
            )
            self._emit_change(outcome.value)
        elif outcome.kind is UploadOutcomeKind.FAILURE and outcome.error is not None:
            self._report(outcome.error, str(outcome.error))

    def _on_widget_status(self, status: WidgetStatus) -> None:
        if self._token.cancelled:
            return
        if status.state is WidgetState.READY:
            self._error = None
        elif status.state is WidgetState.FAILED and status.reason is not None:
            self._report(status.reason, str(status.reason))

    def _emit_change(self, value: UploadValue | None) -> None:
        if self.on_change is None:
            return
        try:
            self.on_change(value)
        except Exception:
            logger.exception("upload.on_change.failed")

    def _report(self, exc: Exception, message: str) -> None:
        self._error = message
        if self.on_error is None:
            return
        try:
            self.on_error(exc)
        except Exception:
            logger.exception("upload.on_error.failed")


__all__ = ["UploadController", "REMOVE_FAILED_MESSAGE"]
