"""Acquire the widget factory and build exactly one widget handle."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Any, Callable

from ..domain.models import UploadOutcome, WidgetState, WidgetStatus
from ..exceptions import InitializationTimeoutError
from ..scheduling.backoff import BackoffScheduler, CancellationToken
from .capability import CapabilityProvider, WidgetHandle
from .options import WidgetOptions
from .result_mapper import map_upload_result

logger = logging.getLogger(__name__)

WIDGET_LOAD_FAILED_MESSAGE = "Upload widget failed to load. Please refresh and try again."

StatusListener = Callable[[WidgetStatus], None]
OutcomeSink = Callable[[UploadOutcome], None]


class WidgetBootstrapper:
    """Owns the single :class:`WidgetHandle` of one controller.

    Retry policy is delegated to :class:`BackoffScheduler`. Failures are
    published to status listeners; :meth:`bootstrap` itself never raises.
    """

    def __init__(
        self,
        provider: CapabilityProvider,
        options: WidgetOptions,
        *,
        scheduler: BackoffScheduler | None = None,
        token: CancellationToken | None = None,
        on_outcome: OutcomeSink | None = None,
    ) -> None:
        self._provider = provider
        self._options = options
        self._scheduler = scheduler or BackoffScheduler()
        self._token = token or CancellationToken()
        self._on_outcome = on_outcome
        self._handle: WidgetHandle | None = None
        self._status = WidgetStatus()
        self._listeners: list[StatusListener] = []
        self._task: asyncio.Task[WidgetStatus] | None = None

    @property
    def status(self) -> WidgetStatus:
        return self._status

    @property
    def handle(self) -> WidgetHandle | None:
        return self._handle

    @property
    def token(self) -> CancellationToken:
        return self._token

    def subscribe(self, listener: StatusListener) -> None:
        self._listeners.append(listener)

    def _transition(self, state: WidgetState, reason: Exception | None = None) -> None:
        if self._status.state in (WidgetState.READY, WidgetState.FAILED):
            return
        self._status = WidgetStatus(state=state, reason=reason)
        logger.debug("widget.state.changed", extra={"state": state.value})
        for listener in list(self._listeners):
            try:
                listener(self._status)
            except Exception:
                logger.exception("widget.status.listener_failed")

    def try_construct(self) -> bool:
        """Build the handle if the factory is available.

        Re-entry after construction is a no-op that reports success.
        """

        if self._handle is not None:
            return True
        if self._token.cancelled or self._status.state is WidgetState.FAILED:
            return False
        try:
            factory = self._provider.try_acquire()
        except Exception:
            logger.warning("widget.acquire.failed", exc_info=True)
            return False
        if factory is None:
            return False
        try:
            handle = factory.create_upload_widget(
                self._options.to_payload(), self._handle_callback
            )
        except Exception:
            logger.warning("widget.construct.failed", exc_info=True)
            return False
        self._handle = handle
        logger.info(
            "widget.bootstrap.ready",
            extra={"cloud_name": self._options.cloud_name, "folder": self._options.folder},
        )
        self._transition(WidgetState.READY)
        return True

    async def bootstrap(self) -> WidgetStatus:
        if self._status.is_ready or self._status.state is WidgetState.FAILED:
            return self._status
        self._transition(WidgetState.PROBING)
        try:
            await self._scheduler.run(self.try_construct, token=self._token)
        except InitializationTimeoutError as exc:
            if not self._token.cancelled:
                logger.error(
                    "widget.bootstrap.failed", extra={"attempts": exc.attempts}
                )
                self._transition(
                    WidgetState.FAILED,
                    InitializationTimeoutError(exc.attempts, WIDGET_LOAD_FAILED_MESSAGE),
                )
        return self._status

    def start(self) -> asyncio.Task[WidgetStatus]:
        """Run :meth:`bootstrap` in the background on the running loop."""

        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self.bootstrap())
        return self._task

    def open(self, *, disabled: bool = False) -> bool:
        """Show the widget; silently inert unless ready and enabled."""

        if disabled or self._token.cancelled or not self._status.is_ready:
            return False
        if self._handle is None:
            return False
        self._handle.open()
        return True

    def _handle_callback(self, error: Any, result: Any) -> None:
        if self._token.cancelled:
            logger.debug("widget.callback.after_dispose")
            return
        outcome = map_upload_result(error, result)
        if self._on_outcome is not None:
            self._on_outcome(outcome)

    async def dispose(self) -> None:
        """Cancel pending retries and drop the handle reference."""

        self._token.cancel()
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._handle = None
        self._listeners.clear()


__all__ = ["WidgetBootstrapper", "WIDGET_LOAD_FAILED_MESSAGE"]
