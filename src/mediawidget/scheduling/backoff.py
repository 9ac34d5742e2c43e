"""Bounded linear backoff with cooperative cancellation."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from ..exceptions import InitializationTimeoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BackoffPolicy:
    """Linear retry schedule: retry ``k`` waits ``base + (k - 1) * increment``.

    The first retry waits ``base`` itself, not ``base + increment``, so the
    defaults give 300, 500, ... 1500 ms. Browser loaders that count the
    first retry as ``k = 1`` in ``base + k * increment`` wait one increment
    longer at every step (500 ... 1700 ms).
    """

    max_attempts: int = 8
    base_delay_ms: int = 300
    increment_ms: int = 200

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay_ms < 0 or self.increment_ms < 0:
            raise ValueError("delays must not be negative")

    def delay_for(self, retry: int) -> float:
        """Return the delay in seconds preceding retry number ``retry``."""

        if retry < 1 or retry >= self.max_attempts:
            raise ValueError(f"retry must be within 1..{self.max_attempts - 1}")
        return (self.base_delay_ms + (retry - 1) * self.increment_ms) / 1000

    def schedule(self) -> list[float]:
        return [self.delay_for(retry) for retry in range(1, self.max_attempts)]


class CancellationToken:
    """Disposal flag consulted before every scheduled attempt or callback."""

    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class BackoffScheduler:
    """Repeatedly invoke a probe until it succeeds or attempts run out."""

    def __init__(
        self,
        policy: BackoffPolicy | None = None,
        *,
        sleep: Callable[[float], Any] | None = None,
    ) -> None:
        self.policy = policy or BackoffPolicy()
        self._sleep = self._wrap_sleep(sleep)

    @staticmethod
    def _wrap_sleep(
        sleep: Callable[[float], Any] | None,
    ) -> Callable[[float], Awaitable[None]]:
        if sleep is None:
            return asyncio.sleep

        async def _async_sleep(seconds: float) -> None:
            result = sleep(seconds)
            if inspect.isawaitable(result):
                await result

        return _async_sleep

    async def run(self, probe: Callable[[], bool], *, token: CancellationToken) -> bool:
        """Probe on the policy schedule.

        Returns ``True`` once the probe succeeds and ``False`` when ``token`` is
        cancelled before an attempt. Raises :class:`InitializationTimeoutError`
        after ``max_attempts`` failed probes.
        """

        attempt = 0
        while True:
            if token.cancelled:
                logger.debug("backoff.cancelled", extra={"attempt": attempt})
                return False
            attempt += 1
            if probe():
                return True
            if attempt >= self.policy.max_attempts:
                logger.warning("backoff.exhausted", extra={"attempts": attempt})
                raise InitializationTimeoutError(attempts=attempt)
            delay = self.policy.delay_for(attempt)
            logger.debug(
                "backoff.retry.scheduled",
                extra={"attempt": attempt, "delay_seconds": delay},
            )
            await self._sleep(delay)


__all__ = ["BackoffPolicy", "BackoffScheduler", "CancellationToken"]
