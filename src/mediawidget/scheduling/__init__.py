"""Retry scheduling primitives."""

from .backoff import BackoffPolicy, BackoffScheduler, CancellationToken

__all__ = ["BackoffPolicy", "BackoffScheduler", "CancellationToken"]
