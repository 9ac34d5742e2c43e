"""Operator entry point deleting a remote upload by its deletion token."""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import dataclass

from src.mediawidget.config import UploadSettings
from src.mediawidget.deletion.coordinator import DeletionCoordinator
from src.mediawidget.domain.models import DeletionOutcome, UploadValue
from src.mediawidget.exceptions import ConfigurationError
from src.mediawidget.logging import configure_logging


@dataclass(slots=True)
class DeletionSummary:
    outcome: DeletionOutcome
    public_id: str | None
    message: str | None = None


def perform_delete(token: str, *, public_id: str | None = None) -> DeletionSummary:
    """Issue a single delete_by_token request and summarise the result."""
    settings = UploadSettings()
    if not settings.cloud_name:
        raise ConfigurationError("Cloudinary is not configured.")
    coordinator = DeletionCoordinator(
        cloud_name=settings.cloud_name,
        api_host=settings.api_host,
        timeout_seconds=settings.delete_timeout_seconds,
    )
    value = UploadValue(url=f"cli://{public_id}", public_id=public_id) if public_id else None
    result = asyncio.run(coordinator.remove(value, token))
    message = str(result.error) if result.error is not None else None
    return DeletionSummary(outcome=result.outcome, public_id=public_id, message=message)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Delete an uploaded asset by token.")
    parser.add_argument("token", help="Deletion token returned with the upload.")
    parser.add_argument("--public-id", default=None, help="Public id, used for logging only.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv or [])
    configure_logging()
    try:
        summary = perform_delete(args.token, public_id=args.public_id)
    except ConfigurationError as exc:
        print(f"delete failed: {exc}", file=sys.stderr)
        return 2

    if summary.outcome is DeletionOutcome.DELETED:
        print(f"delete done, public_id={summary.public_id}", file=sys.stdout)
        return 0
    print(f"delete failed: {summary.message or summary.outcome.value}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
