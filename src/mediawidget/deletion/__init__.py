"""Remote asset deletion."""

from .coordinator import DeletionCoordinator

__all__ = ["DeletionCoordinator"]
