"""Remote Store Base Class.

This module defines the interface every remote store backend must implement,
along with the errors used to report transport failures. Keeping reads and
writes behind this interface lets the catalog run against the live Realtime
Database or an in-memory fake without code changes.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class StoreError(Exception):
    """Raised when the remote store cannot complete a read or write.

    "No data at this path" is never a StoreError; reads return None for that.
    """

    pass


class StoreConnectionError(StoreError):
    """Raised on network failures, timeouts and server-side errors."""

    pass


class StoreAuthError(StoreError):
    """Raised when the remote store rejects the configured credentials."""

    pass


def split_path(path: str) -> list[str]:
    """Split a slash-separated store path into its non-empty segments.

    Args:
        path: Logical path such as "properties/New Jersey/landmark"

    Returns:
        List of path segments, e.g. ["properties", "New Jersey", "landmark"]
    """
    return [segment for segment in path.split("/") if segment]


def join_path(*segments: str) -> str:
    """Build a store path from individual keys."""
    return "/".join(segment.strip("/") for segment in segments if segment)


class RemoteStore(ABC):
    """Abstract base class for key-path addressable document stores.

    All store backends must implement this interface. This ensures:
    - One-shot reads that return None for absent paths
    - Whole-value writes (no merge) at a path
    - Transport failures reported as StoreError subclasses

    Usage:
        class MyStore(RemoteStore):
            def __init__(self):
                super().__init__(store_name="my_store")

            def get(self, path):
                ...

            def set(self, path, value):
                ...
    """

    def __init__(self, store_name: str):
        """Initialize the store.

        Args:
            store_name: Identifier for this backend (e.g., "firebase", "memory")
        """
        self.store_name = store_name

    @abstractmethod
    def get(self, path: str) -> Optional[Any]:
        """Read the value stored at a path.

        Args:
            path: Slash-separated logical path (e.g., "properties/Delaware")

        Returns:
            The decoded value (dict, list, str, number, bool), or None when
            nothing is stored at the path.

        Raises:
            StoreConnectionError: If the store cannot be reached
            StoreAuthError: If the credentials are rejected
        """
        pass

    @abstractmethod
    def set(self, path: str, value: Any) -> None:
        """Replace the value stored at a path.

        The previous value at the path is overwritten entirely. Writing None
        removes the path.

        Args:
            path: Slash-separated logical path
            value: JSON-serializable value to store

        Raises:
            StoreConnectionError: If the store cannot be reached
            StoreAuthError: If the credentials are rejected
        """
        pass

    def __repr__(self) -> str:
        """String representation of the store."""
        return f"{self.__class__.__name__}(store='{self.store_name}')"
