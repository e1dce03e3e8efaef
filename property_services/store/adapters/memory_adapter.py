"""In-Memory Store for Testing and Local Development.

This store keeps the whole database as one nested dictionary and follows the
same rules as the Realtime Database: empty objects do not exist, reads of a
missing path return None, and writes replace the whole value at a path.
"""

import copy
from collections.abc import Mapping
from typing import Any, Optional

from ..base import RemoteStore, StoreConnectionError, split_path


def _prune(value: Any) -> Any:
    """Drop empty mappings, empty lists and None values, the way the remote store does."""
    if isinstance(value, Mapping):
        pruned = {}
        for key, child in value.items():
            child = _prune(child)
            if child is not None:
                pruned[str(key)] = child
        return pruned or None
    if isinstance(value, (list, tuple)):
        items = [_prune(item) for item in value]
        return items if any(item is not None for item in items) else None
    return value


class InMemoryStore(RemoteStore):
    """Store that holds all data in process memory.

    This store is useful for:
    - Unit testing the catalog without a network
    - Local development against seeded sample data
    - Testing error handling (see ``fail_on_call``)

    Example:
        store = InMemoryStore({"properties": {"Delaware": {"x": {"unit": "10"}}}})
        store.get("properties/Delaware/x")   # {"unit": "10"}
        store.get("properties/Ohio")         # None
    """

    def __init__(self, initial_data: Optional[Mapping[str, Any]] = None, fail_on_call: int = 0):
        """Initialize the in-memory store.

        Args:
            initial_data: Optional nested data to start from (deep-copied)
            fail_on_call: If > 0, raise StoreConnectionError on this call number
        """
        super().__init__(store_name="memory")
        self._root: dict[str, Any] = _prune(copy.deepcopy(dict(initial_data or {}))) or {}
        self.fail_on_call = fail_on_call
        self.call_count = 0
        self.reads: list[str] = []
        self.writes: list[str] = []

    def _check_failure(self, path: str) -> None:
        self.call_count += 1
        if self.fail_on_call > 0 and self.call_count == self.fail_on_call:
            raise StoreConnectionError(f"Simulated store failure for '{path}'")

    def get(self, path: str) -> Optional[Any]:
        """Return a deep copy of the value at a path, or None."""
        self._check_failure(path)
        self.reads.append(path)

        node: Any = self._root
        for segment in split_path(path):
            if not isinstance(node, Mapping) or segment not in node:
                return None
            node = node[segment]

        if isinstance(node, Mapping) and not node:
            return None
        return copy.deepcopy(node)

    def set(self, path: str, value: Any) -> None:
        """Replace the value at a path with a deep copy of ``value``."""
        self._check_failure(path)
        self.writes.append(path)

        segments = split_path(path)
        value = _prune(copy.deepcopy(value))

        if not segments:
            self._root = value if isinstance(value, dict) else {}
            return

        parents = [self._root]
        node = self._root
        for segment in segments[:-1]:
            child = node.get(segment)
            if not isinstance(child, dict):
                if value is None:
                    return
                child = {}
                node[segment] = child
            node = child
            parents.append(node)

        if value is None:
            node.pop(segments[-1], None)
        else:
            node[segments[-1]] = value

        # Remove parents left empty by a delete.
        for depth in range(len(parents) - 1, 0, -1):
            if parents[depth]:
                break
            parents[depth - 1].pop(segments[depth - 1], None)

    def dump(self) -> dict[str, Any]:
        """Return a deep copy of the whole database."""
        return copy.deepcopy(self._root)
