import logging
from typing import Any, Dict, List, Optional, Tuple

from .utils import in_interval


class Storage:
    """
    In-memory key-value storage for a Chord node.
    Each node stores the keys of the arc (predecessor, node] it owns.
    """

    def __init__(self, node_id: int):
        """
        Initialize storage for a node.

        Args:
            node_id: The ID of the node this storage belongs to
        """
        self.node_id = node_id
        self.data: Dict[int, Any] = {}
        self.logger = logging.getLogger(f"Storage-{node_id}")

    def put(self, key: int, value: Any) -> None:
        """
        Store a key-value pair, overwriting any previous value.

        Args:
            key: The key identifier to store
            value: The value to store
        """
        self.data[key] = value
        self.logger.info(f"Stored key {key} with value {value!r} (total keys: {len(self.data)})")

    def get(self, key: int) -> Optional[Any]:
        """
        Retrieve a value by key.

        Args:
            key: The key identifier to retrieve

        Returns:
            The value if found, None otherwise
        """
        if key not in self.data:
            self.logger.debug(f"Key {key} not found")
            return None
        return self.data[key]

    def delete(self, key: int) -> bool:
        """
        Delete a key-value pair.

        Args:
            key: The key identifier to delete

        Returns:
            True if key existed and was deleted, False otherwise
        """
        if key in self.data:
            del self.data[key]
            self.logger.info(f"Deleted key {key} (total keys: {len(self.data)})")
            return True
        self.logger.debug(f"Key {key} not found for deletion")
        return False

    def take_range(self, start: int, end: int) -> Dict[int, Any]:
        """Remove and return the keys in (start, end] on the identifier circle."""
        taken: Dict[int, Any] = {}
        for key in sorted(self.data):
            if in_interval(key, start, end, inclusive=True):
                taken[key] = self.data.pop(key)
        return taken

    def pop_all(self) -> Dict[int, Any]:
        taken = dict(sorted(self.data.items()))
        self.data.clear()
        return taken

    def update(self, items: Dict[int, Any]) -> None:
        for key, value in items.items():
            self.data[key] = value

    def items(self) -> List[Tuple[int, Any]]:
        """Return (key, value) pairs in ascending key order."""
        return sorted(self.data.items())

    def __contains__(self, key: int) -> bool:
        return key in self.data

    def __len__(self):
        """Return the number of key-value pairs stored."""
        return len(self.data)
