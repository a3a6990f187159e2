import logging
from typing import Any, List, Optional, Tuple

from . import membership, routing
from .exceptions import NodeNotJoinedError
from .finger_table import FingerTable
from .membership import MigrationReport
from .registry import Registry
from .routing import LookupResult
from .storage import Storage
from .utils import DEFAULT_VALUE, in_interval, validate_identifier


class Node:
    """
    Chord Node
    """

    def __init__(self, node_id: int, registry: Registry):
        """
        Initialize the Chord node. It is not part of the ring until join().
        """
        self.id = validate_identifier(node_id, "node id")
        self.registry = registry
        # Initialize a logger for the node
        self.logger = logging.getLogger(f"ChordNode-{self.id}")
        # initialize the finger table
        self.finger_table = FingerTable(self.id)
        self.storage = Storage(self.id)

    def __repr__(self):
        return f"Node({self.id})"

    @property
    def joined(self) -> bool:
        return self in self.registry

    def _resolve(self, node_id: int) -> "Node":
        node = self.registry.get(node_id)
        if node is None:
            raise NodeNotJoinedError(node_id)
        return node

    def update_finger_table(self):
        self.finger_table.update(self.registry)
        self.logger.debug(f"Finger table refreshed: {self.finger_table.entries()}")

    def successor(self) -> "Node":
        """Immediate successor, taken from finger table entry 0."""
        entry = self.finger_table[0]
        if entry is None:
            raise NodeNotJoinedError(self.id)
        return self._resolve(entry.successor)

    def closest_preceding_finger(self, key: int) -> "Node":
        """
        Find the closest finger preceding key in our finger table.
        Search from highest to lowest.
        """
        for i in range(len(self.finger_table) - 1, -1, -1):
            finger_entry = self.finger_table[i]
            if finger_entry is None or finger_entry.successor == self.id:
                continue
            # Check if finger is in range (self.id, key)
            if in_interval(finger_entry.successor, self.id, key):
                return self._resolve(finger_entry.successor)

        # If no finger is closer, return self
        return self

    def find_key(self, key: int) -> LookupResult:
        validate_identifier(key, "key")
        if not self.joined:
            raise NodeNotJoinedError(self.id)
        return routing.find_key(self, key)

    def insert_key(self, key: int, value: Any = DEFAULT_VALUE) -> "Node":
        """
        Store value on the node responsible for key and return that node.
        None is reserved as the lookup_value not-found result.
        """
        if value is None:
            raise ValueError(f"Cannot store None for key {key}")
        responsible = self.find_key(key).node
        responsible.storage.put(key, value)
        return responsible

    def remove_key(self, key: int) -> bool:
        """Remove key from its responsible node. Returns False if it was absent."""
        responsible = self.find_key(key).node
        return responsible.storage.delete(key)

    def lookup_value(self, key: int) -> Optional[Any]:
        """Value stored for key on its responsible node, or None."""
        responsible = self.find_key(key).node
        return responsible.storage.get(key)

    def join(self, contact: Optional["Node"] = None) -> MigrationReport:
        """
        Join a Chord ring.

        If contact is None, create a new ring.
        Otherwise, join the existing ring through that node.
        """
        return membership.join(self.registry, self, contact)

    def leave(self) -> MigrationReport:
        """Leave the ring, handing our keys to the successor."""
        return membership.leave(self.registry, self)

    def finger_entries(self) -> List[Tuple[int, int]]:
        return self.finger_table.entries()

    def key_items(self) -> List[Tuple[int, Any]]:
        return self.storage.items()
