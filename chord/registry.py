import logging
from typing import TYPE_CHECKING, Dict, List, Optional

from .exceptions import DuplicateNodeError, EmptyRegistryError

if TYPE_CHECKING:
    from .node import Node


class Registry:
    """
    Ring membership registry.

    Holds the joined nodes keyed by id. Every query works on a fresh
    ascending sort of the member ids, so insertion order never matters.
    """

    def __init__(self):
        self._nodes: Dict[int, "Node"] = {}
        self.logger = logging.getLogger("ChordRegistry")

    def add(self, node: "Node") -> None:
        if node.id in self._nodes:
            raise DuplicateNodeError(node.id)
        self._nodes[node.id] = node
        self.logger.debug(f"Registered node {node.id} (ring size: {len(self._nodes)})")

    def remove(self, node: "Node") -> bool:
        """Unregister node. Returns False if it was not registered."""
        if self._nodes.get(node.id) is not node:
            return False
        del self._nodes[node.id]
        self.logger.debug(f"Unregistered node {node.id} (ring size: {len(self._nodes)})")
        return True

    def get(self, node_id: int) -> Optional["Node"]:
        return self._nodes.get(node_id)

    def sorted_nodes(self) -> List["Node"]:
        return [self._nodes[node_id] for node_id in sorted(self._nodes)]

    def successor_for_key(self, key: int) -> "Node":
        """First node with id >= key, wrapping to the smallest id."""
        sorted_nodes = self.sorted_nodes()
        if not sorted_nodes:
            raise EmptyRegistryError("Cannot find a successor in an empty ring")

        for node in sorted_nodes:
            if node.id >= key:
                return node
        return sorted_nodes[0]

    def next_node(self, node: "Node") -> Optional["Node"]:
        """Node clockwise after node, or None if node is not registered."""
        sorted_nodes = self.sorted_nodes()
        if node not in sorted_nodes:
            return None
        idx = sorted_nodes.index(node)
        return sorted_nodes[(idx + 1) % len(sorted_nodes)]

    def previous_node(self, node: "Node") -> Optional["Node"]:
        """Node counter-clockwise before node, or None if node is not registered."""
        sorted_nodes = self.sorted_nodes()
        if node not in sorted_nodes:
            return None
        idx = sorted_nodes.index(node)
        # index -1 wraps to the largest id
        return sorted_nodes[idx - 1]

    def update_all_finger_tables(self) -> None:
        for node in self.sorted_nodes():
            node.update_finger_table()

    def __contains__(self, node: "Node") -> bool:
        return self._nodes.get(node.id) is node

    def __len__(self):
        return len(self._nodes)
