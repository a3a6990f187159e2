class ChordError(Exception):
    """Base class for Chord ring errors."""


class EmptyRegistryError(ChordError):
    """Raised when a successor is requested from a ring with no nodes."""


class NodeNotJoinedError(ChordError):
    """Raised when an operation needs a node that is not part of the ring."""

    def __init__(self, node_id: int):
        super().__init__(f"Node {node_id} has not joined the ring")
        self.node_id = node_id


class DuplicateNodeError(ChordError):
    """Raised when a node id is already registered in the ring."""

    def __init__(self, node_id: int):
        super().__init__(f"Node {node_id} is already part of the ring")
        self.node_id = node_id
