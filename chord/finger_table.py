from typing import TYPE_CHECKING, List, Optional, Tuple

from .utils import RING_BITS, finger_start

if TYPE_CHECKING:
    from .registry import Registry


class FingerEntry:
    """
    Single entry in the finger table
    """
    def __init__(self, start: int, successor: int):
        self.start = start
        # id of the node in the registry arena
        self.successor = successor

    def __repr__(self):
        return f"FingerEntry(start={self.start}, successor={self.successor})"


class FingerTable:
    """
    Finger table for Chord protocol.

    Entry i holds the successor of (node_id + 2^i) mod 2^m. Entries refer to
    nodes by id; the registry resolves them.
    """
    def __init__(self, node_id: int):
        self.node_id = node_id
        self.m = RING_BITS
        self.fingers: List[Optional[FingerEntry]] = [None] * self.m

    def start(self, i: int) -> int:
        """Calculate the start of the i-th finger interval."""
        return finger_start(self.node_id, i)

    def get_interval(self, i: int) -> tuple[int, int]:
        start = self.start(i)

        if i + 1 < self.m:
            end = self.start(i + 1)
        else:
            # last finger
            end = self.node_id
        return (start, end)

    def update(self, registry: "Registry") -> None:
        """Recompute every entry from the current ring membership."""
        for i in range(self.m):
            start = self.start(i)
            self.fingers[i] = FingerEntry(start=start, successor=registry.successor_for_key(start).id)

    def clear(self) -> None:
        self.fingers = [None] * self.m

    def entries(self) -> List[Tuple[int, int]]:
        """(start, successor id) pairs in index order."""
        return [(entry.start, entry.successor) for entry in self.fingers if entry is not None]

    def __getitem__(self, i: int):
        """Allow indexing like finger_table[i]"""
        return self.fingers[i]

    def __len__(self):
        return len(self.fingers)
