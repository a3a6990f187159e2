import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

from .utils import in_interval

if TYPE_CHECKING:
    from .node import Node

logger = logging.getLogger("ChordRouting")


@dataclass
class LookupResult:
    """Node found responsible for a key and the ids visited to reach it."""
    node: "Node"
    path: List[int] = field(default_factory=list)

    @property
    def owner_id(self) -> int:
        return self.node.id


def _visit(path: List[int], node: "Node") -> None:
    if not path or path[-1] != node.id:
        path.append(node.id)


def find_key(start: "Node", key: int) -> LookupResult:
    """
    Iterative Chord lookup starting at start.

    - If key is in (current, successor], the successor owns it
    - Otherwise hop to the closest preceding finger
    - If no finger is closer, take one hop to the successor and stop there
    """
    path = [start.id]
    current = start

    while True:
        succ = current.successor()
        if in_interval(key, current.id, succ.id, inclusive=True):
            _visit(path, succ)
            logger.debug(f"Key {key} resolved to node {succ.id} via {path}")
            return LookupResult(node=succ, path=path)

        next_node = current.closest_preceding_finger(key)
        if next_node is current:
            # One hop only; the successor is taken as the answer
            current = succ
            _visit(path, current)
            logger.debug(f"Key {key} fell back to successor {current.id} via {path}")
            return LookupResult(node=current, path=path)

        current = next_node
        _visit(path, current)
