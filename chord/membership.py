import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from .exceptions import NodeNotJoinedError

if TYPE_CHECKING:
    from .node import Node
    from .registry import Registry

logger = logging.getLogger("ChordMembership")


@dataclass
class MigrationReport:
    """Keys moved from source_id to target_id by a join or leave."""
    source_id: int
    target_id: int
    keys: List[int] = field(default_factory=list)

    def __bool__(self):
        return bool(self.keys)

    def __str__(self):
        moved = " ".join(str(k) for k in self.keys)
        return f"Migrated keys from node {self.source_id} to node {self.target_id}: {moved}"


def join(registry: "Registry", node: "Node", contact: Optional["Node"] = None) -> MigrationReport:
    """
    Add node to the ring.

    Without a contact node a fresh ring is created. With one, node takes
    over the keys of its arc (predecessor, node] from its successor.
    Entries the node still holds from an earlier membership are routed
    back to their owners once the finger tables are rebuilt.
    """
    if contact is not None and contact not in registry:
        raise NodeNotJoinedError(contact.id)

    registry.add(node)
    held = node.storage.pop_all()
    registry.update_all_finger_tables()

    if contact is None:
        logger.info(f"Node {node.id} created a new ring")
        report = MigrationReport(source_id=node.id, target_id=node.id)
    else:
        pred = registry.previous_node(node)
        succ = registry.next_node(node)
        report = MigrationReport(source_id=succ.id, target_id=node.id)
        logger.info(f"Node {node.id} joined via node {contact.id} (predecessor {pred.id}, successor {succ.id})")

        if succ is not node:
            moved = succ.storage.take_range(pred.id, node.id)
            node.storage.update(moved)
            report.keys = sorted(moved)
            if report:
                logger.info(str(report))

    for key, value in held.items():
        owner = node.insert_key(key, value)
        logger.debug(f"Re-homed held key {key} from node {node.id} to node {owner.id}")
    return report


def leave(registry: "Registry", node: "Node") -> MigrationReport:
    """
    Remove node from the ring, handing all of its keys to its successor.
    """
    succ = registry.next_node(node)
    if succ is None:
        raise NodeNotJoinedError(node.id)

    report = MigrationReport(source_id=node.id, target_id=succ.id)
    if succ is node:
        logger.warning(f"Node {node.id} is the last node in the ring; keeping its keys")
    else:
        moved = node.storage.pop_all()
        succ.storage.update(moved)
        report.keys = sorted(moved)

    registry.remove(node)
    node.finger_table.clear()
    registry.update_all_finger_tables()

    logger.info(f"Node {node.id} left the ring")
    if report:
        logger.info(str(report))
    return report
