import pytest

from chord.node import Node
from chord.registry import Registry

DEMO_IDS = [0, 30, 65, 110, 160, 230]


def build_ring(registry, node_ids):
    nodes = {}
    contact = None
    for node_id in node_ids:
        node = Node(node_id, registry)
        node.join(contact)
        nodes[node_id] = node
        contact = node
    return nodes


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def ring(registry):
    """Six node demo ring, each node joined through the previous one."""
    return build_ring(registry, DEMO_IDS)
