"""
Chord DHT demo run
"""
import argparse
import logging

from analyze import format_finger_table, format_key_distribution, format_lookup
from chord.node import Node
from chord.registry import Registry

NODE_IDS = [0, 30, 65, 110, 160, 230]

# (inserting node id, key, value); None means the default value
INSERTS = [
    (0, 3, 3),
    (30, 200, None),
    (65, 123, None),
    (110, 45, 3),
    (160, 99, None),
    (65, 60, 10),
    (0, 50, 8),
    (110, 100, 5),
    (110, 101, 4),
    (110, 102, 6),
    (230, 240, 8),
    (230, 250, 10),
]

LOOKUP_KEYS = [3, 200, 123, 45, 99, 60, 50, 100, 101, 102, 240, 250]


def print_distribution(title: str, registry: Registry):
    print(f"\n{title}")
    print("\n".join(format_key_distribution(registry)))
    print()


def run_demo(registry: Registry):
    nodes = {}
    contact = None
    for node_id in NODE_IDS:
        node = Node(node_id, registry)
        node.join(contact)
        nodes[node_id] = node
        contact = node

    print("Finger Tables:")
    for node in registry.sorted_nodes():
        print("\n".join(format_finger_table(node)))
        print()

    for node_id, key, value in INSERTS:
        if value is None:
            nodes[node_id].insert_key(key)
        else:
            nodes[node_id].insert_key(key, value)

    print_distribution("Keys Distribution:", registry)

    newcomer = Node(100, registry)
    report = newcomer.join(nodes[0])
    if report:
        print(report)
    nodes[100] = newcomer

    print_distribution("Keys Distribution after node 100 joins:", registry)

    for start in (nodes[0], nodes[65], nodes[100]):
        print(f"\n----- node {start.id} lookups -----")
        for key in LOOKUP_KEYS:
            print(format_lookup(start, key))
    print()

    nodes[65].leave()

    print("Updated Finger Tables after node 65 leaves:")
    for node in (nodes[0], nodes[30]):
        print("\n".join(format_finger_table(node)))
        print()

    print("Keys Distribution after node 65 leaves:")
    print("\n".join(format_key_distribution(registry)))


def main():
    parser = argparse.ArgumentParser(description='Run the Chord DHT demo scenario')
    parser.add_argument(
        '--log-level',
        type=str,
        default='WARNING',
        help='Logging level (default: WARNING)'
    )
    args = parser.parse_args()

    # Configure logging FIRST
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    run_demo(Registry())


if __name__ == '__main__':
    main()
