#!/usr/bin/env python3
"""
Chord Ring Analyzer
Helps understand which keys map to which nodes
"""
import argparse
from typing import Iterable, List

from chord.node import Node
from chord.registry import Registry
from chord.utils import RING_SIZE


def format_finger_table(node: Node) -> List[str]:
    lines = [f"Finger table of node {node.id}:"]
    for start, successor_id in node.finger_entries():
        lines.append(f"start {start} -> {successor_id}")
    return lines


def format_key_distribution(registry: Registry) -> List[str]:
    lines = []
    for node in registry.sorted_nodes():
        keys_str = " ".join(f"{key}:{value}" for key, value in node.key_items())
        lines.append(f"Node {node.id}: {keys_str}")
    return lines


def format_lookup(start: Node, key: int) -> str:
    result = start.find_key(key)
    value = result.node.storage.get(key)
    if value is None:
        value = -1
    path = ",".join(str(node_id) for node_id in result.path)
    return f"Look-up result of key {key} from node {start.id} with path [{path}] value is {value}"


def format_ranges(registry: Registry) -> List[str]:
    lines = []
    for node in registry.sorted_nodes():
        prev_node = registry.previous_node(node)
        lines.append(f"Node {node.id} is responsible for keys in ({prev_node.id}, {node.id}]")
        if prev_node.id >= node.id:
            # First node handles wrap-around
            lines.append(f"  (This includes wrap-around from {RING_SIZE - 1} to {node.id})")
    return lines


def build_ring(node_ids: Iterable[int]) -> Registry:
    """Join node_ids in order, each through the previously joined node."""
    registry = Registry()
    contact = None
    for node_id in node_ids:
        node = Node(node_id, registry)
        node.join(contact)
        contact = node
    return registry


def analyze_chord_ring(node_ids: List[int], keys: List[int]):
    """Print the ring structure and where the given keys land."""
    registry = build_ring(node_ids)

    print("=" * 70)
    print("CHORD RING STRUCTURE")
    print("=" * 70)
    for node in registry.sorted_nodes():
        print()
        print("\n".join(format_finger_table(node)))

    print("\n" + "=" * 70)
    print("KEY RESPONSIBILITY RANGES")
    print("=" * 70)
    print("\n".join(format_ranges(registry)))

    if keys:
        entry = registry.sorted_nodes()[0]
        for key in keys:
            entry.insert_key(key, key)

        print("\n" + "=" * 70)
        print("KEY DISTRIBUTION")
        print("=" * 70)
        print("\n".join(format_key_distribution(registry)))


def main():
    parser = argparse.ArgumentParser(description='Analyze a Chord ring layout')
    parser.add_argument('node_ids', type=int, nargs='*', default=[0, 30, 65, 110, 160, 230],
                        help='Node identifiers to place on the ring')
    parser.add_argument('--keys', type=int, nargs='*', default=[],
                        help='Keys to insert and show the distribution of')
    args = parser.parse_args()

    print(f"\nAnalyzing Chord ring with {len(args.node_ids)} nodes...")
    analyze_chord_ring(args.node_ids, args.keys)


if __name__ == '__main__':
    main()
