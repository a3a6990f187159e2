#!/usr/bin/env python3

import argparse
import cmd
import logging
import sys
from typing import Optional

from analyze import format_finger_table, format_key_distribution
from chord.exceptions import ChordError
from chord.node import Node
from chord.registry import Registry
from chord.utils import hash_key


def parse_key(raw: str) -> int:
    """Integer keys are used as identifiers, anything else is hashed."""
    try:
        return int(raw)
    except ValueError:
        return hash_key(raw)


class ChordClient(object):
    """Client for driving an in-process chord ring"""

    def __init__(self, registry: Optional[Registry] = None):
        self.registry = registry if registry is not None else Registry()

    def node(self, node_id: int) -> Node:
        node = self.registry.get(node_id)
        if node is None:
            raise ChordError(f"Node {node_id} is not part of the ring")
        return node

    def join(self, node_id: int, contact_id: Optional[int] = None) -> Node:
        contact = self.node(contact_id) if contact_id is not None else None
        node = Node(node_id, self.registry)
        report = node.join(contact)
        if report:
            print(report)
        return node

    def leave(self, node_id: int):
        report = self.node(node_id).leave()
        if report:
            print(report)

    def put(self, node_id: int, key: int, value) -> int:
        return self.node(node_id).insert_key(key, value).id

    def get(self, node_id: int, key: int):
        return self.node(node_id).lookup_value(key)

    def delete(self, node_id: int, key: int) -> bool:
        return self.node(node_id).remove_key(key)

    def lookup(self, node_id: int, key: int):
        return self.node(node_id).find_key(key)


class ClientREPL(cmd.Cmd):
    intro = """
    Chord DHT REPL

    Type 'help' or '?' for available commands.
    Type 'exit' or 'quit' to exit.
    """

    prompt = 'chord> '

    def __init__(self, client: ChordClient):
        super().__init__()
        self.client = client

    def onecmd(self, line):
        try:
            return super().onecmd(line)
        except (ChordError, ValueError) as e:
            print(f"Error: {e}")
            return False

    def do_join(self, arg: str):
        """Add a node to the ring: join <node_id> [contact_id]"""
        parts = arg.split()
        if len(parts) not in (1, 2):
            print("Usage: join <node_id> [contact_id]")
            return

        contact_id = int(parts[1]) if len(parts) == 2 else None
        node = self.client.join(int(parts[0]), contact_id)
        print(f"Node {node.id} joined the ring")

    def do_leave(self, arg: str):
        """Remove a node from the ring: leave <node_id>"""
        if not arg:
            print("Usage: leave <node_id>")
            return

        self.client.leave(int(arg))
        print(f"Node {arg.strip()} left the ring")

    def do_put(self, arg: str):
        """Store a key-value pair: put <node_id> <key> <value>"""
        parts = arg.split(maxsplit=2)
        if len(parts) < 3:
            print("Usage: put <node_id> <key> <value>")
            return

        node_id, key, value = int(parts[0]), parse_key(parts[1]), parts[2]
        stored_on = self.client.put(node_id, key, value)
        print(f"Key {key} stored on node {stored_on}")

    def do_get(self, arg: str):
        """Retrieve a value by key: get <node_id> <key>"""
        parts = arg.split()
        if len(parts) != 2:
            print("Usage: get <node_id> <key>")
            return

        key = parse_key(parts[1])
        value = self.client.get(int(parts[0]), key)
        if value is not None:
            print(f"Value for key {key}: {value}")
        else:
            print(f"Key {key} not found")

    def do_delete(self, arg: str):
        """Delete a key-value pair: delete <node_id> <key>"""
        parts = arg.split()
        if len(parts) != 2:
            print("Usage: delete <node_id> <key>")
            return

        key = parse_key(parts[1])
        if self.client.delete(int(parts[0]), key):
            print(f"Key {key} deleted successfully")
        else:
            print(f"Key {key} not found")

    def do_lookup(self, arg: str):
        """Show the route to a key: lookup <node_id> <key>"""
        parts = arg.split()
        if len(parts) != 2:
            print("Usage: lookup <node_id> <key>")
            return

        key = parse_key(parts[1])
        result = self.client.lookup(int(parts[0]), key)
        path = " -> ".join(str(node_id) for node_id in result.path)
        print(f"Key {key} is owned by node {result.owner_id} (path: {path})")

    def do_fingers(self, arg: str):
        """Print a node's finger table: fingers <node_id>"""
        if not arg:
            print("Usage: fingers <node_id>")
            return

        print("\n".join(format_finger_table(self.client.node(int(arg)))))

    def do_keys(self, arg: str):
        """Print the key distribution over the ring: keys"""
        print("\n".join(format_key_distribution(self.client.registry)))

    def do_nodes(self, arg: str):
        """List the node ids in the ring: nodes"""
        print(" ".join(str(node.id) for node in self.client.registry.sorted_nodes()))

    def do_exit(self, arg: str):
        """Exit the REPL: exit"""
        print("Exiting...")
        return True

    def do_quit(self, arg: str):
        """Quit the REPL: quit"""
        print("Quitting...")
        return True

    def do_EOF(self, arg):
        """Exit on EOF (Ctrl+D)"""
        print()
        return True

    def emptyline(self):
        """Do nothing on empty line"""
        pass

    def default(self, line):
        """Handle unknown commands"""
        print(f"Unknown command: {line}")
        print("Type 'help' for available commands")


def main():
    parser = argparse.ArgumentParser(description='Chord DHT REPL Client')
    parser.add_argument('--log-level', type=str, default='WARNING', help='Logging level (default: WARNING)')
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        repl = ClientREPL(ChordClient())
        repl.cmdloop()
    except KeyboardInterrupt:
        print("\nExiting...")
        sys.exit(0)


if __name__ == "__main__":
    main()
