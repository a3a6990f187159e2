"""
FastAPI server for managing and inspecting an in-process Chord ring
"""
import argparse
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from chord.exceptions import DuplicateNodeError
from chord.membership import MigrationReport
from chord.node import Node
from chord.registry import Registry
from chord.utils import DEFAULT_VALUE, RING_SIZE

logger = logging.getLogger(__name__)

app = FastAPI(title="Chord DHT Manager")

# Nodes currently in the ring
registry = Registry()


class NodeCreateRequest(BaseModel):
    node_id: int
    contact_id: Optional[int] = None


class KeyValueRequest(BaseModel):
    key: int
    value: int = DEFAULT_VALUE
    node_id: int


class KeyRequest(BaseModel):
    key: int
    node_id: int


def get_node(node_id: int) -> Node:
    node = registry.get(node_id)
    if node is None:
        raise HTTPException(status_code=404, detail=f"Node {node_id} not found")
    return node


def check_key(key: int):
    if not 0 <= key < RING_SIZE:
        raise HTTPException(status_code=400, detail=f"Key {key} is outside the identifier space")


def report_to_dict(report: MigrationReport) -> dict:
    return {"from": report.source_id, "to": report.target_id, "keys": report.keys}


def node_to_dict(node: Node) -> dict:
    return {
        "id": node.id,
        "successor_id": registry.next_node(node).id,
        "predecessor_id": registry.previous_node(node).id,
        "key_count": len(node.storage),
        "keys": [key for key, _ in node.key_items()],
        "fingers": [{"start": start, "successor_id": succ} for start, succ in node.finger_entries()],
    }


@app.get("/api/nodes")
async def get_nodes():
    """Get all nodes in the ring"""
    nodes_data = [node_to_dict(node) for node in registry.sorted_nodes()]
    total_keys = sum(node["key_count"] for node in nodes_data)
    return {"nodes": nodes_data, "total_keys": total_keys}


@app.post("/api/nodes")
async def create_node(request: NodeCreateRequest):
    """Create a node and join it to the ring"""
    contact = get_node(request.contact_id) if request.contact_id is not None else None
    try:
        node = Node(request.node_id, registry)
        report = node.join(contact)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DuplicateNodeError as e:
        logger.error(f"Error creating node: {e}")
        raise HTTPException(status_code=409, detail=str(e))

    return {
        "status": "success",
        "node_id": node.id,
        "migration": report_to_dict(report),
    }


@app.delete("/api/nodes/all")
async def remove_all_nodes():
    """Remove all nodes"""
    for node in registry.sorted_nodes():
        node.leave()
    return {"status": "success", "message": "All nodes removed"}


@app.delete("/api/nodes/{node_id}")
async def remove_node(node_id: int):
    """Remove a specific node, handing its keys to its successor"""
    node = get_node(node_id)
    report = node.leave()
    return {
        "status": "success",
        "message": f"Node {node_id} removed",
        "migration": report_to_dict(report),
    }


@app.get("/api/nodes/{node_id}/fingers")
async def get_fingers(node_id: int):
    node = get_node(node_id)
    return {"node_id": node.id, "fingers": [{"start": start, "successor_id": succ}
                                            for start, succ in node.finger_entries()]}


@app.post("/api/put")
async def put_key(request: KeyValueRequest):
    """Store a key-value pair"""
    node = get_node(request.node_id)
    check_key(request.key)
    responsible = node.insert_key(request.key, request.value)
    return {
        "status": "success",
        "message": f"Key {request.key} stored on Node {responsible.id}",
        "stored_node_id": responsible.id,
    }


@app.get("/api/get")
async def get_key(key: int, node_id: int):
    """Retrieve a value by key"""
    node = get_node(node_id)
    check_key(key)
    value = node.lookup_value(key)
    if value is None:
        return {"status": "error", "message": "Key not found"}
    return {"status": "success", "value": value}


@app.delete("/api/delete")
async def delete_key(request: KeyRequest):
    """Delete a key"""
    node = get_node(request.node_id)
    check_key(request.key)
    if node.remove_key(request.key):
        return {"status": "success", "message": f"Key {request.key} deleted"}
    return {"status": "error", "message": "Key not found"}


@app.get("/api/lookup")
async def lookup_key(key: int, node_id: int):
    """Route a key from node_id and report the path taken"""
    node = get_node(node_id)
    check_key(key)
    result = node.find_key(key)
    return {"key": key, "owner_id": result.owner_id, "path": result.path}


if __name__ == "__main__":
    import uvicorn

    parser = argparse.ArgumentParser(description='Serve the Chord DHT manager API')
    parser.add_argument('--host', type=str, default='localhost', help='Host to bind to (default: localhost)')
    parser.add_argument('--port', type=int, default=8000, help='Port to bind to (default: 8000)')
    parser.add_argument('--log-level', type=str, default='INFO', help='Logging level (default: INFO)')
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    uvicorn.run(app, host=args.host, port=args.port)
