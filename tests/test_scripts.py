from analyze import build_ring, format_finger_table, format_key_distribution, format_lookup, format_ranges
from client import ChordClient, ClientREPL, parse_key
from chord.utils import hash_key
from run import run_demo
from chord.registry import Registry


def test_format_finger_table_and_distribution():
    registry = build_ring([0, 30, 65])
    node = registry.get(0)
    node.insert_key(3, 3)
    node.insert_key(50)

    lines = format_finger_table(node)
    assert lines[0] == "Finger table of node 0:"
    assert lines[1] == "start 1 -> 30"
    assert lines[-1] == "start 128 -> 0"
    assert format_key_distribution(registry) == ["Node 0: ", "Node 30: 3:3", "Node 65: 50:-1"]
    assert format_lookup(registry.get(65), 3) == "Look-up result of key 3 from node 65 with path [65,0,30] value is 3"


def test_format_ranges_marks_wraparound():
    registry = build_ring([30, 0])
    lines = format_ranges(registry)
    assert lines[0] == "Node 0 is responsible for keys in (30, 0]"
    assert "wrap-around" in lines[1]
    assert lines[2] == "Node 30 is responsible for keys in (0, 30]"


def test_demo_run_output(capsys):
    registry = Registry()
    run_demo(registry)
    out = capsys.readouterr().out

    assert "Migrated keys from node 110 to node 100: 99 100" in out
    assert "Look-up result of key 3 from node 65 with path [65,230,0,30] value is 3" in out
    assert "Node 100: 45:3 50:8 60:10 99:-1 100:5" in out
    assert [node.id for node in registry.sorted_nodes()] == [0, 30, 100, 110, 160, 230]


def test_parse_key():
    assert parse_key("42") == 42
    assert parse_key("alice") == hash_key("alice")


def test_repl_session(capsys):
    repl = ClientREPL(ChordClient())
    for line in ["join 0", "join 128 0", "put 0 3 three", "get 128 3", "lookup 128 3",
                 "leave 0", "get 128 3", "delete 128 3", "get 128 3", "leave 99"]:
        repl.onecmd(line)
    out = capsys.readouterr().out

    assert "Key 3 stored on node 128" in out
    assert "Value for key 3: three" in out
    assert "Key 3 is owned by node 128 (path: 128 -> 0 -> 128)" in out
    assert "Key 3 deleted successfully" in out
    assert "Key 3 not found" in out
    assert "Error: Node 99 is not part of the ring" in out
