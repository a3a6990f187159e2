import pytest

from chord.utils import RING_SIZE, finger_start, hash_key, in_interval, validate_identifier

# every third point plus the values next to the wrap
ENDPOINTS = sorted(set(range(0, RING_SIZE, 3)) | {1, RING_SIZE - 2, RING_SIZE - 1})


def walk_arc(a, b, inclusive, size=RING_SIZE):
    """Points met walking clockwise from a (exclusive) to b."""
    if a == b:
        return set(range(size))
    points = set()
    x = (a + 1) % size
    while x != b:
        points.add(x)
        x = (x + 1) % size
    if inclusive:
        points.add(b)
    return points


@pytest.mark.parametrize("inclusive", [False, True])
def test_in_interval_matches_ring_walk(inclusive):
    for a in ENDPOINTS:
        for b in ENDPOINTS:
            expected = walk_arc(a, b, inclusive)
            for x in range(RING_SIZE):
                assert in_interval(x, a, b, inclusive) == (x in expected), (x, a, b, inclusive)


def test_in_interval_no_wrap():
    assert in_interval(15, 10, 20)
    assert not in_interval(25, 10, 20)
    assert not in_interval(10, 10, 20)
    assert not in_interval(20, 10, 20)
    assert in_interval(20, 10, 20, inclusive=True)


def test_in_interval_with_wraparound():
    assert in_interval(2, 250, 5)
    assert in_interval(253, 250, 5)
    assert not in_interval(100, 250, 5)
    assert not in_interval(5, 250, 5)
    assert in_interval(5, 250, 5, inclusive=True)
    assert not in_interval(250, 250, 5, inclusive=True)


def test_in_interval_degenerate_full_circle():
    for x in (0, 7, 42, 255):
        assert in_interval(x, 42, 42)
        assert in_interval(x, 42, 42, inclusive=True)


def test_finger_start_wraps():
    assert finger_start(0, 0) == 1
    assert finger_start(0, 7) == 128
    assert finger_start(230, 5) == (230 + 32) % RING_SIZE


def test_validate_identifier():
    assert validate_identifier(0) == 0
    assert validate_identifier(RING_SIZE - 1) == RING_SIZE - 1
    for bad in (-1, RING_SIZE, "3", 1.5, True):
        with pytest.raises(ValueError):
            validate_identifier(bad)


def test_hash_key_range_and_consistency():
    value = hash_key("hello world")
    assert 0 <= value < RING_SIZE
    assert hash_key("hello world") == value
