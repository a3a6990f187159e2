import pytest

from chord.utils import DEFAULT_VALUE


def test_insert_stores_on_responsible_node(ring):
    responsible = ring[0].insert_key(3, 3)
    assert responsible is ring[30]
    assert ring[30].key_items() == [(3, 3)]
    assert ring[0].key_items() == []


def test_lookup_from_another_node(ring):
    ring[0].insert_key(3, 3)
    assert ring[65].lookup_value(3) == 3
    assert ring[65].find_key(3).path[-1] == 30


def test_insert_default_value_and_overwrite(ring):
    ring[30].insert_key(200)
    assert ring[0].lookup_value(200) == DEFAULT_VALUE
    ring[110].insert_key(200, 9)
    assert ring[0].lookup_value(200) == 9
    assert ring[230].key_items() == [(200, 9)]


def test_lookup_missing_key_returns_none(ring):
    ring[0].insert_key(101, 4)
    assert ring[0].lookup_value(102) is None


def test_remove_key(ring):
    ring[110].insert_key(45, 3)
    assert ring[230].remove_key(45)
    assert ring[0].lookup_value(45) is None
    assert not ring[230].remove_key(45)


def test_demo_key_distribution(ring):
    for start, key, value in [
        (0, 3, 3), (30, 200, DEFAULT_VALUE), (65, 123, DEFAULT_VALUE),
        (110, 45, 3), (160, 99, DEFAULT_VALUE), (65, 60, 10), (0, 50, 8),
        (110, 100, 5), (110, 101, 4), (110, 102, 6), (230, 240, 8), (230, 250, 10),
    ]:
        ring[start].insert_key(key, value)

    assert ring[0].key_items() == [(240, 8), (250, 10)]
    assert ring[30].key_items() == [(3, 3)]
    assert ring[65].key_items() == [(45, 3), (50, 8), (60, 10)]
    assert ring[110].key_items() == [(99, -1), (100, 5), (101, 4), (102, 6)]
    assert ring[160].key_items() == [(123, -1)]
    assert ring[230].key_items() == [(200, -1)]


def test_none_value_is_rejected(ring):
    with pytest.raises(ValueError):
        ring[0].insert_key(5, None)
    assert ring[0].lookup_value(5) is None
    assert ring[30].key_items() == []
