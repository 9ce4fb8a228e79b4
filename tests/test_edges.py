from __future__ import annotations

from collections import OrderedDict
from collections.abc import Mapping

import pytest

from funcutil import (
    MISSING,
    at,
    cover,
    cycle,
    ensure_delete_from_set,
    get_property,
    has_property,
    index_by,
    map_values,
    nullableobj_to_partial,
    pairs,
    zip_shortest,
)


class ReadOnlyMap(Mapping):
    def __init__(self, initial: dict):
        self._data = dict(initial)

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)


def test_custom_mapping_inputs_produce_plain_dicts():
    src = ReadOnlyMap({"a": 1, "b": None})
    assert map_values(src, lambda v: v) == {"a": 1, "b": None}
    assert type(map_values(src, lambda v: v)) is dict
    assert nullableobj_to_partial(src) == {"a": 1}
    assert cover(src, {"a": 2}) == {"a": 2, "b": None}


def test_cover_accepts_custom_mapping_overlay():
    assert cover({"a": 1, "b": 2}, ReadOnlyMap({"b": 3})) == {"a": 1, "b": 3}


def test_cover_preserves_template_order():
    template = OrderedDict([("z", 1), ("a", 2)])
    assert list(cover(template, {"a": 5, "z": 6})) == ["z", "a"]


def test_has_property_on_custom_mapping():
    src = ReadOnlyMap({"a": 1})
    assert has_property(src, "a")
    assert not has_property(src, "b")
    # mapping keys are looked up as items, not attributes
    assert not has_property({}, "items")


def test_get_property_on_property_that_raises():
    class Flaky:
        @property
        def value(self):
            raise AttributeError("not ready")

    assert get_property(Flaky(), "value") is MISSING


def test_sequence_helpers_accept_strings_and_tuples():
    assert pairs("abc") == [("a", "b"), ("b", "c")]
    assert at("abc", -1) == "c"
    assert cycle("abc", 1) == ["b", "c", "a"]
    assert zip_shortest([(1, 2), range(3)]) == [(1, 0), (2, 1)]


def test_pairs_does_not_mutate_input():
    data = [1, 2, 3]
    pairs(data)
    assert data == [1, 2, 3]


def test_ensure_delete_from_set_nested_structures():
    class Node:
        def __init__(self, name: str, tags: list[str]):
            self.name = name
            self.tags = tags

    data = {Node("a", ["x"]), Node("b", ["y"])}
    assert ensure_delete_from_set(data, Node("a", ["x"])) is True
    assert ensure_delete_from_set(data, Node("b", ["z"])) is False
    assert len(data) == 1


def test_ensure_delete_from_frozenset_members():
    data = {frozenset({1, 2}), frozenset({3})}
    assert ensure_delete_from_set(data, frozenset({2, 1})) is True
    assert data == {frozenset({3})}


def test_index_by_empty():
    assert index_by([], "id") == {}


def test_index_by_object_missing_attribute():
    class Item:
        pass

    with pytest.raises(AttributeError):
        index_by([Item()], "id")


def test_ensure_delete_from_set_self_referencing_members():
    class Node:
        def __init__(self, name: str):
            self.name = name
            self.me = self

    data = {Node("a"), Node("b")}
    assert ensure_delete_from_set(data, Node("a")) is True
    assert [node.name for node in data] == ["b"]
    assert ensure_delete_from_set(data, Node("c")) is False


def test_ensure_delete_from_set_self_referencing_lists():
    class Holder:
        def __init__(self, items: list):
            self.items = items

    left: list = ["x"]
    left.append(left)
    right: list = ["x"]
    right.append(right)
    other: list = ["y"]
    other.append(other)

    holders = {Holder(left)}
    assert ensure_delete_from_set(holders, Holder(other)) is False
    assert ensure_delete_from_set(holders, Holder(right)) is True
    assert holders == set()


def test_ensure_delete_from_set_nan_matches_nan():
    data = {(float("nan"), 1), (2.0, 1)}
    assert ensure_delete_from_set(data, (float("nan"), 1)) is True
    assert data == {(2.0, 1)}


def test_ensure_delete_from_set_nan_does_not_match_number():
    data = {(float("nan"),)}
    assert ensure_delete_from_set(data, (1.0,)) is False
    assert len(data) == 1
