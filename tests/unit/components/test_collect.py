import pytest

from reeks import pairs
from reeks.components.collect import extract_field, to_array
from reeks.components.keys import pass_through_key_func
from reeks.components.map import map_


def test_extract_field_returns_list_of_columns():
    rows = {"a": {"id": 1, "name": "x"}, "b": {"id": 2, "name": "y"}}
    assert extract_field(rows, lambda row: row["name"]) == ["x", "y"]


def test_extract_field_of_empty_source():
    assert extract_field([], lambda row: row) == []


def test_extract_field_propagates_column_errors():
    with pytest.raises(KeyError):
        extract_field([{"id": 1}, {}], lambda row: row["id"])


def test_to_array_keeps_original_keys_of_mapped_stream():
    source = {"a": 1, "b": 2}
    result = to_array(map_(source, lambda key, value: value * 3), pass_through_key_func())
    assert result == {"a": 3, "b": 6}


def test_to_array_skips_none_keys():
    result = to_array(range(5), lambda key, value: f"k{value}" if value % 2 else None)
    assert result == {"k1": 1, "k3": 3}


def test_to_array_last_write_wins():
    source = pairs([("one", "first"), ("two", "second"), ("three", "third")])
    result = to_array(source, lambda key, value: len(key))
    assert result == {3: "second", 5: "third"}


def test_to_array_propagates_source_errors():
    def broken():
        yield 0, "ok"
        raise RuntimeError("source failed")

    with pytest.raises(RuntimeError, match="source failed"):
        to_array(pairs(broken()), pass_through_key_func())
