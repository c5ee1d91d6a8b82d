"""Tests for the field-kind accessor contract in fields.py."""

import pytest

from jsonfeed_model.kernel.errors import TypeMismatchError
from jsonfeed_model.kernel.fields import (
    U64_MAX,
    FieldKind,
    is_extension_key,
    json_type_name,
    read_bool,
    read_object,
    read_object_array,
    read_str,
    read_str_array,
    read_u64,
    remove_field,
    write_bool,
    write_object,
    write_object_array,
    write_str,
    write_str_array,
    write_u64,
)
from jsonfeed_model.kernel.schema import FEED, HUB, ITEM
from jsonfeed_model.kernel.version import Version


READERS = [read_str, read_str_array, read_bool, read_u64, read_object, read_object_array]


@pytest.mark.parametrize("reader", READERS, ids=lambda r: r.__name__)
def test_missing_key_reads_as_none(reader):
    """Absence is None for every kind, never an error."""
    assert reader({}, "anything") is None
    assert reader({"other": 1}, "anything") is None


def test_read_str():
    assert read_str({"title": "T"}, "title") == "T"
    assert read_str({"title": ""}, "title") == ""
    with pytest.raises(TypeMismatchError) as exc_info:
        read_str({"title": 1}, "title")
    assert exc_info.value.key == "title"
    assert exc_info.value.expected == FieldKind.STRING.value
    assert exc_info.value.found == "number"


def test_read_str_rejects_null():
    """An explicit null is present, so it is a mismatch rather than absence."""
    with pytest.raises(TypeMismatchError):
        read_str({"title": None}, "title")


def test_read_str_array_is_all_or_nothing():
    """One bad element discards the whole list."""
    assert read_str_array({"tags": ["a", "b"]}, "tags") == ["a", "b"]
    assert read_str_array({"tags": []}, "tags") == []
    with pytest.raises(TypeMismatchError) as exc_info:
        read_str_array({"tags": ["a", 2, "c"]}, "tags")
    assert exc_info.value.index == 1
    with pytest.raises(TypeMismatchError):
        read_str_array({"tags": "a"}, "tags")


def test_read_bool():
    assert read_bool({"expired": True}, "expired") is True
    assert read_bool({"expired": False}, "expired") is False
    for bad in (0, 1, "true", None):
        with pytest.raises(TypeMismatchError):
            read_bool({"expired": bad}, "expired")


def test_read_u64_bounds():
    assert read_u64({"n": 0}, "n") == 0
    assert read_u64({"n": U64_MAX}, "n") == U64_MAX


@pytest.mark.parametrize("bad", [-1, U64_MAX + 1, 1.5, 1.0, True, "1", None])
def test_read_u64_rejects_unrepresentable_values(bad):
    """Negative, overflowing, fractional, boolean and non-numbers are mismatches."""
    with pytest.raises(TypeMismatchError):
        read_u64({"n": bad}, "n")


def test_read_object_returns_same_dict():
    """Nested readers return the stored object so views can borrow it."""
    inner = {"name": "Jane"}
    assert read_object({"author": inner}, "author") is inner
    with pytest.raises(TypeMismatchError):
        read_object({"author": ["Jane"]}, "author")


def test_read_object_array():
    first, second = {"id": "1"}, {"id": "2"}
    values = read_object_array({"items": [first, second]}, "items")
    assert values[0] is first and values[1] is second
    with pytest.raises(TypeMismatchError) as exc_info:
        read_object_array({"items": [first, "2"]}, "items")
    assert exc_info.value.index == 1
    with pytest.raises(TypeMismatchError):
        read_object_array({"items": {"id": "1"}}, "items")


def test_writers_return_prior_raw_value():
    doc = {}
    assert write_str(doc, "title", "A") is None
    assert write_str(doc, "title", "B") == "A"
    doc["raw"] = 5
    assert write_str(doc, "raw", "x") == 5
    assert doc == {"title": "B", "raw": "x"}


def test_write_str_coerces_stringifiable_values():
    doc = {}
    write_str(doc, "id", 42)
    write_str(doc, "version", Version.V1_1)
    assert doc == {"id": "42", "version": "https://jsonfeed.org/version/1.1"}


@pytest.mark.parametrize("value", [None, b"title", bytearray(b"title")])
def test_write_str_rejects_null_and_bytes(value):
    doc = {"title": "Kept"}
    with pytest.raises(TypeMismatchError):
        write_str(doc, "title", value)
    with pytest.raises(TypeMismatchError) as exc_info:
        write_str_array(doc, "tags", ["a", value])
    assert exc_info.value.index == 1
    assert doc == {"title": "Kept"}


def test_write_str_array():
    doc = {}
    write_str_array(doc, "tags", (t for t in ["a", "b"]))
    assert doc["tags"] == ["a", "b"]
    with pytest.raises(TypeMismatchError):
        write_str_array(doc, "tags", "ab")
    assert doc["tags"] == ["a", "b"]


def test_write_bool_and_u64_are_strict():
    doc = {}
    write_bool(doc, "expired", True)
    write_u64(doc, "size_in_bytes", 10)
    assert doc == {"expired": True, "size_in_bytes": 10}
    with pytest.raises(TypeMismatchError):
        write_bool(doc, "expired", 1)
    for bad in (-1, U64_MAX + 1, 2.0, True):
        with pytest.raises(TypeMismatchError):
            write_u64(doc, "size_in_bytes", bad)
    assert doc == {"expired": True, "size_in_bytes": 10}


def test_write_object_and_array():
    doc = {}
    write_object(doc, "author", {"name": "Jane"})
    write_object_array(doc, "items", [{"id": "1"}])
    assert doc == {"author": {"name": "Jane"}, "items": [{"id": "1"}]}
    with pytest.raises(TypeMismatchError):
        write_object(doc, "author", "Jane")
    with pytest.raises(TypeMismatchError):
        write_object_array(doc, "items", [{"id": "1"}, 2])


def test_remove_field():
    doc = {"title": "T"}
    assert remove_field(doc, "title") == "T"
    assert remove_field(doc, "title") is None
    assert doc == {}


def test_extension_keys():
    assert is_extension_key("_example")
    assert is_extension_key("_")
    assert not is_extension_key("example")
    assert not is_extension_key("")
    assert not is_extension_key("ex_ample")


def test_json_type_names():
    assert json_type_name(None) == "null"
    assert json_type_name(True) == "boolean"
    assert json_type_name(3) == "number"
    assert json_type_name(3.5) == "number"
    assert json_type_name("s") == "string"
    assert json_type_name([]) == "array"
    assert json_type_name({}) == "object"


def test_permitted_keys_depend_on_target_revision():
    """authors and language are only permitted from 1.1 onward."""
    v1_keys = FEED.permitted_keys(Version.V1)
    v1_1_keys = FEED.permitted_keys(Version.V1_1)
    assert v1_1_keys - v1_keys == {"authors", "language"}
    assert ITEM.permitted_keys(Version.V1_1) - ITEM.permitted_keys(Version.V1) == {"authors", "language"}
    assert HUB.permitted_keys(Version.V1) == {"type", "url"}
    assert "icon" in v1_keys


def test_schema_field_lookup():
    assert HUB.field("type").name == "hub_type"
    assert FEED.field("items").target == "Item"
    with pytest.raises(KeyError):
        FEED.field("nope")
