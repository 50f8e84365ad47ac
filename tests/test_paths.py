import pytest

from errors import StructuralError, TypeMismatchError
from paths import (
    format_path,
    get_json_value,
    get_mandatory_json_string,
    get_mandatory_json_value,
    get_optional_json_string,
    get_optional_json_value,
    json_type_name,
)


TREE = {"person": {"Name": "Churchill-4", "Id": 5589, "Parents": None, "Photo": "x.jpg"}, "status": 0}


def test_walks_nested_objects():
    assert get_json_value(TREE, "person", "Name") == "Churchill-4"
    assert get_json_value(TREE, "status", strict=True) == 0


def test_no_keys_returns_root():
    assert get_json_value(TREE) is TREE


def test_final_key_is_unchecked():
    assert get_json_value(TREE, "person", "Parents", strict=True) is None
    assert get_json_value(TREE, "person", "Missing", strict=True) is None


def test_strict_null_in_the_middle():
    with pytest.raises(StructuralError, match="found null") as excinfo:
        get_json_value(TREE, "person", "Parents", "5594", strict=True)
    assert excinfo.value.path == ("person", "Parents")


def test_strict_non_object_in_the_middle():
    with pytest.raises(StructuralError, match="expected object but found string"):
        get_json_value(TREE, "person", "Name", "First", strict=True)


def test_lenient_stops_early():
    assert get_json_value(TREE, "person", "Parents", "5594") is None
    assert get_json_value(TREE, "person", "Name", "First") is None
    assert get_json_value(None, "person") is None


def test_typed_wrappers():
    assert get_optional_json_string(TREE, "person", "Name") == "Churchill-4"
    assert get_optional_json_string(TREE, "person", "Nope") is None
    assert get_mandatory_json_string(TREE, "person", "Photo") == "x.jpg"
    assert get_mandatory_json_value(TREE, "person", "Id", expected="number") == 5589

    with pytest.raises(TypeMismatchError, match="should be string but it is number"):
        get_optional_json_string(TREE, "person", "Id")
    with pytest.raises(StructuralError, match="is null"):
        get_mandatory_json_value(TREE, "person", "Nope")


def test_json_type_name():
    assert [json_type_name(v) for v in ({}, [], "", 1, 1.5, True, None)] == [
        "object",
        "array",
        "string",
        "number",
        "number",
        "boolean",
        "null",
    ]


def test_format_path():
    assert format_path(("person", "Parents")) == '"person" -> "Parents"'
    assert get_optional_json_value(TREE, "status", expected="number") == 0
