"""Key-path lookups over parsed JSON trees."""

from collections.abc import Mapping
from typing import Any

from errors import StructuralError, TypeMismatchError


JSON_TYPES = ("object", "array", "string", "number", "boolean", "null")


def json_type_name(value: Any) -> str:
    """Name the JSON type of a value produced by ``json.loads``."""
    if value is None:
        return "null"
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def format_path(keys) -> str:
    """Format a key path like '"person" -> "Parents"'."""
    return " -> ".join(f'"{key}"' for key in keys)


def get_json_value(root: Any, *keys: str, strict: bool = False) -> Any:
    """
    Walk ``root`` one key at a time and return the value at the end of the path.

    Every step but the last must land on an object. When it doesn't, a strict
    lookup raises StructuralError naming the path walked so far, and a lenient
    one returns None. The value under the final key is returned as is.
    """
    value = root
    for depth, key in enumerate(keys):
        if not isinstance(value, Mapping):
            walked = format_path(keys[:depth]) or "<root>"
            if not strict:
                return None
            if value is None:
                raise StructuralError(f"found null at {walked}", tuple(keys[:depth]))
            raise StructuralError(
                f"expected object but found {json_type_name(value)} at {walked}: {value!r}",
                tuple(keys[:depth]),
            )
        value = value.get(key)

    return value


def _check_type(value: Any, expected: str | None, keys) -> Any:
    if expected is None or value is None:
        return value
    actual = json_type_name(value)
    if actual != expected:
        raise TypeMismatchError(
            f"value at {format_path(keys)} should be {expected} but it is {actual}"
        )
    return value


def get_optional_json_value(root: Any, *keys: str, expected: str | None = None) -> Any:
    """Lenient lookup; a missing value is None, a present one must match ``expected``."""
    return _check_type(get_json_value(root, *keys, strict=False), expected, keys)


def get_mandatory_json_value(root: Any, *keys: str, expected: str | None = None) -> Any:
    """Strict lookup of a value that must exist (and match ``expected`` if given)."""
    value = get_json_value(root, *keys, strict=True)
    if value is None:
        raise StructuralError(f"required value at {format_path(keys)} is null", tuple(keys))
    return _check_type(value, expected, keys)


def get_optional_json_string(root: Any, *keys: str) -> str | None:
    return get_optional_json_value(root, *keys, expected="string")


def get_mandatory_json_string(root: Any, *keys: str) -> str:
    return get_mandatory_json_value(root, *keys, expected="string")
