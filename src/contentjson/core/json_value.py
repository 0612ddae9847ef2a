"""JSON value model shared by every component.

JSON values are plain Python containers: dict for objects, list for arrays,
and str/int/float/bool/None for scalars. The aliases below document that
shape; the predicates classify a value by kind for traversal.

Strings are sequences in Python but scalars in JSON. The predicates never
classify a str as an array.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import TypeIs

__all__ = [
    "JsonArray",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "empty_object",
    "is_json_array",
    "is_json_object",
    "is_json_scalar",
    "to_json_text",
]

type JsonScalar = str | int | float | bool | None
"""Leaf value of a JSON document."""

type JsonValue = JsonScalar | list[JsonValue] | dict[str, JsonValue]
"""Any JSON value (recursive)."""

type JsonObject = dict[str, JsonValue]
"""JSON object with insertion-ordered, unique keys."""

type JsonArray = list[JsonValue]
"""JSON array."""


def empty_object() -> JsonObject:
    """Return a fresh empty JSON object.

    Never fails; used as the payload of error results.
    """
    return {}


def is_json_object(value: object) -> TypeIs[Mapping[str, JsonValue]]:
    """Check if value is a JSON object (any Mapping)."""
    return isinstance(value, Mapping)


def is_json_array(value: object) -> TypeIs[Sequence[JsonValue]]:
    """Check if value is a JSON array (any non-string Sequence)."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_json_scalar(value: object) -> bool:
    """Check if value is a JSON scalar (string, number, boolean, null)."""
    return value is None or isinstance(value, (str, int, float, bool))


def to_json_text(value: JsonValue, *, indent: int | None = None) -> str:
    """Serialize a JSON value to text.

    Non-ASCII characters are emitted as-is; compact separators are used
    unless an indent is requested.

    Args:
        value: JSON value to serialize
        indent: Pretty-print indentation (None for compact output)

    Returns:
        JSON text

    Raises:
        TypeError: If value contains non-JSON types
        ValueError: If value contains NaN or infinity

    Example:
        >>> to_json_text({"a": [1, "ü"]})
        '{"a":[1,"ü"]}'
    """
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(
        value, ensure_ascii=False, allow_nan=False, indent=indent, separators=separators
    )
