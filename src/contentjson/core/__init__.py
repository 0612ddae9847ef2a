"""Core JSON value model and path resolution.

This package provides the leaves every other layer depends on:

    core <- localization <- rendering <- handlers

Exports:
    JsonValue, JsonObject, JsonArray, JsonScalar: JSON value type aliases
    empty_object: Guaranteed-success empty object constructor
    PathLookup: Result of a path lookup
    resolve_path: Resolve a path expression against a JSON value
    tokenize_path: Split a path expression into tokens

Python 3.13+.
"""

from .json_value import (
    JsonArray,
    JsonObject,
    JsonScalar,
    JsonValue,
    empty_object,
    is_json_array,
    is_json_object,
    is_json_scalar,
    to_json_text,
)
from .path import PathLookup, resolve_path, tokenize_path

__all__ = [
    "JsonArray",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "PathLookup",
    "empty_object",
    "is_json_array",
    "is_json_object",
    "is_json_scalar",
    "resolve_path",
    "to_json_text",
    "tokenize_path",
]
