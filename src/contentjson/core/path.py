"""Path expressions over JSON values.

A path is a string of tokens separated by "/", "[" or "]":

    "a/0/b"    -> ("a", "0", "b")
    "a[0]/b"   -> ("a", "0", "b")
    "/a//b/"   -> ("a", "b")

Resolution walks the tokens from the root value:
    - numeric token on an array: index into the array
    - any token on an object: look up the key
    - anything else: the path does not exist

Numeric tokens only index when the current value is an array; on an object
the same token is an ordinary key ("0" addresses {"0": ...}).

Resolution never raises for a missing path. The outcome is a PathLookup
carrying either the value or the failing token.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from contentjson.constants import PATH_SPLIT_PATTERN

from .json_value import JsonValue, is_json_array, is_json_object

__all__ = ["PathLookup", "resolve_path", "tokenize_path"]

_SPLIT = re.compile(PATH_SPLIT_PATTERN)


@dataclass(frozen=True, slots=True)
class PathLookup:
    """Outcome of resolving a path against a JSON value.

    Attributes:
        value: Resolved value (None when not found; JSON null when found)
        found: True if every token resolved
        token: Token at which traversal stopped (None when found)
        position: Index of the failing token among the path tokens
    """

    value: JsonValue = None
    found: bool = True
    token: str | None = None
    position: int | None = None

    @classmethod
    def hit(cls, value: JsonValue) -> PathLookup:
        """Successful lookup."""
        return cls(value=value)

    @classmethod
    def miss(cls, token: str, position: int) -> PathLookup:
        """Failed lookup at the given token."""
        return cls(found=False, token=token, position=position)


def tokenize_path(path: str) -> tuple[str, ...]:
    """Split a path expression into tokens.

    Empty and whitespace-only segments are dropped, so "" and "/[]/"
    both tokenize to ().

    Example:
        >>> tokenize_path("a[0]/b")
        ('a', '0', 'b')
    """
    return tuple(token for token in _SPLIT.split(path) if token.strip())


def resolve_path(root: JsonValue, path: str) -> PathLookup:
    """Resolve a path expression against a JSON value.

    Args:
        root: JSON value to traverse
        path: Path expression ("a/0/b", "a[0]/b")

    Returns:
        PathLookup with the addressed value, or with found=False and the
        failing token if the path does not exist

    Example:
        >>> resolve_path({"a": [{"b": "x"}]}, "a/0/b").value
        'x'
        >>> resolve_path({"a": []}, "a/0").found
        False
    """
    current = root
    for position, token in enumerate(tokenize_path(path)):
        if token.isdecimal() and is_json_array(current):
            index = int(token)
            if index >= len(current):
                return PathLookup.miss(token, position)
            current = current[index]
        elif is_json_object(current):
            if token not in current:
                return PathLookup.miss(token, position)
            current = current[token]
        else:
            return PathLookup.miss(token, position)
    return PathLookup.hit(current)
