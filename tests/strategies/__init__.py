"""Hypothesis strategies for contentjson property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- json_data: JSON values, object keys, addressed paths, path spellings
- content: Locale tags, available locale sets, content trees

Usage:
    from tests.strategies import json_values, addressed_paths
    from tests.strategies.content import mapping_contents, locale_spellings
"""

from .content import (
    available_locales,
    content_scalars,
    content_trees,
    locale_spellings,
    locale_tags,
    mapping_contents,
)
from .json_data import (
    addressed_paths,
    json_containers,
    json_keys,
    json_scalars,
    json_values,
    path_spellings,
)

__all__ = [
    "addressed_paths",
    "available_locales",
    "content_scalars",
    "content_trees",
    "json_containers",
    "json_keys",
    "json_scalars",
    "json_values",
    "locale_spellings",
    "locale_tags",
    "mapping_contents",
    "path_spellings",
]
