"""Flat renderer: one key per leaf value.

Renders a locale tree into a single-level object whose keys are the joined
positions of the leaves:

    {"title": "Hi", "tags": ["a", "b"], "teaser": {"text": "..."}}

becomes (with the default separator '.')

    {"title": "Hi", "tags.0": "a", "tags.1": "b", "teaser.text": "..."}

Leaves are rendered exactly as the default renderer renders them. Empty
mappings and sequences have no leaves and produce no keys.

Configuration parameters:
    separator: Key separator (default '.'), must be non-empty
    date-format, link-format: as for the default renderer

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import TYPE_CHECKING

from .default import DefaultContentRenderer

if TYPE_CHECKING:
    from contentjson.content.protocols import ContentValue, StructuredContent
    from contentjson.core.json_value import JsonValue
    from contentjson.localization.types import LocaleCode

__all__ = ["FlatContentRenderer"]

DEFAULT_SEPARATOR = "."


class FlatContentRenderer(DefaultContentRenderer):
    """Renderer producing a flat key -> leaf object."""

    __slots__ = ("_separator",)

    def __init__(self) -> None:
        super().__init__()
        self._separator = DEFAULT_SEPARATOR

    @property
    def separator(self) -> str:
        return self._separator

    def _configure(self, name: str, value: str) -> None:
        if name == "separator":
            self._separator = value
        else:
            super()._configure(name, value)

    def _finalize(self) -> None:
        if not self._separator:
            msg = "separator must not be empty"
            raise ValueError(msg)

    def _render(self, content: StructuredContent, locale: LocaleCode) -> JsonValue:
        return dict(self._leaves(content.get_values(locale), ()))

    def _leaves(
        self, value: ContentValue, position: tuple[str, ...]
    ) -> Iterator[tuple[str, JsonValue]]:
        if isinstance(value, Mapping):
            for key, item in value.items():
                yield from self._leaves(item, (*position, str(key)))
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            for index, item in enumerate(value):
                yield from self._leaves(item, (*position, str(index)))
        else:
            location = "/".join(position)
            yield self._separator.join(position), self.convert(value, location)
