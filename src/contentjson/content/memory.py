"""In-memory implementations of the content contracts.

Useful for tests, fixtures, and for adapting content that has already been
loaded into Python mappings by the surrounding system.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from contentjson.locale_utils import locale_key

from .protocols import ContentDefinition, ContentValue

if TYPE_CHECKING:
    from contentjson.core.json_value import JsonObject
    from contentjson.localization.types import LocaleCode

__all__ = ["MappingContent", "StaticMetadata"]


class MappingContent:
    """StructuredContent backed by a mapping of locale -> value tree.

    Locale order is the insertion order of ``values``. Locale lookups are
    case-insensitive and accept BCP-47 or POSIX spelling.

    Example:
        >>> content = MappingContent(
        ...     ContentDefinition("article"),
        ...     {"en": {"title": "Hello"}, "de": {"title": "Hallo"}},
        ... )
        >>> content.locales
        ('en', 'de')
        >>> content.has_locale("EN")
        True
    """

    __slots__ = ("_by_key", "_definition", "_values")

    def __init__(
        self,
        definition: ContentDefinition,
        values: Mapping[LocaleCode, Mapping[str, ContentValue]],
    ) -> None:
        """Initialize content.

        Args:
            definition: Content type definition
            values: Value tree per locale, in natural locale order

        Raises:
            ValueError: If two locale tags differ only in case or separator
        """
        self._definition = definition
        self._values: Mapping[LocaleCode, Mapping[str, ContentValue]] = MappingProxyType(
            dict(values)
        )
        self._by_key: dict[str, LocaleCode] = {}
        for tag in self._values:
            key = locale_key(tag)
            if key in self._by_key:
                msg = f"Duplicate locale '{tag}' (already present as '{self._by_key[key]}')"
                raise ValueError(msg)
            self._by_key[key] = tag

    @property
    def definition(self) -> ContentDefinition:
        """Content type definition."""
        return self._definition

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Available locale tags in natural order."""
        return tuple(self._values)

    def has_locale(self, locale: LocaleCode) -> bool:
        """Check whether the content holds the given locale."""
        return locale_key(locale) in self._by_key

    def get_values(self, locale: LocaleCode) -> Mapping[str, ContentValue]:
        """Return the value tree of one locale.

        Raises:
            KeyError: If the content does not hold the locale
        """
        tag = self._by_key.get(locale_key(locale))
        if tag is None:
            raise KeyError(locale)
        return self._values[tag]

    def __repr__(self) -> str:
        return f"MappingContent(type={self._definition.type_name!r}, locales={self.locales!r})"


@dataclass(frozen=True, slots=True)
class StaticMetadata:
    """ResourceMetadata with fixed values.

    Attributes:
        resource_path: Canonical path of the resource
        resource_link: Canonical link of the resource
        resource_properties: Property name -> value
        resource_attributes: Attribute JSON object
    """

    resource_path: str
    resource_link: str = ""
    resource_properties: Mapping[str, str] = field(default_factory=dict)
    resource_attributes: Mapping[str, object] = field(default_factory=dict)

    def properties(self) -> Mapping[str, str]:
        return dict(self.resource_properties)

    def attributes(self) -> JsonObject:
        return dict(self.resource_attributes)  # type: ignore[arg-type]

    def path(self) -> str:
        return self.resource_path

    def link(self) -> str:
        return self.resource_link or self.resource_path
