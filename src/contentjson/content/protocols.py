"""Read-only contracts for content and resource metadata.

Content storage, its multi-locale tree, and resource metadata belong to the
surrounding system. The renderers and the handler only consume them through
the protocols below and never mutate what they read.

Components:
    ContentLink - Marker for an internal link inside a content tree
    ContentValue - Vocabulary of values a locale tree may contain
    ContentDefinition - Content type name and its render settings
    StructuredContent - Protocol for multi-locale content
    ResourceMetadata - Protocol for properties, attributes, path and link

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from contentjson.core.json_value import JsonObject
    from contentjson.localization.types import LocaleCode
    from contentjson.rendering.settings import RenderSettings

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Values
    "ContentLink",
    "ContentScalar",
    "ContentValue",
    # Definitions
    "ContentDefinition",
    # Protocols
    "StructuredContent",
    "ResourceMetadata",
]


@dataclass(frozen=True, slots=True)
class ContentLink:
    """Internal link stored in content.

    Renderers turn the stored target into an absolute link using the
    request context (see RequestContext.link_for).

    Attributes:
        target: Site-relative path of the link target (e.g., '/news/a.html')
    """

    target: str


type ContentScalar = str | int | float | bool | Decimal | date | datetime | ContentLink | None
"""Leaf value of a locale tree."""

type ContentValue = ContentScalar | Sequence[ContentValue] | Mapping[str, ContentValue]
"""Any value of a locale tree (recursive)."""


@dataclass(frozen=True, slots=True)
class ContentDefinition:
    """Content type definition.

    Attributes:
        type_name: Name of the content type (e.g., 'article')
        render_settings: Rendering strategy declared by the type, or None
            for the built-in default renderer
    """

    type_name: str
    render_settings: RenderSettings | None = None


@runtime_checkable
class StructuredContent(Protocol):
    """Protocol for multi-locale structured content.

    Implementations expose the locales they hold and one value tree per
    locale. Locale order is the content's natural order and is preserved
    in the 'locales' list of the full document.

    Example:
        >>> class ArticleContent:
        ...     definition = ContentDefinition("article")
        ...     locales = ("en", "de")
        ...     def has_locale(self, locale): return locale in self.locales
        ...     def get_values(self, locale): return {"title": "..."}
    """

    @property
    def definition(self) -> ContentDefinition:
        """Content type definition carrying the render settings."""
        ...

    @property
    def locales(self) -> Sequence[LocaleCode]:
        """Available locale tags in natural order."""
        ...

    def has_locale(self, locale: LocaleCode) -> bool:
        """Check whether the content holds the given locale."""
        ...

    def get_values(self, locale: LocaleCode) -> Mapping[str, ContentValue]:
        """Return the value tree of one locale.

        Raises:
            KeyError: If the content does not hold the locale
        """
        ...


@runtime_checkable
class ResourceMetadata(Protocol):
    """Protocol for resource-level metadata of the rendered resource."""

    def properties(self) -> Mapping[str, str]:
        """Resource properties (name -> value)."""
        ...

    def attributes(self) -> JsonObject:
        """Resource attributes (type, dates, size, ...) as a JSON object."""
        ...

    def path(self) -> str:
        """Canonical path of the resource."""
        ...

    def link(self) -> str:
        """Canonical link of the resource."""
        ...
