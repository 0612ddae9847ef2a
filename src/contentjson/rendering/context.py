"""Request context handed to handlers and renderers.

One RequestContext is built per request by the transport layer. It is
immutable: parameters are exposed through a read-only mapping.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from contentjson.constants import PARAM_LOCALE, PARAM_PATH

if TYPE_CHECKING:
    from contentjson.content.protocols import ResourceMetadata, StructuredContent

__all__ = ["RequestContext"]


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Ambient request state for one render.

    Attributes:
        content: Content being rendered (None for resources without content)
        parameters: Request parameters (read-only after construction)
        resource: Opaque handle of the requested resource
        metadata: Resource metadata collaborator (optional)
        link_base: Scheme and host prepended to site-relative links
            (e.g., 'https://example.org'); empty keeps links site-relative
        property_filter: Predicate deciding which properties may be exposed;
            None exposes all properties
    """

    content: StructuredContent | None
    parameters: Mapping[str, str] = field(default_factory=dict)
    resource: object = None
    metadata: ResourceMetadata | None = None
    link_base: str = ""
    property_filter: Callable[[str], bool] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def locale_param(self) -> str | None:
        """Raw 'locale' parameter, or None if absent."""
        return self.parameters.get(PARAM_LOCALE)

    @property
    def path_param(self) -> str | None:
        """Raw 'path' parameter, or None if absent."""
        return self.parameters.get(PARAM_PATH)

    def link_for(self, target: str) -> str:
        """Build the link for a site-relative target.

        Example:
            >>> RequestContext(None, link_base="https://example.org/").link_for("/a.html")
            'https://example.org/a.html'
        """
        if not self.link_base:
            return target
        return f"{self.link_base.rstrip('/')}/{target.lstrip('/')}"

    def allows_property(self, name: str) -> bool:
        """Check whether a property may be exposed in the full document."""
        return self.property_filter is None or self.property_filter(name)
