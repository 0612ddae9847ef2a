"""Registry mapping renderer identifiers to renderer factories.

Content types name their rendering strategy by identifier. The registry is
the closed set of strategies that may run: identifiers resolve only to
factories registered at startup, never to dynamically imported code.

Architecture:
    - RendererRegistry: identifier -> RendererInfo (factory + description)
    - create_default_registry(): fresh registry with the built-in renderers
    - get_shared_registry(): lazily created, FROZEN shared registry

Example:
    >>> registry = create_default_registry()
    >>> registry.register(MyRenderer, name="teaser")
    >>> registry.freeze()
    >>> renderer = registry.create("teaser")

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from contentjson.constants import DEFAULT_RENDERER_NAME, FLAT_RENDERER_NAME
from contentjson.diagnostics import ErrorTemplate, UnknownRendererError

from .base import ContentRenderer
from .default import DefaultContentRenderer
from .flat import FlatContentRenderer

__all__ = [
    "RendererFactory",
    "RendererInfo",
    "RendererRegistry",
    "create_default_registry",
    "get_shared_registry",
]

logger = logging.getLogger(__name__)

type RendererFactory = Callable[[], ContentRenderer]
"""Zero-argument callable returning a fresh renderer (usually the class)."""


@dataclass(frozen=True, slots=True)
class RendererInfo:
    """Registered renderer metadata.

    Attributes:
        name: Identifier used in render settings
        factory: Callable creating a fresh renderer instance
        description: Human-readable summary (defaults to the factory docstring)
    """

    name: str
    factory: RendererFactory
    description: str = ""


class RendererRegistry:
    """Manages the identifier -> renderer factory mapping.

    Supports dict-like introspection:
        - list_renderers(): List all registered identifiers
        - get_renderer_info(name): Get renderer metadata
        - __iter__: Iterate over identifiers
        - __len__: Count registered renderers
        - __contains__: Check if identifier exists (supports 'in' operator)

    A frozen registry rejects further registration. Freeze registries that
    are shared between requests.

    Example:
        >>> registry = RendererRegistry()
        >>> registry.register(DefaultContentRenderer, name="default")
        >>> "default" in registry
        True
        >>> len(registry)
        1
    """

    __slots__ = ("_frozen", "_renderers")

    def __init__(self) -> None:
        """Initialize empty renderer registry."""
        self._renderers: dict[str, RendererInfo] = {}
        self._frozen = False

    def register(
        self,
        factory: RendererFactory,
        *,
        name: str,
        description: str | None = None,
    ) -> None:
        """Register a renderer factory under an identifier.

        Args:
            factory: Zero-argument callable returning a new renderer
            name: Identifier referenced by render settings
            description: Summary for introspection (default: first docstring line)

        Raises:
            TypeError: If the registry is frozen or factory is not callable
            ValueError: If name is empty or already registered
        """
        if self._frozen:
            msg = "Cannot register renderers on a frozen registry; use copy() first"
            raise TypeError(msg)
        if not callable(factory):
            msg = f"Renderer factory must be callable, got {type(factory).__name__}"
            raise TypeError(msg)
        if not name or not name.strip():
            msg = "Renderer name must be a non-empty string"
            raise ValueError(msg)
        if name in self._renderers:
            msg = f"Renderer '{name}' is already registered"
            raise ValueError(msg)

        if description is None:
            doc = getattr(factory, "__doc__", None) or ""
            description = doc.strip().splitlines()[0] if doc.strip() else ""

        self._renderers[name] = RendererInfo(name=name, factory=factory, description=description)
        logger.debug("Registered renderer: %s", name)

    def create(self, name: str) -> ContentRenderer:
        """Create a fresh renderer instance.

        Args:
            name: Registered identifier

        Returns:
            New, unconfigured renderer

        Raises:
            UnknownRendererError: If name is not registered
        """
        info = self._renderers.get(name)
        if info is None:
            raise UnknownRendererError(
                ErrorTemplate.unknown_renderer(name, self.list_renderers()), name=name
            )
        return info.factory()

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """True if register() is disabled."""
        return self._frozen

    def has_renderer(self, name: str) -> bool:
        """Check if an identifier is registered."""
        return name in self._renderers

    def list_renderers(self) -> list[str]:
        """List registered identifiers in registration order."""
        return list(self._renderers)

    def get_renderer_info(self, name: str) -> RendererInfo | None:
        """Get renderer metadata, or None if not registered."""
        return self._renderers.get(name)

    def copy(self) -> RendererRegistry:
        """Create an unfrozen shallow copy of this registry.

        RendererInfo objects are shared; registrations on the copy do not
        affect the original.
        """
        new_registry = RendererRegistry()
        new_registry._renderers = self._renderers.copy()
        return new_registry

    def __iter__(self) -> Iterator[str]:
        return iter(self._renderers)

    def __len__(self) -> int:
        return len(self._renderers)

    def __contains__(self, name: object) -> bool:
        return name in self._renderers

    def __repr__(self) -> str:
        return f"RendererRegistry(renderers={len(self._renderers)}, frozen={self._frozen})"


def create_default_registry() -> RendererRegistry:
    """Create a new, unfrozen registry with the built-in renderers.

    Returns:
        Registry containing 'default' and 'flat'
    """
    registry = RendererRegistry()
    registry.register(DefaultContentRenderer, name=DEFAULT_RENDERER_NAME)
    registry.register(FlatContentRenderer, name=FLAT_RENDERER_NAME)
    return registry


# Module-level cached default registry shared across handlers.
# Initialized lazily on first access to avoid import-time side effects.
_SHARED_REGISTRY: RendererRegistry | None = None


def get_shared_registry() -> RendererRegistry:
    """Get the shared, frozen registry with the built-in renderers.

    Immutability:
        The returned registry is FROZEN. Calling register() on it raises
        TypeError. To add renderers, use copy() or create_default_registry().

    Returns:
        Frozen shared RendererRegistry
    """
    global _SHARED_REGISTRY  # noqa: PLW0603
    if _SHARED_REGISTRY is None:
        registry = create_default_registry()
        registry.freeze()
        _SHARED_REGISTRY = registry
    return _SHARED_REGISTRY
