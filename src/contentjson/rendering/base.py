"""Renderer contract and shared lifecycle.

A renderer converts one locale of a content into a JSON value. Renderers are
request-scoped: the factory creates a fresh instance, configures it, binds it
to the request context, and discards it after the request.

Lifecycle (enforced by BaseContentRenderer):

    add_configuration_parameter()*  ->  init_configuration()  ->
    initialize(context)  ->  render(content, locale)*

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from contentjson.diagnostics import ErrorTemplate, RendererStateError

if TYPE_CHECKING:
    from contentjson.content.protocols import StructuredContent
    from contentjson.core.json_value import JsonValue
    from contentjson.localization.types import LocaleCode

    from .context import RequestContext

__all__ = ["BaseContentRenderer", "ContentRenderer", "render_all_locales"]


class ContentRenderer(Protocol):
    """Protocol for content-to-JSON renderers."""

    def add_configuration_parameter(self, name: str, value: str) -> None:
        """Accept one configuration parameter (called in declaration order)."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def init_configuration(self) -> None:
        """Finalize configuration (called exactly once, after all parameters)."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def initialize(self, context: RequestContext) -> None:
        """Bind the renderer to the request context (called exactly once)."""
        ...  # pragma: no cover  # Protocol stub - not executable

    def render(self, content: StructuredContent, locale: LocaleCode) -> JsonValue:
        """Render one locale of the content."""
        ...  # pragma: no cover  # Protocol stub - not executable


class BaseContentRenderer:
    """Lifecycle bookkeeping shared by the built-in renderers.

    Subclasses override ``_configure`` to accept parameters, ``_finalize``
    to validate the collected configuration, and ``_render`` to produce JSON.
    Unknown parameters are rejected by the default ``_configure``.
    """

    __slots__ = ("_configured", "_context")

    def __init__(self) -> None:
        self._configured = False
        self._context: RequestContext | None = None

    @property
    def context(self) -> RequestContext | None:
        """Request context bound by initialize(), or None."""
        return self._context

    @property
    def configured(self) -> bool:
        """True once init_configuration() has run."""
        return self._configured

    def add_configuration_parameter(self, name: str, value: str) -> None:
        if self._configured:
            raise RendererStateError(
                ErrorTemplate.renderer_already_configured(type(self).__name__)
            )
        self._configure(name, value)

    def init_configuration(self) -> None:
        if self._configured:
            raise RendererStateError(
                ErrorTemplate.renderer_already_configured(type(self).__name__)
            )
        self._finalize()
        self._configured = True

    def initialize(self, context: RequestContext) -> None:
        if self._context is not None:
            msg = f"Renderer '{type(self).__name__}' is already bound to a request"
            raise RendererStateError(msg)
        self._context = context

    def render(self, content: StructuredContent, locale: LocaleCode) -> JsonValue:
        if self._context is None:
            raise RendererStateError(
                ErrorTemplate.renderer_not_initialized(type(self).__name__)
            )
        return self._render(content, locale)

    def _configure(self, name: str, value: str) -> None:
        msg = "unknown parameter"
        raise ValueError(msg)

    def _finalize(self) -> None:
        return None

    def _render(self, content: StructuredContent, locale: LocaleCode) -> JsonValue:
        raise NotImplementedError


def render_all_locales(content: StructuredContent, renderer: ContentRenderer) -> dict[str, JsonValue]:
    """Render every locale of a content into one object.

    Keys are the locale tags in the content's natural order.

    Example:
        >>> render_all_locales(content, renderer)
        {'en': {...}, 'de': {...}}
    """
    return {str(locale): renderer.render(content, locale) for locale in content.locales}
