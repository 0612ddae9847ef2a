"""Structured content to JSON handler.

Renders a structured content as a whole, one locale of it, or one value
inside one locale:

    (no parameters)       -> every locale plus resource metadata
    locale=en             -> the 'en' rendering
    locale=en&path=a/0/b  -> the value at a/0/b of the 'en' rendering
    path=a/0/b            -> 400, a path needs a locale

Request states:

    Start -> ParamsValidated -> LocaleResolved -> Rendered -> PathResolved -> Done

Every outcome is mapped to a RenderResult here and nowhere else:

    usage error      -> BAD_REQUEST     (logged at INFO)
    locale/path miss -> NOT_FOUND       (logged at INFO)
    any exception    -> INTERNAL_ERROR  (logged at ERROR with traceback)

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from contentjson.constants import (
    DEFAULT_HANDLER_ORDER,
    KEY_ATTRIBUTES,
    KEY_LINK,
    KEY_LOCALES,
    KEY_PATH,
    KEY_PROPERTIES,
)
from contentjson.content.protocols import StructuredContent
from contentjson.core.json_value import JsonObject, JsonValue, empty_object
from contentjson.core.path import resolve_path
from contentjson.diagnostics import ErrorTemplate
from contentjson.enums import RenderStatus
from contentjson.localization.negotiator import negotiate_locale
from contentjson.rendering.base import render_all_locales
from contentjson.rendering.factory import create_renderer

from .result import RenderResult

if TYPE_CHECKING:
    from contentjson.rendering.base import ContentRenderer
    from contentjson.rendering.context import RequestContext
    from contentjson.rendering.registry import RendererRegistry

__all__ = ["ContentJsonHandler"]


class ContentJsonHandler:
    """Handler converting structured content to JSON.

    The handler holds no per-request state and may serve concurrent
    requests; each request gets a fresh renderer from the factory.

    Example:
        >>> handler = ContentJsonHandler()
        >>> context = RequestContext(content, {"locale": "en", "path": "title"})
        >>> result = handler.render_json(context)
        >>> result.status, result.payload
        (<RenderStatus.OK: 200>, 'Hello')

    Attributes:
        order: Position in a handler chain (ascending)
    """

    __slots__ = ("_logger", "_order", "_registry")

    def __init__(
        self,
        registry: RendererRegistry | None = None,
        *,
        order: float = DEFAULT_HANDLER_ORDER,
        logger: logging.Logger | logging.LoggerAdapter[logging.Logger] | None = None,
    ) -> None:
        """Initialize handler.

        Args:
            registry: Registry resolving renderer identifiers (default: shared
                frozen registry)
            order: Position in a handler chain
            logger: Logger receiving request outcomes (default: module logger)
        """
        self._registry = registry
        self._order = order
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    @property
    def order(self) -> float:
        return self._order

    def matches(self, context: RequestContext) -> bool:
        """Check whether the request addresses structured content."""
        return isinstance(context.content, StructuredContent)

    def render_json(self, context: RequestContext) -> RenderResult:
        """Render the requested part of the content.

        Args:
            context: Request context holding content and parameters

        Returns:
            RenderResult with status OK, BAD_REQUEST, NOT_FOUND, or INTERNAL_ERROR
        """
        locale_param = context.locale_param
        path_param = context.path_param

        if path_param is not None and locale_param is None:
            diagnostic = ErrorTemplate.path_requires_locale()
            self._logger.info("Rejected request: %s", diagnostic.message)
            return RenderResult.failure(RenderStatus.BAD_REQUEST, diagnostic)

        try:
            content = context.content
            if content is None:
                msg = "Request context holds no content"
                raise ValueError(msg)

            renderer = create_renderer(
                content.definition.render_settings, context, registry=self._registry
            )

            if locale_param is None:
                return RenderResult.ok(self._render_document(context, content, renderer))

            locale = negotiate_locale(locale_param, content.locales, has_locale=content.has_locale)
            if locale is None or not content.has_locale(locale):
                diagnostic = ErrorTemplate.locale_not_found(
                    locale_param, tuple(str(tag) for tag in content.locales)
                )
                self._logger.info("%s", diagnostic.format_error())
                return RenderResult.failure(RenderStatus.NOT_FOUND, diagnostic)

            payload: JsonValue = renderer.render(content, locale)

            if path_param is not None:
                lookup = resolve_path(payload, path_param)
                if not lookup.found:
                    diagnostic = ErrorTemplate.path_not_found(
                        path_param, lookup.token, lookup.position
                    )
                    self._logger.info("%s", diagnostic.format_error())
                    return RenderResult.failure(RenderStatus.NOT_FOUND, diagnostic)
                payload = lookup.value

            return RenderResult.ok(payload)

        except Exception as e:  # noqa: BLE001
            self._logger.error("Failed to render JSON: %s", e, exc_info=True)
            return RenderResult.failure(RenderStatus.INTERNAL_ERROR, ErrorTemplate.internal_error(e))

    def _render_document(
        self,
        context: RequestContext,
        content: StructuredContent,
        renderer: ContentRenderer,
    ) -> JsonObject:
        """Render all locales and merge the resource metadata.

        Entries are written in a fixed order (locales, properties, attributes,
        locale list, path and link); a later entry replaces an earlier one
        with the same key.
        """
        document: JsonObject = render_all_locales(content, renderer)
        metadata = context.metadata

        if metadata is not None:
            document[KEY_PROPERTIES] = {
                name: value
                for name, value in metadata.properties().items()
                if context.allows_property(name)
            }
        document[KEY_ATTRIBUTES] = metadata.attributes() if metadata is not None else empty_object()
        document[KEY_LOCALES] = [str(locale) for locale in content.locales]
        if metadata is not None:
            document[KEY_PATH] = metadata.path()
            document[KEY_LINK] = metadata.link()
        return document
