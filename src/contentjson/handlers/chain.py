"""Ordered chain of JSON handlers.

Each handler declares an ``order`` and a ``matches(context)`` predicate. The
chain consults handlers in ascending order and lets the first match render
the request. Handlers with equal order keep their registration order.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Protocol

from contentjson.diagnostics import ErrorTemplate
from contentjson.enums import RenderStatus

from .result import RenderResult

if TYPE_CHECKING:
    from contentjson.rendering.context import RequestContext

__all__ = ["JsonHandler", "JsonHandlerChain"]

logger = logging.getLogger(__name__)


class JsonHandler(Protocol):
    """Protocol for handlers taking part in a JsonHandlerChain."""

    @property
    def order(self) -> float:
        """Position in the chain (ascending)."""
        ...

    def matches(self, context: RequestContext) -> bool:
        """Check whether this handler can render the request."""
        ...

    def render_json(self, context: RequestContext) -> RenderResult:
        """Render the request."""
        ...


class JsonHandlerChain:
    """Dispatches a request to the first matching handler.

    Example:
        >>> chain = JsonHandlerChain([ContentJsonHandler()])
        >>> chain.render_json(RequestContext(content)).status
        <RenderStatus.OK: 200>
    """

    __slots__ = ("_handlers",)

    def __init__(self, handlers: Iterable[JsonHandler] = ()) -> None:
        # sorted() is stable: equal orders keep registration order
        self._handlers: tuple[JsonHandler, ...] = tuple(
            sorted(handlers, key=lambda handler: handler.order)
        )

    @property
    def handlers(self) -> tuple[JsonHandler, ...]:
        """Handlers in consultation order."""
        return self._handlers

    def find_handler(self, context: RequestContext) -> JsonHandler | None:
        """Return the first handler matching the request, or None."""
        for handler in self._handlers:
            if handler.matches(context):
                return handler
        return None

    def render_json(self, context: RequestContext) -> RenderResult:
        """Render the request with the first matching handler.

        Returns:
            The handler's result, or NOT_FOUND if no handler matches
        """
        handler = self.find_handler(context)
        if handler is None:
            diagnostic = ErrorTemplate.no_matching_handler(len(self._handlers))
            logger.info("%s", diagnostic.format_error())
            return RenderResult.failure(RenderStatus.NOT_FOUND, diagnostic)
        logger.debug("Selected handler %s", type(handler).__name__)
        return handler.render_json(context)

    def __iter__(self) -> Iterator[JsonHandler]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)
