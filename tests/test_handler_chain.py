"""Tests for JsonHandlerChain.

Python 3.13+.
"""

import logging

import pytest

from contentjson.constants import DEFAULT_HANDLER_ORDER
from contentjson.content import MappingContent
from contentjson.diagnostics import DiagnosticCode
from contentjson.enums import RenderStatus
from contentjson.handlers import ContentJsonHandler, JsonHandlerChain, RenderResult
from contentjson.rendering import RequestContext


class StubHandler:
    """Handler answering with its own name."""

    def __init__(self, name: str, order: float, *, accepts: bool = True) -> None:
        self.name = name
        self._order = order
        self.accepts = accepts
        self.calls = 0

    @property
    def order(self) -> float:
        return self._order

    def matches(self, context: RequestContext) -> bool:
        return self.accepts

    def render_json(self, context: RequestContext) -> RenderResult:
        self.calls += 1
        return RenderResult.ok({"handler": self.name})


class TestOrdering:
    """Handlers sorted by ascending order, stable for ties."""

    def test_sorted_ascending(self) -> None:
        """Lower order consulted first."""
        late = StubHandler("late", 200)
        early = StubHandler("early", 10)
        chain = JsonHandlerChain([late, early])
        assert chain.handlers == (early, late)
        assert list(chain) == [early, late]
        assert len(chain) == 2

    def test_ties_keep_registration_order(self) -> None:
        """Equal orders keep their given order."""
        first = StubHandler("first", DEFAULT_HANDLER_ORDER)
        second = StubHandler("second", DEFAULT_HANDLER_ORDER)
        assert JsonHandlerChain([first, second]).handlers == (first, second)


class TestDispatch:
    """First match wins."""

    def test_first_match_renders(self) -> None:
        """Only the first matching handler is called."""
        skipped = StubHandler("skipped", 1, accepts=False)
        chosen = StubHandler("chosen", 2)
        shadowed = StubHandler("shadowed", 3)
        chain = JsonHandlerChain([shadowed, chosen, skipped])
        result = chain.render_json(RequestContext(None))
        assert result.payload == {"handler": "chosen"}
        assert (skipped.calls, chosen.calls, shadowed.calls) == (0, 1, 0)

    def test_find_handler(self) -> None:
        """find_handler() returns the match or None."""
        handler = StubHandler("only", 1, accepts=False)
        chain = JsonHandlerChain([handler])
        assert chain.find_handler(RequestContext(None)) is None
        handler.accepts = True
        assert chain.find_handler(RequestContext(None)) is handler

    def test_no_match(self, caplog: pytest.LogCaptureFixture) -> None:
        """No matching handler is NOT_FOUND, logged at INFO."""
        chain = JsonHandlerChain([StubHandler("never", 1, accepts=False)])
        with caplog.at_level(logging.INFO, logger="contentjson.handlers.chain"):
            result = chain.render_json(RequestContext(None))
        assert result.status == RenderStatus.NOT_FOUND
        assert result.message == "No JSON handler for resource"
        assert result.diagnostic is not None
        assert result.diagnostic.code == DiagnosticCode.NO_MATCHING_HANDLER
        assert "NO_MATCHING_HANDLER" in caplog.text

    def test_empty_chain(self) -> None:
        """An empty chain matches nothing."""
        assert JsonHandlerChain().render_json(RequestContext(None)).status == RenderStatus.NOT_FOUND

    def test_content_handler_in_chain(self, article: MappingContent) -> None:
        """ContentJsonHandler takes structured content; a fallback takes the rest."""
        fallback = StubHandler("fallback", 1000)
        chain = JsonHandlerChain([fallback, ContentJsonHandler()])
        result = chain.render_json(RequestContext(article, {"locale": "en", "path": "title"}))
        assert result.payload == "Hello"
        assert chain.render_json(RequestContext(None)).payload == {"handler": "fallback"}
