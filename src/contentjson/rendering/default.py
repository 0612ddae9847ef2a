"""Built-in default renderer.

Converts a locale tree into JSON by structure:

    Mapping        -> object (keys converted with str())
    Sequence       -> array
    str/int/float/bool/None -> as-is
    Decimal        -> string (exact digits preserved)
    date/datetime  -> ISO-8601 string, or epoch milliseconds string
    ContentLink    -> {"path": ..., "link": ...}, or a plain string

Configuration parameters:
    date-format: 'iso' (default) | 'millis'
    link-format: 'object' (default) | 'path' | 'link'

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from datetime import UTC, date, datetime, time, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from contentjson.content.protocols import ContentLink
from contentjson.diagnostics import ErrorTemplate, RenderingError
from contentjson.enums import DateFormat, LinkFormat

from .base import BaseContentRenderer

if TYPE_CHECKING:
    from contentjson.content.protocols import ContentValue, StructuredContent
    from contentjson.core.json_value import JsonValue
    from contentjson.localization.types import LocaleCode

__all__ = ["DefaultContentRenderer"]

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class DefaultContentRenderer(BaseContentRenderer):
    """Structure-preserving renderer used when a type declares no strategy.

    Example:
        >>> renderer = DefaultContentRenderer()
        >>> renderer.init_configuration()
        >>> renderer.initialize(RequestContext(content))
        >>> renderer.render(content, "en")
        {'title': 'Hello', 'tags': ['a', 'b']}
    """

    __slots__ = ("_date_format", "_link_format")

    def __init__(self) -> None:
        super().__init__()
        self._date_format = DateFormat.ISO
        self._link_format = LinkFormat.OBJECT

    @property
    def date_format(self) -> DateFormat:
        return self._date_format

    @property
    def link_format(self) -> LinkFormat:
        return self._link_format

    def _configure(self, name: str, value: str) -> None:
        match name:
            case "date-format":
                self._date_format = DateFormat(value.strip().lower())
            case "link-format":
                self._link_format = LinkFormat(value.strip().lower())
            case _:
                super()._configure(name, value)

    def _render(self, content: StructuredContent, locale: LocaleCode) -> JsonValue:
        logger.debug("Rendering locale %s with %s", locale, type(self).__name__)
        return self.convert(content.get_values(locale), "")

    def convert(self, value: ContentValue, location: str) -> JsonValue:
        """Convert one content value (recursively) to JSON.

        Args:
            value: Content value
            location: Slash-separated position of the value, for error messages

        Raises:
            RenderingError: If the value has no JSON representation
        """
        match value:
            case None | bool() | int() | str():
                return value
            case float():
                if not math.isfinite(value):
                    raise RenderingError(ErrorTemplate.value_unsupported("float", location))
                return value
            case Decimal():
                return str(value)
            case ContentLink():
                return self.convert_link(value)
            case datetime() | date():
                return self.convert_date(value)
            case Mapping():
                return {
                    str(key): self.convert(item, f"{location}/{key}")
                    for key, item in value.items()
                }
            case Sequence() if not isinstance(value, (bytes, bytearray)):
                return [self.convert(item, f"{location}/{index}") for index, item in enumerate(value)]
            case _:
                raise RenderingError(ErrorTemplate.value_unsupported(type(value).__name__, location))

    def convert_date(self, value: date) -> str:
        """Render a date or datetime per the configured date format."""
        if self._date_format is DateFormat.ISO:
            return value.isoformat()
        if isinstance(value, datetime):
            moment = value if value.tzinfo is not None else value.replace(tzinfo=UTC)
        else:
            moment = datetime.combine(value, time.min, tzinfo=UTC)
        return str((moment - _EPOCH) // timedelta(milliseconds=1))

    def convert_link(self, link: ContentLink) -> JsonValue:
        """Render a content link per the configured link format."""
        absolute = self.context.link_for(link.target) if self.context is not None else link.target
        match self._link_format:
            case LinkFormat.PATH:
                return link.target
            case LinkFormat.LINK:
                return absolute
            case _:
                return {"path": link.target, "link": absolute}
