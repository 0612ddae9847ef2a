"""Enumerations for contentjson type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion and IntEnum
where the members map onto numeric protocol values.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class RenderStatus(IntEnum):
    """Outcome category of a render request.

    Values are the HTTP status codes a transport layer should answer with:
    int(RenderStatus.NOT_FOUND) == 404
    """

    OK = 200
    """The requested JSON value was produced."""

    BAD_REQUEST = 400
    """Invalid combination of request parameters (path without locale)."""

    NOT_FOUND = 404
    """The requested locale or path does not exist in the rendered content."""

    INTERNAL_ERROR = 500
    """Renderer construction, configuration, or rendering failed."""

    @property
    def is_success(self) -> bool:
        """True for OK."""
        return self is RenderStatus.OK


class LinkFormat(StrEnum):
    """How the default renderer emits content links.

    StrEnum provides automatic string conversion: str(LinkFormat.PATH) == "path"
    """

    OBJECT = "object"
    """Object with both the stored path and the absolute link."""

    PATH = "path"
    """The stored path as a plain string."""

    LINK = "link"
    """The absolute link as a plain string."""


class DateFormat(StrEnum):
    """How the default renderer emits dates and datetimes.

    StrEnum provides automatic string conversion: str(DateFormat.ISO) == "iso"
    """

    ISO = "iso"
    """ISO-8601 string (date.isoformat())."""

    MILLIS = "millis"
    """Milliseconds since the Unix epoch, as a string."""


__all__ = [
    "DateFormat",
    "LinkFormat",
    "RenderStatus",
]
