"""Result of a JSON render request.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from contentjson.core.json_value import JsonValue, empty_object, to_json_text
from contentjson.diagnostics import Diagnostic
from contentjson.enums import RenderStatus

__all__ = ["RenderResult"]


@dataclass(frozen=True, slots=True)
class RenderResult:
    """JSON payload plus outcome status.

    Error results carry an empty object payload, the client-facing message,
    and the diagnostic that produced it.

    Attributes:
        payload: Rendered JSON value (empty object for errors)
        status: Outcome category
        message: Client-facing error message (None for OK)
        diagnostic: Structured diagnostic for errors (None for OK)
    """

    payload: JsonValue = field(default_factory=empty_object)
    status: RenderStatus = RenderStatus.OK
    message: str | None = None
    diagnostic: Diagnostic | None = None

    @classmethod
    def ok(cls, payload: JsonValue) -> RenderResult:
        """Successful result."""
        return cls(payload=payload)

    @classmethod
    def failure(cls, status: RenderStatus, diagnostic: Diagnostic) -> RenderResult:
        """Error result with an empty object payload."""
        return cls(
            payload=empty_object(),
            status=status,
            message=diagnostic.message,
            diagnostic=diagnostic,
        )

    @property
    def is_success(self) -> bool:
        return self.status.is_success

    def to_json(self, *, indent: int | None = None) -> str:
        """Serialize the response body.

        OK results serialize their payload; errors serialize
        {"error": message, "status": code}.
        """
        if self.is_success:
            return to_json_text(self.payload, indent=indent)
        return to_json_text({"error": self.message, "status": int(self.status)}, indent=indent)
