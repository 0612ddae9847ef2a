"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Request errors (invalid parameter combinations)
        2000-2999: Lookup errors (locale, path, handler not found)
        3000-3999: Renderer configuration errors
        4000-4999: Rendering errors
    """

    # Request errors (1000-1999)
    PATH_REQUIRES_LOCALE = 1001

    # Lookup errors (2000-2999)
    LOCALE_NOT_FOUND = 2001
    PATH_NOT_FOUND = 2002
    NO_MATCHING_HANDLER = 2003

    # Renderer configuration errors (3000-3999)
    RENDERER_UNKNOWN = 3001
    RENDERER_PARAMETER_INVALID = 3002
    RENDERER_ALREADY_CONFIGURED = 3003
    RENDERER_CONFIGURATION_INVALID = 3004

    # Rendering errors (4000-4999)
    RENDERER_NOT_INITIALIZED = 4001
    RENDER_VALUE_UNSUPPORTED = 4002
    INTERNAL_ERROR = 4999


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries a stable code next to the
    human-readable message so callers and tests can branch on the code while
    clients only see the message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        detail: Extra context for operators (never part of the message)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    detail: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Control characters in the message and detail are escaped so that
        user-supplied input (paths, locale tags) cannot forge log lines.

        Example output:
            error[PATH_NOT_FOUND]: Path not found
              = detail: no key 'missing' at position 0
              = help: Check the path against the rendered document

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.detail:
            lines.append(f"  = detail: {_escape(self.detail)}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters for single-line output."""
    return text.encode("unicode_escape").decode("ascii") if not text.isprintable() else text
