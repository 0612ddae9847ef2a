"""contentjson exception hierarchy with structured diagnostics.

Exceptions are reserved for SYSTEM failures: a renderer that cannot be
built, configured, or run. Expected outcomes (locale or path not found)
are returned as values and never raised.

Hierarchy:
    ContentJsonError (base)
    ├─ RendererConfigurationError (bad renderer settings or parameters)
    │  └─ UnknownRendererError (identifier not in the registry)
    ├─ RendererStateError (lifecycle method called out of order)
    └─ RenderingError (content could not be converted to JSON)

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ContentJsonError",
    "RendererConfigurationError",
    "RendererStateError",
    "RenderingError",
    "UnknownRendererError",
]


class ContentJsonError(Exception):
    """Base exception for all contentjson errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ContentJsonError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class RendererConfigurationError(ContentJsonError):
    """Renderer settings or configuration parameters are invalid.

    Raised while a renderer is being created or configured, before any
    content is rendered.
    """


class UnknownRendererError(RendererConfigurationError):
    """Renderer identifier is not registered.

    Attributes:
        name: The identifier that failed to resolve
    """

    def __init__(self, message: str | Diagnostic, *, name: str = "") -> None:
        super().__init__(message)
        self.name = name


class RendererStateError(ContentJsonError):
    """Renderer lifecycle method called out of order.

    Examples:
    - add_configuration_parameter() after init_configuration()
    - render() before initialize()
    """


class RenderingError(ContentJsonError):
    """Content value cannot be represented as JSON."""
