"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from contentjson.constants import (
    MESSAGE_LOCALE_NOT_FOUND,
    MESSAGE_NO_HANDLER,
    MESSAGE_PATH_NOT_FOUND,
    MESSAGE_PATH_REQUIRES_LOCALE,
    PARAM_LOCALE,
    PARAM_PATH,
)

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    Every Diagnostic is built here. Lifecycle misuse raises plain messages.
    Messages surfaced to clients for expected outcomes are fixed strings;
    request-specific context goes into the diagnostic detail, which is only
    logged.
    """

    @staticmethod
    def path_requires_locale() -> Diagnostic:
        """Path parameter given without locale parameter.

        Returns:
            Diagnostic for PATH_REQUIRES_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.PATH_REQUIRES_LOCALE,
            message=MESSAGE_PATH_REQUIRES_LOCALE,
            hint=f"Add a '{PARAM_LOCALE}' parameter or drop the '{PARAM_PATH}' parameter",
        )

    @staticmethod
    def locale_not_found(requested: str, available: tuple[str, ...]) -> Diagnostic:
        """Requested locale did not match any available locale.

        Args:
            requested: The raw locale parameter
            available: Locale tags the content offers

        Returns:
            Diagnostic for LOCALE_NOT_FOUND
        """
        offered = ", ".join(available) if available else "none"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_FOUND,
            message=MESSAGE_LOCALE_NOT_FOUND,
            detail=f"requested '{requested}', available: {offered}",
            hint="Request one of the locales listed in the full document",
        )

    @staticmethod
    def path_not_found(path: str, token: str | None, position: int | None) -> Diagnostic:
        """Path expression could not be resolved against the rendered value.

        Args:
            path: The raw path parameter
            token: Token at which traversal failed
            position: Index of the failing token

        Returns:
            Diagnostic for PATH_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.PATH_NOT_FOUND,
            message=MESSAGE_PATH_NOT_FOUND,
            detail=f"path '{path}' failed at token {position} '{token}'",
            hint="Check the path against the document rendered for the locale",
        )

    @staticmethod
    def no_matching_handler(handler_count: int) -> Diagnostic:
        """No handler in a chain accepted the request.

        Args:
            handler_count: Number of handlers consulted

        Returns:
            Diagnostic for NO_MATCHING_HANDLER
        """
        return Diagnostic(
            code=DiagnosticCode.NO_MATCHING_HANDLER,
            message=MESSAGE_NO_HANDLER,
            detail=f"{handler_count} handler(s) consulted",
        )

    @staticmethod
    def unknown_renderer(name: str, known: list[str]) -> Diagnostic:
        """Renderer identifier is not registered.

        Args:
            name: The configured identifier
            known: Registered identifiers

        Returns:
            Diagnostic for RENDERER_UNKNOWN
        """
        msg = f"Unknown renderer '{name}'"
        return Diagnostic(
            code=DiagnosticCode.RENDERER_UNKNOWN,
            message=msg,
            hint=f"Registered renderers: {', '.join(known) or 'none'}",
        )

    @staticmethod
    def renderer_parameter_invalid(renderer: str, name: str, reason: str) -> Diagnostic:
        """Renderer rejected a configuration parameter.

        Args:
            renderer: Renderer identifier or class name
            name: Parameter name
            reason: Why the parameter was rejected

        Returns:
            Diagnostic for RENDERER_PARAMETER_INVALID
        """
        msg = f"Invalid configuration parameter '{name}' for renderer '{renderer}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.RENDERER_PARAMETER_INVALID,
            message=msg,
        )

    @staticmethod
    def renderer_configuration_invalid(reason: str) -> Diagnostic:
        """Render settings of a content type are malformed.

        Args:
            reason: What is wrong with the settings

        Returns:
            Diagnostic for RENDERER_CONFIGURATION_INVALID
        """
        msg = f"Invalid renderer settings: {reason}"
        return Diagnostic(
            code=DiagnosticCode.RENDERER_CONFIGURATION_INVALID,
            message=msg,
            hint="Expected {'renderer': str, 'parameters': {str: str}}",
        )

    @staticmethod
    def renderer_already_configured(renderer: str) -> Diagnostic:
        """Configuration changed after init_configuration().

        Args:
            renderer: Renderer class name

        Returns:
            Diagnostic for RENDERER_ALREADY_CONFIGURED
        """
        msg = f"Renderer '{renderer}' configuration is already finalized"
        return Diagnostic(
            code=DiagnosticCode.RENDERER_ALREADY_CONFIGURED,
            message=msg,
        )

    @staticmethod
    def renderer_not_initialized(renderer: str) -> Diagnostic:
        """render() called before initialize().

        Args:
            renderer: Renderer class name

        Returns:
            Diagnostic for RENDERER_NOT_INITIALIZED
        """
        msg = f"Renderer '{renderer}' used before initialize()"
        return Diagnostic(
            code=DiagnosticCode.RENDERER_NOT_INITIALIZED,
            message=msg,
        )

    @staticmethod
    def value_unsupported(type_name: str, location: str) -> Diagnostic:
        """Content value has no JSON representation.

        Args:
            type_name: Python type of the value
            location: Path of the value inside the content tree

        Returns:
            Diagnostic for RENDER_VALUE_UNSUPPORTED
        """
        msg = f"Cannot render value of type '{type_name}' at '{location or '/'}'"
        return Diagnostic(
            code=DiagnosticCode.RENDER_VALUE_UNSUPPORTED,
            message=msg,
        )

    @staticmethod
    def internal_error(error: BaseException) -> Diagnostic:
        """Unexpected failure while handling a request.

        The message is the failure's own message, untransformed.

        Args:
            error: The exception that aborted the request

        Returns:
            Diagnostic for INTERNAL_ERROR
        """
        return Diagnostic(
            code=DiagnosticCode.INTERNAL_ERROR,
            message=str(error),
            detail=type(error).__name__,
        )
