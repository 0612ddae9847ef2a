"""Tests for diagnostics: codes, Diagnostic formatting, templates, exceptions.

Python 3.13+.
"""

import pytest

from contentjson.diagnostics import (
    ContentJsonError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    RendererConfigurationError,
    RendererStateError,
    RenderingError,
    UnknownRendererError,
)


class TestDiagnostic:
    """Test Diagnostic dataclass and format_error()."""

    def test_str_is_message(self) -> None:
        """str() gives the client-facing message."""
        diagnostic = Diagnostic(code=DiagnosticCode.PATH_NOT_FOUND, message="Path not found")
        assert str(diagnostic) == "Path not found"

    def test_format_error_full(self) -> None:
        """Detail and help lines rendered Rust-style."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.PATH_NOT_FOUND,
            message="Path not found",
            detail="no key",
            hint="check the path",
        )
        assert diagnostic.format_error() == (
            "error[PATH_NOT_FOUND]: Path not found\n  = detail: no key\n  = help: check the path"
        )

    def test_format_error_minimal(self) -> None:
        """No detail or hint, one line."""
        diagnostic = Diagnostic(code=DiagnosticCode.INTERNAL_ERROR, message="boom")
        assert diagnostic.format_error() == "error[INTERNAL_ERROR]: boom"

    def test_every_template_formats_as_error(self) -> None:
        """Template diagnostics all render with the error prefix."""
        diagnostics = [
            ErrorTemplate.path_requires_locale(),
            ErrorTemplate.locale_not_found("xx", ()),
            ErrorTemplate.path_not_found("a", "a", 0),
            ErrorTemplate.no_matching_handler(0),
            ErrorTemplate.internal_error(RuntimeError("boom")),
        ]
        for diagnostic in diagnostics:
            assert diagnostic.format_error().startswith(f"error[{diagnostic.code.name}]: ")
            assert not hasattr(diagnostic, "severity")

    def test_control_characters_escaped(self) -> None:
        """User input cannot forge extra log lines."""
        diagnostic = ErrorTemplate.locale_not_found("en\nFAKE LOG LINE", ("en",))
        formatted = diagnostic.format_error()
        assert formatted.count("\n") == 2
        assert "\\n" in formatted

    def test_frozen(self) -> None:
        """Diagnostics are immutable."""
        diagnostic = ErrorTemplate.path_requires_locale()
        with pytest.raises(AttributeError):
            diagnostic.message = "changed"  # type: ignore[misc]


class TestDiagnosticCodes:
    """Code numbering by category."""

    def test_codes_unique(self) -> None:
        """Every code has its own value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.PATH_REQUIRES_LOCALE, 1000, 1999),
            (DiagnosticCode.LOCALE_NOT_FOUND, 2000, 2999),
            (DiagnosticCode.RENDERER_UNKNOWN, 3000, 3999),
            (DiagnosticCode.RENDER_VALUE_UNSUPPORTED, 4000, 4999),
        ],
    )
    def test_category_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        """Codes fall in their category range."""
        assert low <= code.value <= high


class TestErrorTemplate:
    """Fixed client-facing messages."""

    def test_fixed_messages(self) -> None:
        """Expected outcomes have fixed messages regardless of input."""
        assert ErrorTemplate.path_requires_locale().message == (
            "path parameter requires locale parameter"
        )
        assert ErrorTemplate.locale_not_found("xx", ()).message == "Locale not found"
        assert ErrorTemplate.path_not_found("a/b", "b", 1).message == "Path not found"
        assert ErrorTemplate.no_matching_handler(0).message == "No JSON handler for resource"

    def test_locale_not_found_detail(self) -> None:
        """Requested and available locales go into the detail."""
        diagnostic = ErrorTemplate.locale_not_found("xx", ("en", "de"))
        assert diagnostic.detail == "requested 'xx', available: en, de"
        assert ErrorTemplate.locale_not_found("xx", ()).detail == "requested 'xx', available: none"

    def test_path_not_found_detail(self) -> None:
        """Failing token and position go into the detail."""
        diagnostic = ErrorTemplate.path_not_found("a/b", "b", 1)
        assert diagnostic.detail == "path 'a/b' failed at token 1 'b'"

    def test_internal_error_keeps_message(self) -> None:
        """The failure's own message is kept untransformed."""
        diagnostic = ErrorTemplate.internal_error(KeyError("x"))
        assert diagnostic.message == "'x'"
        assert diagnostic.detail == "KeyError"

    def test_value_unsupported_root_location(self) -> None:
        """Empty location shown as '/'."""
        assert ErrorTemplate.value_unsupported("set", "").message == (
            "Cannot render value of type 'set' at '/'"
        )


class TestExceptions:
    """Exception hierarchy and diagnostic attachment."""

    def test_hierarchy(self) -> None:
        """Every error is a ContentJsonError."""
        assert issubclass(UnknownRendererError, RendererConfigurationError)
        assert issubclass(RendererConfigurationError, ContentJsonError)
        assert issubclass(RendererStateError, ContentJsonError)
        assert issubclass(RenderingError, ContentJsonError)

    def test_diagnostic_attached(self) -> None:
        """Diagnostic message becomes the exception message."""
        diagnostic = ErrorTemplate.renderer_configuration_invalid("bad")
        error = RendererConfigurationError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == "Invalid renderer settings: bad"

    def test_plain_message(self) -> None:
        """Plain string messages carry no diagnostic."""
        error = RendererStateError("out of order")
        assert error.diagnostic is None
        assert str(error) == "out of order"

    def test_unknown_renderer_name(self) -> None:
        """UnknownRendererError keeps the failing identifier."""
        error = UnknownRendererError(ErrorTemplate.unknown_renderer("x", []), name="x")
        assert error.name == "x"
        assert error.diagnostic is not None
        assert error.diagnostic.hint == "Registered renderers: none"
