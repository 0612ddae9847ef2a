"""Diagnostic system for contentjson errors.

Provides structured error diagnostics with codes, hints, and operator detail.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ContentJsonError,
    RendererConfigurationError,
    RendererStateError,
    RenderingError,
    UnknownRendererError,
)
from .templates import ErrorTemplate

__all__ = [
    "ContentJsonError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "RendererConfigurationError",
    "RendererStateError",
    "RenderingError",
    "UnknownRendererError",
]
