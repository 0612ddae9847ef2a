"""contentjson - Structured multi-locale content to JSON.

Renders structured content as a JSON document: all locales with resource
metadata, a single negotiated locale, or a single value addressed by a path
expression. The rendering strategy is chosen per content type from a closed
registry of renderers.

Public API:
    ContentJsonHandler - Request orchestrator (locale/path parameters -> RenderResult)
    JsonHandlerChain - Ordered dispatch between handlers
    RequestContext - Per-request content, parameters, and metadata
    RenderResult - JSON payload plus RenderStatus
    RenderSettings - Rendering strategy declared by a content type
    RendererRegistry - Identifier -> renderer factory mapping
    create_renderer - Renderer plugin factory
    negotiate_locale - Best available locale for a requested tag
    resolve_path - Path expression lookup in a JSON value

Exceptions:
    ContentJsonError - Base exception class
    RendererConfigurationError - Invalid renderer settings or parameters
    UnknownRendererError - Renderer identifier not registered

Submodules:
    contentjson.core - JSON value model and path resolution
    contentjson.localization - Locale negotiation
    contentjson.content - Content and metadata contracts
    contentjson.rendering - Renderers, registry, factory
    contentjson.handlers - Orchestrator and handler chain
    contentjson.diagnostics - Error types and diagnostics
"""

from .content import ContentDefinition, ContentLink, MappingContent, StaticMetadata
from .core import JsonValue, PathLookup, empty_object, resolve_path
from .diagnostics import ContentJsonError, RendererConfigurationError, UnknownRendererError
from .enums import RenderStatus
from .handlers import ContentJsonHandler, JsonHandlerChain, RenderResult
from .localization import negotiate_locale
from .rendering import (
    RendererRegistry,
    RenderSettings,
    RequestContext,
    create_default_registry,
    create_renderer,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("contentjson")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ContentDefinition",
    "ContentJsonError",
    "ContentJsonHandler",
    "ContentLink",
    "JsonHandlerChain",
    "JsonValue",
    "MappingContent",
    "PathLookup",
    "RenderResult",
    "RenderSettings",
    "RenderStatus",
    "RendererConfigurationError",
    "RendererRegistry",
    "RequestContext",
    "StaticMetadata",
    "UnknownRendererError",
    "__version__",
    "create_default_registry",
    "create_renderer",
    "empty_object",
    "negotiate_locale",
    "resolve_path",
]
