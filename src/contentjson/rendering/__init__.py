"""Rendering package: renderer contract, built-in renderers, plugin factory.

Submodules:
    base     - ContentRenderer protocol, BaseContentRenderer, render_all_locales
    default  - DefaultContentRenderer ('default')
    flat     - FlatContentRenderer ('flat')
    registry - RendererRegistry, create_default_registry, get_shared_registry
    factory  - create_renderer
    settings - RenderSettings
    context  - RequestContext

Python 3.13+.
"""

from .base import BaseContentRenderer, ContentRenderer, render_all_locales
from .context import RequestContext
from .default import DefaultContentRenderer
from .factory import create_renderer
from .flat import FlatContentRenderer
from .registry import (
    RendererFactory,
    RendererInfo,
    RendererRegistry,
    create_default_registry,
    get_shared_registry,
)
from .settings import RenderSettings

__all__ = [
    "BaseContentRenderer",
    "ContentRenderer",
    "DefaultContentRenderer",
    "FlatContentRenderer",
    "RenderSettings",
    "RendererFactory",
    "RendererInfo",
    "RendererRegistry",
    "RequestContext",
    "create_default_registry",
    "create_renderer",
    "get_shared_registry",
    "render_all_locales",
]
