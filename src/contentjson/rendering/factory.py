"""Renderer plugin factory.

Turns the render settings of a content type into a configured renderer that
is bound to the current request:

    1. no strategy declared      -> DefaultContentRenderer, no parameters
    2. strategy declared         -> registry.create(strategy)
    3. parameters, in order      -> add_configuration_parameter(name, value)
       then once                 -> init_configuration()
    4. then once                 -> initialize(context)

Failures are never swallowed. A ValueError or TypeError raised by a renderer
while it is being configured becomes a RendererConfigurationError (chained);
every other exception propagates unchanged.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from contentjson.diagnostics import ErrorTemplate, RendererConfigurationError

from .default import DefaultContentRenderer
from .registry import get_shared_registry

if TYPE_CHECKING:
    from .base import ContentRenderer
    from .context import RequestContext
    from .registry import RendererRegistry
    from .settings import RenderSettings

__all__ = ["create_renderer"]

logger = logging.getLogger(__name__)


def create_renderer(
    settings: RenderSettings | None,
    context: RequestContext,
    *,
    registry: RendererRegistry | None = None,
) -> ContentRenderer:
    """Create, configure, and initialize the renderer for one request.

    Args:
        settings: Render settings of the content type (None for default)
        context: Request context handed to initialize()
        registry: Registry resolving strategy identifiers (default: shared registry)

    Returns:
        Renderer ready for render()

    Raises:
        UnknownRendererError: If the strategy identifier is not registered
        RendererConfigurationError: If the renderer rejects its configuration
        RendererStateError: If the renderer's lifecycle is violated

    Example:
        >>> renderer = create_renderer(RenderSettings("flat", {"separator": "/"}), context)
        >>> renderer.render(content, "en")
        {'title': 'Hello', 'tags/0': 'a'}
    """
    renderer: ContentRenderer
    if settings is None or settings.strategy is None:
        renderer = DefaultContentRenderer()
        renderer.init_configuration()
        logger.debug("Using default renderer")
    else:
        active_registry = registry if registry is not None else get_shared_registry()
        strategy = settings.strategy
        renderer = active_registry.create(strategy)
        for name, value in settings.iter_parameters():
            try:
                renderer.add_configuration_parameter(name, value)
            except (TypeError, ValueError) as e:
                raise RendererConfigurationError(
                    ErrorTemplate.renderer_parameter_invalid(strategy, name, str(e))
                ) from e
        try:
            renderer.init_configuration()
        except (TypeError, ValueError) as e:
            raise RendererConfigurationError(
                ErrorTemplate.renderer_configuration_invalid(f"{strategy}: {e}")
            ) from e
        logger.debug(
            "Created renderer %s with %d parameter(s)", strategy, len(settings.parameters)
        )

    renderer.initialize(context)
    return renderer
