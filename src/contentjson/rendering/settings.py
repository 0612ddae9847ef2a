"""Render settings declared by a content type.

A content type either declares nothing (the built-in default renderer is
used) or names a registered renderer together with string configuration
parameters. Parameter order is significant: parameters reach the renderer
in declaration order.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from contentjson.diagnostics import ErrorTemplate, RendererConfigurationError

__all__ = ["RenderSettings"]

# Keys accepted by RenderSettings.from_config().
_CONFIG_RENDERER = "renderer"
_CONFIG_PARAMETERS = "parameters"


@dataclass(frozen=True, slots=True)
class RenderSettings:
    """Rendering strategy of a content type.

    Attributes:
        strategy: Registered renderer identifier, or None for the default renderer
        parameters: Ordered (name, value) configuration pairs. A mapping is
            accepted at construction and frozen into pairs.

    Example:
        >>> settings = RenderSettings("flat", {"separator": "/"})
        >>> settings.parameters
        (('separator', '/'),)
        >>> RenderSettings().uses_default
        True
    """

    strategy: str | None = None
    parameters: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        """Freeze parameters into ordered pairs and validate types.

        Raises:
            RendererConfigurationError: If the identifier is empty or a
                parameter name/value is not a string
        """
        if self.strategy is not None and not (
            isinstance(self.strategy, str) and self.strategy.strip()
        ):
            raise RendererConfigurationError(
                ErrorTemplate.renderer_configuration_invalid(
                    f"renderer identifier must be a non-empty string, got {self.strategy!r}"
                )
            )
        raw: Any = self.parameters
        pairs = tuple(raw.items()) if isinstance(raw, Mapping) else tuple(raw)
        for pair in pairs:
            if (
                not isinstance(pair, (tuple, list))
                or len(pair) != 2
                or not all(isinstance(part, str) for part in pair)
            ):
                raise RendererConfigurationError(
                    ErrorTemplate.renderer_configuration_invalid(
                        f"parameters must be string pairs, got {pair!r}"
                    )
                )
        object.__setattr__(self, "parameters", tuple((name, value) for name, value in pairs))

    @property
    def uses_default(self) -> bool:
        """True when no strategy is declared."""
        return self.strategy is None

    def iter_parameters(self) -> Iterable[tuple[str, str]]:
        """Iterate configuration parameters in declaration order."""
        return iter(self.parameters)

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None) -> RenderSettings | None:
        """Build settings from a content-type configuration mapping.

        The configuration shape is::

            {"renderer": "flat", "parameters": {"separator": "/"}}

        Args:
            config: Configuration mapping, or None when the type declares
                no renderer

        Returns:
            RenderSettings, or None for an absent configuration

        Raises:
            RendererConfigurationError: If the mapping has unknown keys,
                a non-mapping 'parameters' entry, or non-string values
        """
        if config is None:
            return None
        if not isinstance(config, Mapping):
            raise RendererConfigurationError(
                ErrorTemplate.renderer_configuration_invalid(
                    f"expected a mapping, got {type(config).__name__}"
                )
            )
        unknown = sorted(set(config) - {_CONFIG_RENDERER, _CONFIG_PARAMETERS})
        if unknown:
            raise RendererConfigurationError(
                ErrorTemplate.renderer_configuration_invalid(f"unknown keys {unknown}")
            )
        parameters = config.get(_CONFIG_PARAMETERS)
        if parameters is None:
            parameters = {}
        if not isinstance(parameters, Mapping):
            raise RendererConfigurationError(
                ErrorTemplate.renderer_configuration_invalid("'parameters' must be a mapping")
            )
        return cls(config.get(_CONFIG_RENDERER), parameters)  # type: ignore[arg-type]
