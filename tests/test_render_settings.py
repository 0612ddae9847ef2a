"""Tests for RenderSettings.

Covers construction from mappings and pairs, parameter order, validation,
and RenderSettings.from_config().

Python 3.13+.
"""

import pytest

from contentjson.diagnostics import DiagnosticCode, RendererConfigurationError
from contentjson.rendering import RenderSettings


class TestRenderSettingsConstruction:
    """Test RenderSettings construction and validation."""

    def test_default_is_default_renderer(self) -> None:
        """No strategy means the default renderer."""
        settings = RenderSettings()
        assert settings.uses_default
        assert settings.parameters == ()

    def test_mapping_frozen_into_ordered_pairs(self) -> None:
        """Mapping parameters become pairs in mapping order."""
        settings = RenderSettings("flat", {"z": "1", "a": "2"})
        assert settings.parameters == (("z", "1"), ("a", "2"))
        assert list(settings.iter_parameters()) == [("z", "1"), ("a", "2")]

    def test_pairs_accepted(self) -> None:
        """Pairs (including lists) accepted as parameters."""
        settings = RenderSettings("flat", [["separator", "/"]])  # type: ignore[arg-type]
        assert settings.parameters == (("separator", "/"),)

    def test_repeated_names_kept(self) -> None:
        """Pairs may repeat a name; every pair reaches the renderer."""
        settings = RenderSettings("flat", (("separator", "/"), ("separator", "-")))
        assert len(settings.parameters) == 2

    def test_hashable(self) -> None:
        """Frozen settings can be used as dict keys."""
        assert hash(RenderSettings("flat", {"separator": "/"})) == hash(
            RenderSettings("flat", (("separator", "/"),))
        )

    @pytest.mark.parametrize("strategy", ["", "   "])
    def test_blank_strategy_rejected(self, strategy: str) -> None:
        """Blank identifiers are configuration errors."""
        with pytest.raises(RendererConfigurationError) as exc_info:
            RenderSettings(strategy)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.RENDERER_CONFIGURATION_INVALID

    @pytest.mark.parametrize(
        "parameters",
        [{"separator": 1}, [("only-name",)], ["ab"], [("a", "b", "c")]],
    )
    def test_non_string_pairs_rejected(self, parameters: object) -> None:
        """Parameters must be (str, str) pairs."""
        with pytest.raises(RendererConfigurationError, match="string pairs"):
            RenderSettings("flat", parameters)  # type: ignore[arg-type]


class TestRenderSettingsFromConfig:
    """Test RenderSettings.from_config()."""

    def test_none_means_no_settings(self) -> None:
        """Absent configuration yields None."""
        assert RenderSettings.from_config(None) is None

    def test_full_config(self) -> None:
        """Renderer and parameters read from the mapping."""
        settings = RenderSettings.from_config(
            {"renderer": "flat", "parameters": {"separator": "/"}}
        )
        assert settings == RenderSettings("flat", (("separator", "/"),))

    def test_empty_config_is_default(self) -> None:
        """Empty mapping declares no strategy."""
        settings = RenderSettings.from_config({})
        assert settings is not None
        assert settings.uses_default

    def test_parameters_without_renderer(self) -> None:
        """Parameters may be present without a renderer identifier."""
        settings = RenderSettings.from_config({"parameters": {"date-format": "millis"}})
        assert settings is not None
        assert settings.uses_default
        assert settings.parameters == (("date-format", "millis"),)

    def test_unknown_keys_rejected(self) -> None:
        """Unknown keys are reported."""
        with pytest.raises(RendererConfigurationError, match="unknown keys"):
            RenderSettings.from_config({"renderer": "flat", "class": "x.Y"})

    def test_non_mapping_rejected(self) -> None:
        """A non-mapping configuration is rejected."""
        with pytest.raises(RendererConfigurationError, match="expected a mapping"):
            RenderSettings.from_config(["flat"])  # type: ignore[arg-type]

    def test_non_mapping_parameters_rejected(self) -> None:
        """'parameters' must be a mapping."""
        with pytest.raises(RendererConfigurationError, match="'parameters' must be a mapping"):
            RenderSettings.from_config({"renderer": "flat", "parameters": ["separator"]})

    @pytest.mark.parametrize("parameters", [[], "", 0, False])
    def test_falsy_non_mapping_parameters_rejected(self, parameters: object) -> None:
        """Empty non-mappings are rejected, not read as no parameters."""
        with pytest.raises(RendererConfigurationError, match="'parameters' must be a mapping"):
            RenderSettings.from_config({"renderer": "flat", "parameters": parameters})

    def test_null_parameters_mean_none(self) -> None:
        """An explicit null is the same as omitting parameters."""
        settings = RenderSettings.from_config({"renderer": "flat", "parameters": None})
        assert settings is not None
        assert settings.strategy == "flat"
        assert settings.parameters == ()
