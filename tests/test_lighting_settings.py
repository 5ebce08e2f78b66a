"""Tests for lighting configuration and settings updates."""

import pytest
from pydantic import ValidationError

from akira_rgb.exceptions import ConfigValidationError
from akira_rgb.models import Color, LightingConfiguration, LightingMode, LightingSettings


class TestLightingConfiguration:
    """Test the configuration snapshot model."""

    def test_defaults(self):
        configuration = LightingConfiguration()

        assert configuration.lighting_mode is LightingMode.CANVAS
        assert configuration.forced_color == Color(r=0, g=155, b=222)
        assert configuration.shutdown_color == Color.off()

    def test_host_aliases(self):
        configuration = LightingConfiguration.model_validate(
            {"LightingMode": "Forced", "forcedColor": "#ff0000", "shutdownColor": "#00ff00"}
        )

        assert configuration.lighting_mode is LightingMode.FORCED
        assert configuration.forced_color == Color(r=255, g=0, b=0)
        assert configuration.shutdown_color == Color(r=0, g=255, b=0)

    def test_rgb_sequence(self):
        configuration = LightingConfiguration(forced_color=[1, 2, 3])
        assert configuration.forced_color == Color(r=1, g=2, b=3)

    def test_invalid_color(self):
        with pytest.raises(ValidationError):
            LightingConfiguration(forced_color="blue")

    def test_color_with_trailing_newline(self):
        with pytest.raises(ValidationError):
            LightingConfiguration(forced_color="009bde\n")

    def test_invalid_mode(self):
        with pytest.raises(ValidationError):
            LightingConfiguration(lighting_mode="Rainbow")

    def test_serializes_hex(self):
        data = LightingConfiguration().model_dump(by_alias=True)

        assert data["forcedColor"] == "#009BDE"
        assert data["shutdownColor"] == "#000000"


class TestLightingSettings:
    """Test host parameter updates."""

    def test_default_current(self):
        assert LightingSettings().current == LightingConfiguration()

    def test_update_by_alias(self):
        settings = LightingSettings()

        updated = settings.update({"LightingMode": "Forced"})

        assert updated.lighting_mode is LightingMode.FORCED
        assert settings.current is updated
        assert settings.current.forced_color == Color.from_hex("#009bde")

    def test_update_by_field_name(self):
        settings = LightingSettings()
        settings.update({"shutdown_color": "#0000ff"})
        assert settings.current.shutdown_color == Color(r=0, g=0, b=255)

    def test_partial_update_keeps_other_fields(self):
        settings = LightingSettings()
        settings.update({"forcedColor": "#ff0000"})
        settings.update({"LightingMode": "Forced"})

        assert settings.current.forced_color == Color(r=255, g=0, b=0)

    def test_rejected_color_keeps_previous(self):
        settings = LightingSettings()
        settings.update({"forcedColor": "#ff0000"})
        before = settings.current

        with pytest.raises(ConfigValidationError) as exc_info:
            settings.update({"forcedColor": "#xyzxyz"})

        assert settings.current is before
        assert "color" in exc_info.value.field.lower()
        assert "hex" in exc_info.value.recovery_hint

    def test_rejected_mode_keeps_previous(self):
        settings = LightingSettings()

        with pytest.raises(ConfigValidationError) as exc_info:
            settings.update({"LightingMode": "Rainbow", "forcedColor": "#ffffff"})

        assert settings.current == LightingConfiguration()
        assert "Canvas, Forced" in exc_info.value.recovery_hint

    def test_unknown_key_rejected(self):
        settings = LightingSettings()

        with pytest.raises(ConfigValidationError) as exc_info:
            settings.update({"forcedcolor": "#ff0000"})

        assert exc_info.value.field == "forcedcolor"
        assert "unknown parameter" in exc_info.value.user_message
        assert settings.current == LightingConfiguration()

    def test_unknown_key_with_valid_keys_rejected(self):
        settings = LightingSettings()

        with pytest.raises(ConfigValidationError):
            settings.update({"LightingMode": "Forced", "brightness": 50})

        assert settings.current.lighting_mode is LightingMode.CANVAS
