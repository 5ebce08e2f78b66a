"""Tests for per-key color sourcing."""

from unittest.mock import Mock

from akira_rgb.devices.akira import sample, sample_shutdown
from akira_rgb.models import Color, LightingConfiguration, LightingMode


class TestSample:
    """Test the normal-frame color source."""

    def test_canvas_mode_reads_canvas(self, canvas_config, esc_red_canvas):
        assert sample((0, 0), canvas_config, esc_red_canvas) == Color(r=255, g=0, b=0)
        assert sample((1, 0), canvas_config, esc_red_canvas) == Color.off()

    def test_canvas_mode_passes_coordinate(self, canvas_config):
        frame_colors = Mock()
        frame_colors.color.return_value = Color(r=1, g=2, b=3)

        assert sample((13, 4), canvas_config, frame_colors) == Color(r=1, g=2, b=3)
        frame_colors.color.assert_called_once_with(13, 4)

    def test_forced_mode_ignores_canvas(self, forced_config):
        frame_colors = Mock()

        color = sample((0, 0), forced_config, frame_colors)

        assert color == Color.from_hex("#009bde")
        frame_colors.color.assert_not_called()

    def test_forced_mode_uses_configured_color(self):
        configuration = LightingConfiguration(
            lighting_mode=LightingMode.FORCED, forced_color="#ff00ff"
        )
        assert sample((5, 5), configuration, Mock()) == Color(r=255, g=0, b=255)


class TestSampleShutdown:
    """Test the shutdown color source."""

    def test_suspending_is_black(self):
        configuration = LightingConfiguration(shutdown_color="#ffffff")
        assert sample_shutdown(True, configuration) == Color.off()

    def test_not_suspending_uses_shutdown_color(self):
        configuration = LightingConfiguration(shutdown_color="#112233")
        assert sample_shutdown(False, configuration) == Color(r=0x11, g=0x22, b=0x33)

    def test_lighting_mode_does_not_apply(self):
        configuration = LightingConfiguration(
            lighting_mode=LightingMode.FORCED,
            forced_color="#00ff00",
            shutdown_color="#0000ff",
        )
        assert sample_shutdown(False, configuration) == Color(r=0, g=0, b=255)
