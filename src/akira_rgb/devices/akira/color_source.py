"""
Per-key color sourcing.

Each frame, every key's color comes from exactly one of three places:

- **Canvas mode**: the effect canvas, sampled at the key's coordinate
- **Forced mode**: the user's forced color, whatever the canvas shows
- **Shutdown**: black while the system suspends, otherwise the user's
  shutdown color; the lighting mode does not apply
"""

from akira_rgb.devices.protocols import FrameColors
from akira_rgb.models import Color, LightingConfiguration, LightingMode

from .layout import Coordinate


def sample(
    coordinate: Coordinate,
    configuration: LightingConfiguration,
    frame_colors: FrameColors,
) -> Color:
    """
    Color for one key during a normal frame.

    Args:
        coordinate: The key's canvas cell
        configuration: Lighting snapshot for this frame
        frame_colors: Canvas provider (not consulted in Forced mode)

    Returns:
        Color for the key
    """
    if configuration.lighting_mode is LightingMode.FORCED:
        return configuration.forced_color

    x, y = coordinate
    return frame_colors.color(x, y)


def sample_shutdown(system_suspending: bool, configuration: LightingConfiguration) -> Color:
    """
    Color for every key in the final shutdown frame.

    Args:
        system_suspending: True when the OS is going to sleep
        configuration: Lighting snapshot

    Returns:
        Black when suspending, otherwise the configured shutdown color
    """
    if system_suspending:
        return Color.off()
    return configuration.shutdown_color
