"""User-editable parameter schema exposed to the host."""

from typing import Any

from akira_rgb.models import LightingMode
from akira_rgb.models.lighting import DEFAULT_FORCED_COLOR, DEFAULT_SHUTDOWN_COLOR


def controllable_parameters() -> list[dict[str, Any]]:
    """
    Parameters the host shows in the device settings page.

    The ``property`` names match the aliases of LightingConfiguration, so
    the host's current values can be passed straight to
    ``LightingSettings.update``.
    """
    return [
        {
            "property": "shutdownColor",
            "group": "lighting",
            "label": "Shutdown Color",
            "description": (
                "This color is applied to the device when the System, "
                "or the host is shutting down"
            ),
            "min": "0",
            "max": "360",
            "type": "color",
            "default": DEFAULT_SHUTDOWN_COLOR,
        },
        {
            "property": "LightingMode",
            "group": "lighting",
            "label": "Lighting Mode",
            "description": (
                "Determines where the device's RGB comes from. Canvas will pull from "
                "the active Effect, while Forced will override it to a specific color"
            ),
            "type": "combobox",
            "values": [mode.value for mode in LightingMode],
            "default": LightingMode.CANVAS.value,
        },
        {
            "property": "forcedColor",
            "group": "lighting",
            "label": "Forced Color",
            "description": "The color used when 'Forced' Lighting Mode is enabled",
            "min": "0",
            "max": "360",
            "type": "color",
            "default": DEFAULT_FORCED_COLOR,
        },
    ]
