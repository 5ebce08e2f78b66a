"""Lighting configuration supplied by the host before each frame."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer, field_validator

from akira_rgb.exceptions import ConfigValidationError, wrap_pydantic_error

from .color import Color
from .enums import LightingMode

logger = logging.getLogger(__name__)

DEFAULT_SHUTDOWN_COLOR = "#000000"
DEFAULT_FORCED_COLOR = "#009bde"


class LightingConfiguration(BaseModel):
    """
    Snapshot of the user-editable lighting parameters.

    Field aliases are the property names the host uses in its parameter
    schema (``shutdownColor``, ``LightingMode``, ``forcedColor``), so a host
    payload validates directly. Colors may be given as hex strings, RGB
    sequences or Color instances; they are stored as Color.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    lighting_mode: LightingMode = Field(
        default=LightingMode.CANVAS,
        alias="LightingMode",
        description="Canvas pulls from the active effect, Forced overrides it with one color",
    )
    forced_color: Color = Field(
        default_factory=lambda: Color.from_hex(DEFAULT_FORCED_COLOR),
        alias="forcedColor",
        description="Color used when lighting mode is Forced",
    )
    shutdown_color: Color = Field(
        default_factory=lambda: Color.from_hex(DEFAULT_SHUTDOWN_COLOR),
        alias="shutdownColor",
        description="Color applied when the host shuts down (unless the system is suspending)",
    )

    @field_validator("forced_color", "shutdown_color", mode="before")
    @classmethod
    def parse_color(cls, value: Any) -> Any:
        """Accept hex strings and (r, g, b) sequences."""
        if isinstance(value, str):
            return Color.from_hex(value)
        if isinstance(value, (list, tuple)) and len(value) == 3:
            r, g, b = value
            return {"r": r, "g": g, "b": b}
        return value

    @field_serializer("forced_color", "shutdown_color")
    def serialize_color(self, color: Color) -> str:
        """Serialize colors as hex strings."""
        return color.to_hex()


class LightingSettings:
    """
    Holds the current valid LightingConfiguration.

    The host pushes parameter edits between frames with ``update``. A
    rejected update raises and leaves the previous configuration in effect,
    so a bad value never reaches the keyboard.
    """

    def __init__(self, initial: LightingConfiguration | None = None):
        """
        Initialize settings.

        Args:
            initial: Starting configuration (defaults to LightingConfiguration())
        """
        self._current = initial or LightingConfiguration()

    @property
    def current(self) -> LightingConfiguration:
        """Configuration snapshot for the next frame."""
        return self._current

    def update(self, values: dict[str, Any]) -> LightingConfiguration:
        """
        Merge host parameter values into a new configuration.

        Keys may be host property names or field names. Keys that are not
        given keep their current values.

        Args:
            values: Parameter values from the host

        Returns:
            The new current configuration

        Raises:
            ConfigValidationError: If a key is unknown or a value is invalid
                (previous configuration is kept)
        """
        aliases = {
            field.alias: name
            for name, field in LightingConfiguration.model_fields.items()
            if field.alias
        }
        for key, value in values.items():
            if key not in aliases and key not in LightingConfiguration.model_fields:
                logger.error(f"Rejected unknown lighting parameter {key!r}")
                raise ConfigValidationError(
                    field=key,
                    value=value,
                    error_msg=f"unknown parameter (expected one of {', '.join(aliases)})",
                )
        merged: dict[str, Any] = self._current.model_dump()
        merged.update({aliases.get(key, key): value for key, value in values.items()})
        try:
            candidate = LightingConfiguration.model_validate(merged)
        except ValidationError as e:
            logger.error(f"Rejected lighting parameters {values}: {e}")
            raise wrap_pydantic_error(e) from e

        if candidate != self._current:
            logger.info(
                f"Lighting updated: mode={candidate.lighting_mode.value}, "
                f"forced={candidate.forced_color.to_hex()}, "
                f"shutdown={candidate.shutdown_color.to_hex()}"
            )
        self._current = candidate
        return candidate
