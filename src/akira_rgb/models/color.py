"""Color model for LED control."""

import re

from pydantic import BaseModel, ConfigDict, Field

from akira_rgb.exceptions import ColorFormatError

HEX_COLOR_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The keyboard takes 8-bit channels directly, so no device conversion is
    needed. The model is frozen so colors can be shared between frames and
    used as dict keys.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a ``#RRGGBB`` string (case-insensitive, ``#`` optional).

        Args:
            value: Hex color string

        Returns:
            Color: Parsed color

        Raises:
            ColorFormatError: If the string is not exactly six hex digits

        Example:
            >>> Color.from_hex("#009bde")
            Color(r=0, g=155, b=222)
        """
        if not isinstance(value, str):
            raise ColorFormatError(value)
        match = HEX_COLOR_PATTERN.fullmatch(value)
        if match is None:
            raise ColorFormatError(value)
        r, g, b = (int(part, 16) for part in match.groups())
        return cls(r=r, g=g, b=b)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Returns:
            str: Hex color string in format '#RRGGBB'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
