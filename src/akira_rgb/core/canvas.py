"""Canvas providers backed by NumPy arrays."""

import logging
from pathlib import Path

import numpy as np

from akira_rgb.devices.akira.model import CANVAS_HEIGHT, CANVAS_WIDTH
from akira_rgb.exceptions import ConfigurationError
from akira_rgb.models import Color

logger = logging.getLogger(__name__)


class CanvasFrame:
    """
    Effect canvas stored as a ``(height, width, 3)`` uint8 array.

    Implements the FrameColors protocol. The array is indexed ``[y, x]``
    with the origin at the top-left, matching key coordinates. The host
    may replace ``pixels`` between frames.
    """

    def __init__(self, pixels: np.ndarray):
        """
        Initialize from an RGB array.

        Args:
            pixels: Array of shape (height, width, 3); values are clipped to 0-255

        Raises:
            ValueError: If the array does not have three color channels
        """
        self.pixels = pixels

    @property
    def pixels(self) -> np.ndarray:
        """The canvas array."""
        return self._pixels

    @pixels.setter
    def pixels(self, value: np.ndarray) -> None:
        array = np.asarray(value)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Canvas must have shape (height, width, 3), got {array.shape}")
        self._pixels = np.clip(array, 0, 255).astype(np.uint8)

    @property
    def width(self) -> int:
        return self._pixels.shape[1]

    @property
    def height(self) -> int:
        return self._pixels.shape[0]

    @classmethod
    def solid(
        cls, color: Color, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT
    ) -> "CanvasFrame":
        """Create a canvas filled with one color."""
        pixels = np.empty((height, width, 3), dtype=np.uint8)
        pixels[:, :] = color.to_rgb_tuple()
        return cls(pixels)

    @classmethod
    def from_file(cls, path: Path) -> "CanvasFrame":
        """
        Load a canvas saved with ``numpy.save``.

        Raises:
            ConfigurationError: If the file cannot be read or has the wrong shape
        """
        try:
            pixels = np.load(path, allow_pickle=False)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                user_message=f"Could not load canvas from {path}",
                technical_message=f"np.load({path}) failed: {e}",
                recoverable=True,
                recovery_hint="Save the canvas with numpy.save() as a (6, 15, 3) uint8 array",
            ) from e

        try:
            canvas = cls(pixels)
        except ValueError as e:
            raise ConfigurationError(
                user_message=f"Canvas file {path} has the wrong shape",
                technical_message=str(e),
                recoverable=True,
                recovery_hint="Save the canvas with numpy.save() as a (6, 15, 3) uint8 array",
            ) from e

        logger.info(f"Loaded {canvas.width}x{canvas.height} canvas from {path}")
        return canvas

    def color(self, x: int, y: int) -> Color:
        """Get the color at a cell; cells outside the canvas are black."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return Color.off()
        r, g, b = (int(channel) for channel in self._pixels[y, x])
        return Color(r=r, g=g, b=b)
