"""Generic device protocols and abstractions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from akira_rgb.models import Color


class FrameColors(Protocol):
    """Protocol for the per-frame canvas color provider."""

    def color(self, x: int, y: int) -> Color:
        """
        Get the canvas color at a cell.

        Args:
            x: Column (0 = left)
            y: Row (0 = top)
        """
        ...


class Transport(Protocol):
    """Protocol for writing report packets to a device."""

    def send(self, data: bytes, expected_length: int) -> None:
        """
        Write one report.

        Args:
            data: Report bytes, starting with the report id
            expected_length: Fixed report length the device expects

        Raises:
            TransportError: If the write fails
        """
        ...

    def pause(self, milliseconds: int) -> None:
        """Block for a short, bounded settle delay."""
        ...
