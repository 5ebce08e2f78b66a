"""
Lighting report builder for the AdamantiuN Akira.

Report Layout
=============

::

    [06 08 00 00 01 00 7a 01] [R0 G0 B0] [R1 G1 B1] ... [R89 G89 B89]
     └──── fixed header ────┘  └─ slot 0 ┘              └─ slot 89 ─┘
     06 = HID report id

The body holds one RGB triple per LED buffer slot, indexed by slot (not by
canvas position). Slots without a key stay zero. For the Akira this gives
8 + 3 * 90 = 278 bytes; the transport pads the report to its fixed length.

Like the layout table, this module knows nothing about canvases or lighting
modes: it takes colors already resolved per slot.
"""

from collections.abc import Mapping

import numpy as np

from akira_rgb.exceptions import LayoutIntegrityError
from akira_rgb.models import Color

from .layout import LayoutTable
from .model import PACKET_HEADER

RGB = Color | tuple[int, int, int]


class PacketBuilder:
    """Builds fixed-length lighting reports from per-slot colors."""

    def __init__(self, layout: LayoutTable, header: bytes = PACKET_HEADER):
        """
        Initialize the builder.

        Args:
            layout: Key layout table (defines which slots are written)
            header: Fixed report header
        """
        self.layout = layout
        self.header = bytes(header)

    @property
    def packet_length(self) -> int:
        """Length of every packet this builder produces."""
        return len(self.header) + 3 * self.layout.slot_count

    def build(self, colors_by_slot: Mapping[int, RGB]) -> bytes:
        """
        Build a report from colors keyed by buffer slot.

        Args:
            colors_by_slot: Color for every slot in the layout table.
                Extra slots are ignored.

        Returns:
            Header followed by the RGB buffer

        Raises:
            KeyError: If a layout slot has no color
            LayoutIntegrityError: If the packet length is not packet_length
        """
        rgb = np.zeros((self.layout.slot_count, 3), dtype=np.uint8)
        for entry in self.layout:
            rgb[entry.slot] = _channels(colors_by_slot[entry.slot])

        packet = self.header + rgb.tobytes()
        if len(packet) != self.packet_length:
            raise LayoutIntegrityError(
                f"packet is {len(packet)} bytes, expected {self.packet_length}"
            )
        return packet

    def build_uniform(self, color: RGB) -> bytes:
        """Build a report with every keyed slot set to one color."""
        return self.build({entry.slot: color for entry in self.layout})


def _channels(color: RGB) -> tuple[int, int, int]:
    if isinstance(color, Color):
        return color.to_rgb_tuple()
    r, g, b = color
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"RGB channel {channel} out of range (0-255)")
    return (r, g, b)
