"""
Key layout table for the AdamantiuN Akira.

Three Coordinate Systems
========================

Every controllable key is known by three independent identifiers:

- **name**: human-readable key label ("Esc", "Left Shift", ...)
- **coordinate**: ``(x, y)`` cell on the 15 x 6 effect canvas, origin top-left
- **slot**: index of the key's RGB triple in the device's LED buffer

The LED buffer follows the keyboard's switch matrix, which is column-major
with six rows per column (``slot = column * 6 + row``). Matrix positions
with no LED are gaps in the slot range and stay zero in every report.
Canvas columns and matrix columns mostly agree; the bottom letter row is
the exception because Left Shift spans two canvas cells while occupying a
single matrix column::

    Canvas:  [Left Shift  ] [Z] [X] ...      Z at x=2
    Matrix:  col 0          col 1 col 2      Z in slot 1*6+4 = 10

The table is defined once as rows of ``(name, (x, y), slot)`` and checked
on construction: names, coordinates and slots must each be unique and every
coordinate must fall inside the canvas.
"""

import logging
from collections.abc import Iterator, Sequence
from typing import NamedTuple

from akira_rgb.exceptions import LayoutIntegrityError

from .model import CANVAS_HEIGHT, CANVAS_WIDTH

logger = logging.getLogger(__name__)

Coordinate = tuple[int, int]


class KeyLayoutEntry(NamedTuple):
    """One controllable key: label, canvas cell and LED buffer slot."""

    name: str
    coordinate: Coordinate
    slot: int


class LayoutTable:
    """
    Immutable association of key name, canvas coordinate and buffer slot.

    Iterating the table yields entries in slot order, which is the order the
    packet builder writes them. ``names()`` and ``positions()`` keep the
    declaration order the host sees.
    """

    def __init__(
        self,
        entries: Sequence[KeyLayoutEntry],
        width: int = CANVAS_WIDTH,
        height: int = CANVAS_HEIGHT,
    ):
        """
        Build and validate the table.

        Args:
            entries: Layout entries in declaration order
            width: Canvas width in cells
            height: Canvas height in cells

        Raises:
            LayoutIntegrityError: If the table is empty, a coordinate is out of
                bounds, or a name, coordinate or slot is duplicated
        """
        self._entries = tuple(KeyLayoutEntry(*entry) for entry in entries)
        self.width = width
        self.height = height
        self._validate()

        self._by_slot = {entry.slot: entry for entry in self._entries}
        self._slot_order = tuple(sorted(self._entries, key=lambda entry: entry.slot))
        logger.debug(
            f"Layout table built: {len(self._entries)} keys, {self.slot_count} slots"
        )

    @classmethod
    def from_parallel(
        cls,
        names: Sequence[str],
        positions: Sequence[Sequence[int]],
        slots: Sequence[int],
        width: int = CANVAS_WIDTH,
        height: int = CANVAS_HEIGHT,
    ) -> "LayoutTable":
        """
        Build a table from index-aligned name, position and slot sequences.

        Raises:
            LayoutIntegrityError: If the sequences differ in length or the
                resulting table is invalid
        """
        if not len(names) == len(positions) == len(slots):
            raise LayoutIntegrityError(
                f"misaligned layout arrays: {len(names)} names, "
                f"{len(positions)} positions, {len(slots)} slots"
            )
        entries = []
        for name, position, slot in zip(names, positions, slots):
            if len(position) != 2:
                raise LayoutIntegrityError(f"position for {name!r} is not an (x, y) pair")
            entries.append(KeyLayoutEntry(name, (position[0], position[1]), slot))
        return cls(entries, width=width, height=height)

    def _validate(self) -> None:
        if not self._entries:
            raise LayoutIntegrityError("table has no entries")

        seen_names: set[str] = set()
        seen_coordinates: set[Coordinate] = set()
        seen_slots: set[int] = set()

        for entry in self._entries:
            x, y = entry.coordinate
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise LayoutIntegrityError(
                    f"{entry.name!r} at {entry.coordinate} is outside the "
                    f"{self.width}x{self.height} canvas"
                )
            if entry.slot < 0:
                raise LayoutIntegrityError(f"{entry.name!r} has negative slot {entry.slot}")
            if entry.name in seen_names:
                raise LayoutIntegrityError(f"duplicate key name {entry.name!r}")
            if entry.coordinate in seen_coordinates:
                raise LayoutIntegrityError(f"duplicate coordinate {entry.coordinate}")
            if entry.slot in seen_slots:
                raise LayoutIntegrityError(f"duplicate slot {entry.slot}")

            seen_names.add(entry.name)
            seen_coordinates.add(entry.coordinate)
            seen_slots.add(entry.slot)

    def __iter__(self) -> Iterator[KeyLayoutEntry]:
        return iter(self._slot_order)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def slot_count(self) -> int:
        """Number of slots in the LED buffer (highest slot + 1)."""
        return self._slot_order[-1].slot + 1

    def lookup(self, slot: int) -> Coordinate:
        """
        Get the canvas coordinate of a buffer slot.

        Raises:
            KeyError: If no key occupies the slot
        """
        return self._by_slot[slot].coordinate

    def entry_for_slot(self, slot: int) -> KeyLayoutEntry:
        """Get the full entry for a buffer slot."""
        return self._by_slot[slot]

    def names(self) -> list[str]:
        """Key labels in declaration order."""
        return [entry.name for entry in self._entries]

    def positions(self) -> list[list[int]]:
        """Canvas coordinates in declaration order, aligned with names()."""
        return [[entry.coordinate[0], entry.coordinate[1]] for entry in self._entries]

    def slots(self) -> list[int]:
        """Buffer slots in declaration order, aligned with names()."""
        return [entry.slot for entry in self._entries]


# (name, (x, y), slot) in the order the host lists LEDs
AKIRA_KEYS: tuple[KeyLayoutEntry, ...] = tuple(KeyLayoutEntry(*row) for row in (
    # Row 0: Function row
    ("Esc", (0, 0), 0),
    ("F1", (2, 0), 12),
    ("F2", (3, 0), 18),
    ("F3", (4, 0), 24),
    ("F4", (5, 0), 30),
    ("F5", (6, 0), 36),
    ("F6", (7, 0), 42),
    ("F7", (8, 0), 48),
    ("F8", (9, 0), 54),
    ("F9", (10, 0), 60),
    ("F10", (11, 0), 66),
    ("F11", (12, 0), 72),
    ("F12", (13, 0), 78),

    # Row 1: Number row
    ("`", (0, 1), 1),
    ("1", (1, 1), 7),
    ("2", (2, 1), 13),
    ("3", (3, 1), 19),
    ("4", (4, 1), 25),
    ("5", (5, 1), 31),
    ("6", (6, 1), 37),
    ("7", (7, 1), 43),
    ("8", (8, 1), 49),
    ("9", (9, 1), 55),
    ("0", (10, 1), 61),
    ("-_", (11, 1), 67),
    ("=+", (12, 1), 73),
    ("Backspace", (13, 1), 79),
    ("Del", (14, 1), 85),

    # Row 2: Top letter row
    ("Tab", (0, 2), 2),
    ("Q", (1, 2), 8),
    ("W", (2, 2), 14),
    ("E", (3, 2), 20),
    ("R", (4, 2), 26),
    ("T", (5, 2), 32),
    ("Y", (6, 2), 38),
    ("U", (7, 2), 44),
    ("I", (8, 2), 50),
    ("O", (9, 2), 56),
    ("P", (10, 2), 62),
    ("[", (11, 2), 68),
    ("]", (12, 2), 74),
    ("\\", (13, 2), 80),
    ("Page Up", (14, 2), 86),

    # Row 3: Home row
    ("CapsLock", (0, 3), 3),
    ("A", (1, 3), 9),
    ("S", (2, 3), 15),
    ("D", (3, 3), 21),
    ("F", (4, 3), 27),
    ("G", (5, 3), 33),
    ("H", (6, 3), 39),
    ("J", (7, 3), 45),
    ("K", (8, 3), 51),
    ("L", (9, 3), 57),
    (";", (10, 3), 63),
    ("'", (11, 3), 69),
    ("Enter", (13, 3), 81),
    ("Page Down", (14, 3), 87),

    # Row 4: Bottom letter row
    ("Left Shift", (0, 4), 4),
    ("Z", (2, 4), 10),
    ("X", (3, 4), 16),
    ("C", (4, 4), 22),
    ("V", (5, 4), 28),
    ("B", (6, 4), 34),
    ("N", (7, 4), 40),
    ("M", (8, 4), 46),
    (",", (9, 4), 52),
    (".", (10, 4), 58),
    ("/", (11, 4), 64),
    ("Right Shift", (12, 4), 70),
    ("Up Arrow", (13, 4), 82),
    ("End", (14, 4), 88),

    # Row 5: Modifier row
    ("Left Ctrl", (0, 5), 5),
    ("Left Win", (1, 5), 11),
    ("Left Alt", (2, 5), 17),
    ("Space", (5, 5), 35),
    ("Right Alt", (8, 5), 53),
    ("Fn", (9, 5), 59),
    ("Right Ctrl", (10, 5), 65),
    ("Left Arrow", (12, 5), 77),
    ("Down Arrow", (13, 5), 83),
    ("Right Arrow", (14, 5), 89),
))

AKIRA_LAYOUT = LayoutTable(AKIRA_KEYS)
