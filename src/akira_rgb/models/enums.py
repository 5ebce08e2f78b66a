"""Enumerations for keyboard lighting."""

from enum import Enum


class LightingMode(str, Enum):
    """Where per-key colors come from each frame."""

    CANVAS = "Canvas"  # Sample the effect canvas at each key's coordinate
    FORCED = "Forced"  # Paint every key with the forced color
