"""Data models for keyboard lighting."""

from .color import Color
from .config import AppConfig
from .enums import LightingMode
from .lighting import LightingConfiguration, LightingSettings

__all__ = [
    # Models
    "AppConfig",
    "Color",
    "LightingConfiguration",
    "LightingSettings",
    # Enums
    "LightingMode",
]
