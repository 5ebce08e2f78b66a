"""Device infrastructure for per-key RGB keyboards."""

from .protocols import FrameColors, Transport

__all__ = [
    "FrameColors",
    "Transport",
]
