"""Akira RGB: per-key lighting driver for the AdamantiuN Akira keyboard."""

__version__ = "0.1.0"

# Frame loop and canvas
from .core import CanvasFrame, FrameScheduler

# Device driver
from .devices.akira import AkiraPlugin

__all__ = [
    "AkiraPlugin",
    "CanvasFrame",
    "FrameScheduler",
]
