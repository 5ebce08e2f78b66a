"""Host-side runtime: canvas providers and the frame loop."""

from .canvas import CanvasFrame
from .scheduler import FrameScheduler

__all__ = ["CanvasFrame", "FrameScheduler"]
