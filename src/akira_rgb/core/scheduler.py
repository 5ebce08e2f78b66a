"""Fixed-cadence frame loop that plays the lighting host's role."""

import logging
import threading
import time
from collections.abc import Callable

from akira_rgb.devices.akira import AkiraPlugin
from akira_rgb.exceptions import AkiraError

logger = logging.getLogger(__name__)


class FrameScheduler:
    """
    Drives an AkiraPlugin at a fixed frame interval.

    ``run`` initializes the plugin, renders until stopped, and then sends
    the shutdown frame exactly once. Renders are strictly sequential;
    ``stop`` is the only method safe to call from another thread.
    """

    def __init__(
        self,
        plugin: AkiraPlugin,
        frame_interval: float = 0.03,
        before_frame: Callable[[int], None] | None = None,
    ):
        """
        Initialize the scheduler.

        Args:
            plugin: Driver to render
            frame_interval: Seconds between frame starts
            before_frame: Optional hook called with the frame number before each
                render (e.g. to update the canvas or push parameter edits)
        """
        if frame_interval <= 0:
            raise ValueError("frame_interval must be positive")
        self.plugin = plugin
        self.frame_interval = frame_interval
        self.before_frame = before_frame
        self._stop_event = threading.Event()
        self._frames = 0

    @property
    def frames(self) -> int:
        """Frames rendered by the last run."""
        return self._frames

    def stop(self) -> None:
        """Request the loop to finish after the current frame."""
        self._stop_event.set()

    def run(self, max_frames: int | None = None, system_suspending: bool = False) -> int:
        """
        Render frames until stopped, interrupted or ``max_frames`` is reached.

        Args:
            max_frames: Stop after this many frames (None = run until stopped)
            system_suspending: Passed to the plugin's shutdown

        Returns:
            Number of frames rendered

        Raises:
            TransportError: If a frame cannot be sent (shutdown is still attempted)
        """
        self._frames = 0
        self._stop_event.clear()
        failed = False
        self.plugin.initialize()
        logger.info(f"Frame loop started ({self.frame_interval * 1000:.0f} ms interval)")

        try:
            while not self._stop_event.is_set():
                if max_frames is not None and self._frames >= max_frames:
                    break

                started = time.monotonic()
                if self.before_frame is not None:
                    self.before_frame(self._frames)
                self.plugin.render()
                self._frames += 1

                remaining = self.frame_interval - (time.monotonic() - started)
                if remaining > 0:
                    self._stop_event.wait(remaining)
        except KeyboardInterrupt:
            logger.info("Frame loop interrupted")
        except Exception:
            failed = True
            raise
        finally:
            logger.info(f"Frame loop finished after {self._frames} frames")
            self._send_shutdown(system_suspending, after_error=failed)

        return self._frames

    def _send_shutdown(self, system_suspending: bool, after_error: bool) -> None:
        if not after_error:
            self.plugin.shutdown(system_suspending)
            return

        # The frame error is the one the caller sees
        try:
            self.plugin.shutdown(system_suspending)
        except AkiraError as e:
            logger.error(f"Shutdown frame not sent after failed frame: {e.technical_message}")
