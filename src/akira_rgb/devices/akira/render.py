"""Render cycle: one lighting report per frame, then a terminal shutdown frame."""

import logging
from enum import Enum

from akira_rgb.devices.protocols import FrameColors, Transport
from akira_rgb.models import LightingConfiguration

from .color_source import sample, sample_shutdown
from .layout import LayoutTable
from .model import REPORT_LENGTH, SETTLE_DELAY_MS
from .packet import PacketBuilder

logger = logging.getLogger(__name__)


class RenderState(Enum):
    """Render cycle states."""

    ACTIVE = "active"  # Rendering frames
    SHUTDOWN = "shutdown"  # Final frame sent; terminal


class RenderCycle:
    """
    Two-state machine that turns lighting snapshots into device reports.

    ``render`` keeps the cycle ACTIVE and sends one frame per call.
    ``shutdown`` sends the override frame once and moves to SHUTDOWN, after
    which nothing more is transmitted for the lifetime of this cycle.

    Calls are expected to be serialized by the host; the cycle holds no
    state between frames besides its current state.
    """

    def __init__(
        self,
        layout: LayoutTable,
        transport: Transport,
        builder: PacketBuilder | None = None,
    ):
        """
        Initialize the render cycle.

        Args:
            layout: Key layout table
            transport: Report writer
            builder: Packet builder (defaults to one for ``layout``)
        """
        self.layout = layout
        self.transport = transport
        self.builder = builder or PacketBuilder(layout)
        self._state = RenderState.ACTIVE
        self._frames_sent = 0

    @property
    def state(self) -> RenderState:
        """Current state."""
        return self._state

    @property
    def frames_sent(self) -> int:
        """Number of frames transmitted by render()."""
        return self._frames_sent

    def render(self, configuration: LightingConfiguration, frame_colors: FrameColors) -> bool:
        """
        Sample, build and transmit one frame.

        Args:
            configuration: Lighting snapshot for this frame
            frame_colors: Canvas provider

        Returns:
            True if a frame was sent, False if the cycle is shut down

        Raises:
            TransportError: If the write fails (the cycle stays ACTIVE)
        """
        if self._state is RenderState.SHUTDOWN:
            logger.warning("Render requested after shutdown; ignoring")
            return False

        colors = {
            entry.slot: sample(entry.coordinate, configuration, frame_colors)
            for entry in self.layout
        }
        self._transmit(self.builder.build(colors))
        self._frames_sent += 1
        return True

    def shutdown(self, system_suspending: bool, configuration: LightingConfiguration) -> bool:
        """
        Send the final frame and enter the terminal state.

        Args:
            system_suspending: True when the OS is suspending (LEDs go dark)
            configuration: Lighting snapshot (only shutdown_color is used)

        Returns:
            True if the shutdown frame was sent, False if already shut down

        Raises:
            TransportError: If the write fails (the cycle is still SHUTDOWN)
        """
        if self._state is RenderState.SHUTDOWN:
            logger.warning("Shutdown requested twice; ignoring")
            return False

        self._state = RenderState.SHUTDOWN
        color = sample_shutdown(system_suspending, configuration)
        logger.info(
            f"Shutting down after {self._frames_sent} frames "
            f"(suspending={system_suspending}, color={color.to_hex()})"
        )
        self._transmit(self.builder.build_uniform(color))
        return True

    def _transmit(self, packet: bytes) -> None:
        self.transport.send(packet, REPORT_LENGTH)
        self.transport.pause(SETTLE_DELAY_MS)
