"""Host-facing surface of the AdamantiuN Akira driver."""

import logging
from typing import Any

from akira_rgb.devices.protocols import FrameColors, Transport
from akira_rgb.models import LightingConfiguration, LightingSettings

from .endpoint import EndpointDescriptor, validate_endpoint
from .layout import AKIRA_LAYOUT, LayoutTable
from .model import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CONFLICTING_PROCESSES,
    DEFAULT_POSITION,
    DEFAULT_SCALE,
    AkiraInfo,
)
from .parameters import controllable_parameters
from .render import RenderCycle, RenderState

logger = logging.getLogger(__name__)


class AkiraPlugin:
    """
    The calls a lighting host makes on the keyboard driver.

    Metadata getters are read once when the host loads the driver.
    ``render`` is called once per frame and ``shutdown`` once at the end
    of the session; parameter edits arrive through ``update_parameters``
    between frames.
    """

    def __init__(
        self,
        transport: Transport,
        frame_colors: FrameColors,
        configuration: LightingConfiguration | None = None,
        layout: LayoutTable = AKIRA_LAYOUT,
    ):
        """
        Initialize the plugin.

        Args:
            transport: Report writer for the opened lighting endpoint
            frame_colors: Canvas provider sampled in Canvas mode
            configuration: Initial lighting parameters (defaults apply if None)
            layout: Key layout table
        """
        self.info = AkiraInfo()
        self.layout = layout
        self.frame_colors = frame_colors
        self.settings = LightingSettings(configuration)
        self.cycle = RenderCycle(layout, transport)

    # Identification

    def device_type(self) -> str:
        return self.info.device_type

    def name(self) -> str:
        return self.info.name

    def publisher(self) -> str:
        return self.info.publisher

    def documentation(self) -> str:
        return self.info.documentation

    def vendor_id(self) -> int:
        return self.info.vendor_id

    def product_id(self) -> int:
        return self.info.product_id

    def image_url(self) -> str:
        return self.info.image_url

    # Geometry

    def size(self) -> list[int]:
        return [CANVAS_WIDTH, CANVAS_HEIGHT]

    def default_position(self) -> list[int]:
        return list(DEFAULT_POSITION)

    def default_scale(self) -> float:
        return DEFAULT_SCALE

    def led_names(self) -> list[str]:
        """Key labels, index-aligned with led_positions()."""
        return self.layout.names()

    def led_positions(self) -> list[list[int]]:
        """Canvas cells, index-aligned with led_names()."""
        return self.layout.positions()

    # Configuration and endpoint selection

    def controllable_parameters(self) -> list[dict[str, Any]]:
        return controllable_parameters()

    def update_parameters(self, values: dict[str, Any]) -> LightingConfiguration:
        """
        Apply parameter values from the host.

        Raises:
            ConfigValidationError: If a value is invalid; the previous
                configuration stays in effect
        """
        return self.settings.update(values)

    def validate(self, endpoint: EndpointDescriptor) -> bool:
        return validate_endpoint(endpoint)

    def conflicting_processes(self) -> list[str]:
        return list(CONFLICTING_PROCESSES)

    # Lifecycle

    @property
    def is_shut_down(self) -> bool:
        return self.cycle.state is RenderState.SHUTDOWN

    def initialize(self) -> None:
        """Nothing to configure on the device before streaming."""
        logger.info(f"Initialized {self.info.name} ({len(self.layout)} keys)")

    def render(self) -> bool:
        """
        Send one frame using the current settings.

        Returns:
            True if a frame was sent
        """
        return self.cycle.render(self.settings.current, self.frame_colors)

    def shutdown(self, system_suspending: bool = False) -> bool:
        """
        Send the final frame; no frames are sent afterwards.

        Args:
            system_suspending: True when the OS is suspending
        """
        return self.cycle.shutdown(system_suspending, self.settings.current)
