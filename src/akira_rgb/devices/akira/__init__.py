"""AdamantiuN Akira keyboard driver."""

from .color_source import sample, sample_shutdown
from .endpoint import (
    EndpointDescriptor,
    find_endpoints,
    matches_lighting_interface,
    open_transport,
    select_endpoint,
    validate_endpoint,
)
from .layout import AKIRA_KEYS, AKIRA_LAYOUT, KeyLayoutEntry, LayoutTable
from .model import PACKET_HEADER, REPORT_LENGTH, SETTLE_DELAY_MS, AkiraInfo
from .packet import PacketBuilder
from .plugin import AkiraPlugin
from .render import RenderCycle, RenderState
from .transport import HidTransport

__all__ = [
    "AKIRA_KEYS",
    "AKIRA_LAYOUT",
    "PACKET_HEADER",
    "REPORT_LENGTH",
    "SETTLE_DELAY_MS",
    "AkiraInfo",
    "AkiraPlugin",
    "EndpointDescriptor",
    "HidTransport",
    "KeyLayoutEntry",
    "LayoutTable",
    "PacketBuilder",
    "RenderCycle",
    "RenderState",
    "find_endpoints",
    "matches_lighting_interface",
    "open_transport",
    "sample",
    "sample_shutdown",
    "select_endpoint",
    "validate_endpoint",
]
