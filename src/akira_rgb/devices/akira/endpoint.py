"""HID endpoint description, selection and discovery."""

import logging
import re
from typing import Any

import hid
from pydantic import BaseModel, ConfigDict, Field

from akira_rgb.exceptions import DeviceNotFoundError

from .model import (
    LIGHTING_COLLECTION,
    LIGHTING_INTERFACE,
    LIGHTING_USAGE,
    LIGHTING_USAGE_PAGE,
    PRODUCT_ID,
    VENDOR_ID,
)
from .transport import HidTransport

logger = logging.getLogger(__name__)

# Windows exposes each top-level collection as its own path: ...&mi_01&col06#...
_COLLECTION_PATTERN = re.compile(r"&col([0-9a-f]{2})", re.IGNORECASE)


class EndpointDescriptor(BaseModel):
    """One HID endpoint as reported by the operating system."""

    model_config = ConfigDict(frozen=True)

    path: bytes = Field(description="hidapi device path")
    interface: int = Field(description="USB interface number")
    usage: int = Field(description="HID usage")
    usage_page: int = Field(description="HID usage page")
    collection: int | None = Field(
        default=None,
        description="Top-level collection number, when the platform reports it",
    )

    @classmethod
    def from_hid_info(cls, info: dict[str, Any]) -> "EndpointDescriptor":
        """
        Create a descriptor from a ``hid.enumerate`` entry.

        Args:
            info: Device info dict from hidapi
        """
        path = info.get("path") or b""
        if isinstance(path, str):
            path = path.encode()

        collection = None
        match = _COLLECTION_PATTERN.search(path.decode(errors="replace"))
        if match:
            collection = int(match.group(1), 16)

        return cls(
            path=path,
            interface=info.get("interface_number", -1),
            usage=info.get("usage", 0),
            usage_page=info.get("usage_page", 0),
            collection=collection,
        )


def validate_endpoint(endpoint: EndpointDescriptor) -> bool:
    """
    Check whether an endpoint is the keyboard's lighting interface.

    Interface, usage, usage page and collection must all match.
    """
    return (
        endpoint.interface == LIGHTING_INTERFACE
        and endpoint.usage == LIGHTING_USAGE
        and endpoint.usage_page == LIGHTING_USAGE_PAGE
        and endpoint.collection == LIGHTING_COLLECTION
    )


def matches_lighting_interface(endpoint: EndpointDescriptor) -> bool:
    """
    Discovery check used when opening the keyboard.

    Same as validate_endpoint, except that an endpoint without a collection
    number passes: hidapi on Linux and macOS does not split endpoints by
    collection, so only Windows paths carry one.
    """
    if endpoint.collection is None:
        return validate_endpoint(endpoint.model_copy(update={"collection": LIGHTING_COLLECTION}))
    return validate_endpoint(endpoint)


def find_endpoints(vendor_id: int = VENDOR_ID, product_id: int = PRODUCT_ID) -> list[EndpointDescriptor]:
    """List all HID endpoints for a vendor/product pair."""
    endpoints = [EndpointDescriptor.from_hid_info(info) for info in hid.enumerate(vendor_id, product_id)]
    logger.debug(f"Found {len(endpoints)} endpoints for {vendor_id:04x}:{product_id:04x}")
    return endpoints


def select_endpoint(endpoints: list[EndpointDescriptor]) -> EndpointDescriptor | None:
    """Pick the first endpoint that passes matches_lighting_interface."""
    for endpoint in endpoints:
        if matches_lighting_interface(endpoint):
            return endpoint
    return None


def open_transport(vendor_id: int = VENDOR_ID, product_id: int = PRODUCT_ID) -> HidTransport:
    """
    Find the lighting interface and open a transport to it.

    Raises:
        DeviceNotFoundError: If no endpoint matches
        TransportError: If the endpoint cannot be opened
    """
    endpoints = find_endpoints(vendor_id, product_id)
    endpoint = select_endpoint(endpoints)
    if endpoint is None:
        raise DeviceNotFoundError(vendor_id, product_id, candidates=len(endpoints))

    logger.info(
        f"Using endpoint interface={endpoint.interface} "
        f"usage=0x{endpoint.usage:04x} usage_page=0x{endpoint.usage_page:04x}"
    )
    transport = HidTransport(endpoint.path)
    transport.open()
    return transport
