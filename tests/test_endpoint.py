"""Tests for HID endpoint selection and discovery."""

from unittest.mock import patch

import pytest

from akira_rgb.devices.akira import (
    EndpointDescriptor,
    HidTransport,
    find_endpoints,
    matches_lighting_interface,
    open_transport,
    select_endpoint,
    validate_endpoint,
)
from akira_rgb.exceptions import DeviceNotFoundError


def hid_info(path: bytes, interface: int = 1, usage: int = 0x0001, usage_page: int = 0xFF00) -> dict:
    """Build a hid.enumerate() style entry."""
    return {
        "path": path,
        "vendor_id": 0x258A,
        "product_id": 0x010C,
        "interface_number": interface,
        "usage": usage,
        "usage_page": usage_page,
    }


WINDOWS_LIGHTING_PATH = b"\\\\?\\hid#vid_258a&pid_010c&mi_01&col06#8&2a&0&0005#{4d1e55b2}"
WINDOWS_OTHER_PATH = b"\\\\?\\hid#vid_258a&pid_010c&mi_01&col02#8&2a&0&0001#{4d1e55b2}"


class TestEndpointDescriptor:
    """Test parsing enumerate entries."""

    def test_from_linux_info(self):
        endpoint = EndpointDescriptor.from_hid_info(hid_info(b"/dev/hidraw3"))

        assert endpoint.path == b"/dev/hidraw3"
        assert endpoint.interface == 1
        assert endpoint.usage == 0x0001
        assert endpoint.usage_page == 0xFF00
        assert endpoint.collection is None

    def test_collection_from_windows_path(self):
        endpoint = EndpointDescriptor.from_hid_info(hid_info(WINDOWS_LIGHTING_PATH))
        assert endpoint.collection == 0x0006

    def test_str_path(self):
        endpoint = EndpointDescriptor.from_hid_info(hid_info("/dev/hidraw3"))
        assert endpoint.path == b"/dev/hidraw3"


class TestValidateEndpoint:
    """Test the strict lighting interface predicate."""

    def test_all_four_fields_match(self):
        endpoint = EndpointDescriptor(
            path=b"p", interface=1, usage=0x0001, usage_page=0xFF00, collection=0x0006
        )
        assert validate_endpoint(endpoint)

    def test_missing_collection_rejected(self):
        endpoint = EndpointDescriptor(path=b"p", interface=1, usage=0x0001, usage_page=0xFF00)
        assert not validate_endpoint(endpoint)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"interface": 0},
            {"usage": 0x0006},
            {"usage_page": 0x0001},
            {"collection": 0x0002},
        ],
    )
    def test_wrong_fields(self, overrides):
        fields = {"path": b"p", "interface": 1, "usage": 0x0001, "usage_page": 0xFF00, "collection": 0x0006}
        fields.update(overrides)
        assert not validate_endpoint(EndpointDescriptor(**fields))

    def test_windows_paths(self):
        assert validate_endpoint(EndpointDescriptor.from_hid_info(hid_info(WINDOWS_LIGHTING_PATH)))
        assert not validate_endpoint(EndpointDescriptor.from_hid_info(hid_info(WINDOWS_OTHER_PATH)))


class TestMatchesLightingInterface:
    """Test the discovery predicate, which tolerates platforms without collections."""

    def test_linux_endpoint_without_collection(self):
        endpoint = EndpointDescriptor.from_hid_info(hid_info(b"/dev/hidraw3"))
        assert endpoint.collection is None
        assert matches_lighting_interface(endpoint)
        assert not validate_endpoint(endpoint)

    def test_linux_wrong_interface(self):
        endpoint = EndpointDescriptor.from_hid_info(hid_info(b"/dev/hidraw2", interface=0))
        assert not matches_lighting_interface(endpoint)

    def test_windows_collection_must_match(self):
        assert matches_lighting_interface(EndpointDescriptor.from_hid_info(hid_info(WINDOWS_LIGHTING_PATH)))
        assert not matches_lighting_interface(EndpointDescriptor.from_hid_info(hid_info(WINDOWS_OTHER_PATH)))


class TestDiscovery:
    """Test enumeration and opening."""

    @pytest.fixture
    def mock_enumerate(self):
        """Patch hid.enumerate in the endpoint module."""
        with patch("akira_rgb.devices.akira.endpoint.hid") as hid_module:
            yield hid_module.enumerate

    def test_find_endpoints(self, mock_enumerate):
        mock_enumerate.return_value = [
            hid_info(b"/dev/hidraw2", interface=0),
            hid_info(b"/dev/hidraw3"),
        ]

        endpoints = find_endpoints()

        mock_enumerate.assert_called_once_with(0x258A, 0x010C)
        assert [e.path for e in endpoints] == [b"/dev/hidraw2", b"/dev/hidraw3"]

    def test_select_endpoint(self, mock_enumerate):
        mock_enumerate.return_value = [
            hid_info(b"/dev/hidraw2", interface=0),
            hid_info(b"/dev/hidraw3"),
        ]
        assert select_endpoint(find_endpoints()).path == b"/dev/hidraw3"

    def test_select_none(self):
        assert select_endpoint([]) is None

    def test_open_transport(self, mock_enumerate):
        mock_enumerate.return_value = [hid_info(b"/dev/hidraw3")]

        with patch.object(HidTransport, "open") as mock_open:
            transport = open_transport()

        assert isinstance(transport, HidTransport)
        assert transport.path == b"/dev/hidraw3"
        mock_open.assert_called_once()

    def test_open_transport_no_device(self, mock_enumerate):
        mock_enumerate.return_value = []

        with pytest.raises(DeviceNotFoundError) as exc_info:
            open_transport()

        assert "not found" in exc_info.value.user_message
        assert exc_info.value.candidates == 0

    def test_open_transport_no_lighting_interface(self, mock_enumerate):
        mock_enumerate.return_value = [hid_info(b"/dev/hidraw2", interface=0)]

        with pytest.raises(DeviceNotFoundError) as exc_info:
            open_transport()

        assert exc_info.value.candidates == 1
        assert "none of its 1 endpoints" in exc_info.value.user_message
