"""HID feature-report transport for the AdamantiuN Akira."""

import logging
import time

import hid

from akira_rgb.devices.protocols import Transport
from akira_rgb.exceptions import TransportError, wrap_transport_error

logger = logging.getLogger(__name__)


class HidTransport(Transport):
    """
    Writes lighting reports to the keyboard's vendor interface.

    Reports go out as HID feature reports. The first packet byte is the
    report id, so packets are sent as built and zero-padded to the fixed
    report length. hidapi failures are converted to TransportError and are
    never retried here.
    """

    def __init__(self, path: bytes | str):
        """
        Initialize transport for one HID endpoint.

        Args:
            path: hidapi device path (from hid.enumerate)
        """
        self.path = path.encode() if isinstance(path, str) else path
        self._device = None

    @property
    def is_open(self) -> bool:
        """Whether the endpoint is open."""
        return self._device is not None

    def open(self) -> None:
        """Open the HID endpoint."""
        if self._device is not None:
            logger.warning(f"HID endpoint {self.path!r} already open")
            return

        device = hid.device()
        try:
            device.open_path(self.path)
        except (OSError, ValueError) as e:
            raise wrap_transport_error(e, self._display_path) from e

        self._device = device
        logger.info(f"Opened HID endpoint {self._display_path}")

    def close(self) -> None:
        """Close the HID endpoint."""
        if self._device is None:
            return

        self._device.close()
        self._device = None
        logger.info(f"Closed HID endpoint {self._display_path}")

    def send(self, data: bytes, expected_length: int) -> None:
        """
        Write one feature report, zero-padded to ``expected_length``.

        Raises:
            TransportError: If the endpoint is closed or the write fails
            ValueError: If ``data`` is longer than ``expected_length``
        """
        if len(data) > expected_length:
            raise ValueError(
                f"Report is {len(data)} bytes, longer than the {expected_length}-byte report"
            )
        if self._device is None:
            raise TransportError(path=self._display_path, original_error="endpoint is not open")

        report = bytes(data) + bytes(expected_length - len(data))
        try:
            written = self._device.send_feature_report(report)
        except (OSError, ValueError) as e:
            raise wrap_transport_error(e, self._display_path) from e

        if written is not None and written < expected_length:
            raise TransportError(
                path=self._display_path,
                original_error=f"wrote {written} of {expected_length} bytes",
            )

    def pause(self, milliseconds: int) -> None:
        """Sleep for the device settle delay."""
        time.sleep(milliseconds / 1000)

    @property
    def _display_path(self) -> str:
        return self.path.decode(errors="replace")

    def __enter__(self) -> "HidTransport":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
