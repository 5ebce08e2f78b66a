"""Device-related exceptions.

This module defines exceptions for keyboard hardware errors:
- LayoutIntegrityError: The LED layout table is inconsistent (fatal)
- DeviceError: Base class for device errors
- DeviceNotFoundError: No matching HID endpoint was found
- TransportError: Writing a report to the device failed
"""

from .base import AkiraError


class LayoutIntegrityError(AkiraError):
    """The key layout table violates its uniqueness or alignment rules.

    This is a defect in the layout data, not a runtime condition.
    """

    def __init__(self, reason: str):
        """
        Initialize layout integrity error.

        Args:
            reason: Which invariant was violated
        """
        super().__init__(
            user_message=f"Keyboard layout table is invalid: {reason}",
            recoverable=False,
        )
        self.reason = reason


class DeviceError(AkiraError):
    """Keyboard device initialization or operation failed."""

    def __init__(self, user_message: str, path: str | None = None, **kwargs):
        """
        Initialize device error.

        Args:
            user_message: User-friendly error message
            path: HID path of the endpoint involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.path = path


class DeviceNotFoundError(DeviceError):
    """No HID endpoint matched the lighting interface."""

    def __init__(self, vendor_id: int, product_id: int, candidates: int = 0):
        """
        Initialize device-not-found error.

        Args:
            vendor_id: USB vendor id that was searched
            product_id: USB product id that was searched
            candidates: Number of endpoints seen for this vendor/product
        """
        user_msg = f"Keyboard {vendor_id:04x}:{product_id:04x} not found."
        if candidates:
            user_msg = (
                f"Keyboard {vendor_id:04x}:{product_id:04x} found, "
                f"but none of its {candidates} endpoints is the lighting interface."
            )
        recovery = (
            "Check that the keyboard is plugged in and that you have permission to "
            "open hidraw devices. Run 'akira-rgb devices list' to see endpoints."
        )
        super().__init__(user_message=user_msg, recoverable=True, recovery_hint=recovery)
        self.vendor_id = vendor_id
        self.product_id = product_id
        self.candidates = candidates


class TransportError(DeviceError):
    """Sending a report to the keyboard failed."""

    def __init__(self, path: str | None = None, original_error: str | None = None):
        """
        Initialize transport error.

        Args:
            path: HID path of the endpoint
            original_error: The original error message from hidapi
        """
        user_msg = "Failed to send lighting data to the keyboard."
        tech_msg = f"Feature report write to {path!r} failed"
        if original_error:
            tech_msg += f": {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            path=path,
            recoverable=True,
            recovery_hint="The keyboard may have been unplugged. Reconnect it and try again.",
        )
        self.original_error = original_error
