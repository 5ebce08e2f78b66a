"""AdamantiuN Akira identification, geometry and protocol constants."""

from dataclasses import dataclass

# USB identity (SinoWealth controller)
VENDOR_ID = 0x258A
PRODUCT_ID = 0x010C

# Canvas geometry
CANVAS_WIDTH = 15
CANVAS_HEIGHT = 6
DEFAULT_POSITION = (0, 0)
DEFAULT_SCALE = 1.0

# Lighting report: header byte 0 doubles as the HID report id
PACKET_HEADER = bytes([0x06, 0x08, 0x00, 0x00, 0x01, 0x00, 0x7A, 0x01])
REPORT_LENGTH = 520
SETTLE_DELAY_MS = 1

# Vendor lighting interface
LIGHTING_INTERFACE = 1
LIGHTING_USAGE = 0x0001
LIGHTING_USAGE_PAGE = 0xFF00
LIGHTING_COLLECTION = 0x0006

# Vendor software that holds the lighting interface open
CONFLICTING_PROCESSES = ("OemDrv.exe",)


@dataclass(frozen=True)
class AkiraInfo:
    """Metadata the host shows for the keyboard."""

    device_type: str = "keyboard"
    name: str = "AdamantiuN Akira"
    publisher: str = "Rafael Julio Lemos Silva"
    documentation: str = "troubleshooting/sinowealth"
    image_url: str = "https://assets.signalrgb.com/devices/brands/leobog/keyboards/hi75.png"
    vendor_id: int = VENDOR_ID
    product_id: int = PRODUCT_ID
