"""
Custom exception hierarchy for akira-rgb.

## Exception Hierarchy

```
AkiraError (base)
├── ConfigurationError
│   ├── ColorFormatError          (also a ValueError)
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
├── LayoutIntegrityError
└── DeviceError
    ├── DeviceNotFoundError
    └── TransportError
```

All exceptions carry `user_message`, `technical_message`, `recoverable`
and `recovery_hint`. Nothing in the render pipeline is retried locally:
configuration errors keep the previous valid configuration, transport
errors propagate to the host loop.

### Example: Bad color from the host

```python
from akira_rgb.models import Color

Color.from_hex("#12345")
# ColorFormatError: Invalid color '#12345': expected a hex color like '#009bde'
```
"""

from .base import AkiraError
from .config import (
    ColorFormatError,
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
)
from .device import DeviceError, DeviceNotFoundError, LayoutIntegrityError, TransportError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_pydantic_error,
    wrap_transport_error,
)

__all__ = [
    # Base
    "AkiraError",
    # Config
    "ColorFormatError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Device
    "DeviceError",
    "DeviceNotFoundError",
    "LayoutIntegrityError",
    "TransportError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
    "wrap_transport_error",
]
