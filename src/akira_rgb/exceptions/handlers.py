"""
Centralized error handling utilities.

Errors are translated once per layer:

1. **Low level** (hidapi, file I/O, Pydantic) raises standard exceptions.
2. **Device/config layer** converts them into AkiraError subclasses with
   user-facing messages and recovery hints (``wrap_*`` helpers below).
3. **CLI** shows ``user_message`` and ``recovery_hint`` and logs the
   technical message (``format_error_for_display``).

## Quick Reference

| Scenario | Use This |
|----------|----------|
| Pydantic rejected a config value | `raise wrap_pydantic_error(e, source) from e` |
| hidapi write failed | `raise wrap_transport_error(e, path) from e` |
| Critical section with auto-logging | `with ErrorContext("open keyboard"): ...` |
| Show an error in the CLI | `message, hint = format_error_for_display(e)` |
"""

import logging
from typing import Optional

from .base import AkiraError
from .config import ConfigFileInvalidError, ConfigValidationError
from .device import TransportError


logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("open keyboard") as ctx:
            transport.open()

        if ctx.error:
            print(f"Failed: {ctx.error}")
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, AkiraError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        return not self.re_raise


def wrap_pydantic_error(error: Exception, file_path: Optional[str] = None) -> AkiraError:
    """
    Convert Pydantic validation errors to akira-rgb exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation, if any

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path or "<input>", parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input'),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def wrap_transport_error(error: Exception, path: Optional[str] = None) -> TransportError:
    """
    Convert hidapi errors to TransportError.

    hidapi raises ValueError when the device is not open and OSError
    when the underlying write fails.

    Args:
        error: The original exception from hidapi
        path: HID path of the endpoint

    Returns:
        TransportError carrying the original message
    """
    if isinstance(error, TransportError):
        return error
    return TransportError(path=path, original_error=f"{type(error).__name__}: {error}")


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, AkiraError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
