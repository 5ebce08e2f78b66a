"""CLI commands for akira-rgb."""

from .config import config
from .devices import devices_group
from .info import info
from .stream import off, run

__all__ = ["config", "devices_group", "info", "off", "run"]
