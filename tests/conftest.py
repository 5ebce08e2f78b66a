"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import numpy as np
import pytest

from akira_rgb.core import CanvasFrame
from akira_rgb.devices.akira import KeyLayoutEntry, LayoutTable
from akira_rgb.models import Color, LightingConfiguration, LightingMode


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_transport():
    """Transport double that records send/pause calls in order."""
    transport = Mock()
    transport.send.return_value = None
    transport.pause.return_value = None
    return transport


@pytest.fixture
def canvas_config():
    """Default lighting: Canvas mode, black shutdown color."""
    return LightingConfiguration()


@pytest.fixture
def forced_config():
    """Forced mode with the default forced color (#009bde)."""
    return LightingConfiguration(lighting_mode=LightingMode.FORCED)


@pytest.fixture
def black_canvas():
    """15x6 canvas that is black everywhere."""
    return CanvasFrame.solid(Color.off())


@pytest.fixture
def esc_red_canvas():
    """15x6 canvas with only the top-left cell (Esc) red."""
    pixels = np.zeros((6, 15, 3), dtype=np.uint8)
    pixels[0, 0] = (255, 0, 0)
    return CanvasFrame(pixels)


@pytest.fixture
def small_layout():
    """Three keys on a 2x2 canvas with a gap at slots 2."""
    return LayoutTable(
        [
            KeyLayoutEntry("A", (0, 0), 0),
            KeyLayoutEntry("B", (1, 0), 3),
            KeyLayoutEntry("C", (0, 1), 1),
        ],
        width=2,
        height=2,
    )
