"""Tests for the render cycle state machine."""

from unittest.mock import call

import numpy as np
import pytest

from akira_rgb.core import CanvasFrame
from akira_rgb.devices.akira import AKIRA_LAYOUT, RenderCycle, RenderState
from akira_rgb.exceptions import TransportError
from akira_rgb.models import LightingConfiguration


@pytest.fixture
def cycle(mock_transport):
    """Create a render cycle over the Akira layout."""
    return RenderCycle(AKIRA_LAYOUT, mock_transport)


def sent_packets(transport) -> list[bytes]:
    return [args[0] for args, _ in transport.send.call_args_list]


class TestRender:
    """Test normal frames."""

    def test_initial_state(self, cycle):
        assert cycle.state is RenderState.ACTIVE
        assert cycle.frames_sent == 0

    def test_send_then_pause(self, cycle, mock_transport, canvas_config, black_canvas):
        """Each frame is one 520-byte report followed by a 1 ms settle delay."""
        assert cycle.render(canvas_config, black_canvas) is True

        assert mock_transport.mock_calls == [
            call.send(mock_transport.send.call_args[0][0], 520),
            call.pause(1),
        ]
        assert len(sent_packets(mock_transport)[0]) == 278

    def test_canvas_frame(self, cycle, mock_transport, canvas_config, esc_red_canvas):
        cycle.render(canvas_config, esc_red_canvas)

        packet = sent_packets(mock_transport)[0]
        assert packet[8:11] == bytes([0xFF, 0x00, 0x00])
        assert not any(packet[11:])

    def test_canvas_frame_every_key(self, cycle, mock_transport, canvas_config):
        """Each key's triple is the canvas cell at that key's coordinate."""
        pixels = np.zeros((6, 15, 3), dtype=np.uint8)
        for y in range(6):
            for x in range(15):
                pixels[y, x] = (x, y, 7)

        cycle.render(canvas_config, CanvasFrame(pixels))

        packet = sent_packets(mock_transport)[0]
        for entry in AKIRA_LAYOUT:
            x, y = entry.coordinate
            offset = 8 + 3 * entry.slot
            assert packet[offset:offset + 3] == bytes([x, y, 7]), entry.name

    def test_forced_frame(self, cycle, mock_transport, forced_config, esc_red_canvas):
        cycle.render(forced_config, esc_red_canvas)

        packet = sent_packets(mock_transport)[0]
        for slot in AKIRA_LAYOUT.slots():
            offset = 8 + 3 * slot
            assert packet[offset:offset + 3] == bytes([0, 155, 222])

    def test_frames_counted(self, cycle, canvas_config, black_canvas):
        for _ in range(3):
            cycle.render(canvas_config, black_canvas)
        assert cycle.frames_sent == 3
        assert cycle.state is RenderState.ACTIVE

    def test_transport_error_propagates(self, cycle, mock_transport, canvas_config, black_canvas):
        mock_transport.send.side_effect = TransportError(path="p", original_error="gone")

        with pytest.raises(TransportError):
            cycle.render(canvas_config, black_canvas)

        assert cycle.state is RenderState.ACTIVE
        mock_transport.pause.assert_not_called()


class TestShutdown:
    """Test the terminal shutdown frame."""

    def test_shutdown_color(self, cycle, mock_transport):
        configuration = LightingConfiguration(shutdown_color="#123456")

        assert cycle.shutdown(False, configuration) is True

        packet = sent_packets(mock_transport)[0]
        for slot in AKIRA_LAYOUT.slots():
            offset = 8 + 3 * slot
            assert packet[offset:offset + 3] == bytes([0x12, 0x34, 0x56])
        mock_transport.send.assert_called_once_with(packet, 520)
        mock_transport.pause.assert_called_once_with(1)

    def test_shutdown_suspending_is_black(self, cycle, mock_transport):
        configuration = LightingConfiguration(shutdown_color="#ffffff")

        cycle.shutdown(True, configuration)

        packet = sent_packets(mock_transport)[0]
        assert packet[:8] == bytes([0x06, 0x08, 0x00, 0x00, 0x01, 0x00, 0x7A, 0x01])
        assert not any(packet[8:])

    def test_shutdown_is_terminal(self, cycle, mock_transport, canvas_config, black_canvas):
        cycle.shutdown(False, canvas_config)
        mock_transport.reset_mock()

        assert cycle.render(canvas_config, black_canvas) is False
        assert cycle.state is RenderState.SHUTDOWN
        mock_transport.send.assert_not_called()

    def test_second_shutdown_ignored(self, cycle, mock_transport, canvas_config):
        cycle.shutdown(False, canvas_config)
        assert cycle.shutdown(True, canvas_config) is False
        assert mock_transport.send.call_count == 1

    def test_failed_shutdown_still_terminal(self, cycle, mock_transport, canvas_config, black_canvas):
        mock_transport.send.side_effect = TransportError(path="p", original_error="gone")

        with pytest.raises(TransportError):
            cycle.shutdown(False, canvas_config)

        assert cycle.state is RenderState.SHUTDOWN
        assert cycle.render(canvas_config, black_canvas) is False
