"""Tests for the lighting report builder."""

import pytest

from akira_rgb.devices.akira import AKIRA_LAYOUT, PACKET_HEADER, PacketBuilder
from akira_rgb.models import Color


@pytest.fixture
def builder():
    """Create a builder for the Akira layout."""
    return PacketBuilder(AKIRA_LAYOUT)


def body_triple(packet: bytes, slot: int) -> tuple[int, int, int]:
    offset = len(PACKET_HEADER) + 3 * slot
    return tuple(packet[offset:offset + 3])


class TestPacketBuilder:
    """Test report layout."""

    def test_header(self):
        assert PACKET_HEADER == bytes([0x06, 0x08, 0x00, 0x00, 0x01, 0x00, 0x7A, 0x01])

    def test_packet_length(self, builder):
        """8 header bytes + 90 slots * 3."""
        assert builder.packet_length == 278
        assert len(builder.build_uniform(Color.off())) == 278

    def test_starts_with_header(self, builder):
        packet = builder.build_uniform(Color(r=1, g=2, b=3))
        assert packet[:8] == PACKET_HEADER

    def test_esc_red(self, builder):
        """Only Esc is red: bytes 8-10 are ff 00 00 and every other byte is zero."""
        colors = {entry.slot: Color.off() for entry in AKIRA_LAYOUT}
        colors[0] = Color(r=255, g=0, b=0)

        packet = builder.build(colors)

        assert packet[8:11] == bytes([0xFF, 0x00, 0x00])
        assert not any(packet[11:])

    def test_uniform_forced_color(self, builder):
        packet = builder.build_uniform(Color.from_hex("#009bde"))

        for entry in AKIRA_LAYOUT:
            assert body_triple(packet, entry.slot) == (0, 155, 222)

    def test_gap_slots_stay_zero(self, builder):
        packet = builder.build_uniform(Color(r=255, g=255, b=255))
        keyed = set(AKIRA_LAYOUT.slots())
        gaps = [slot for slot in range(AKIRA_LAYOUT.slot_count) if slot not in keyed]

        assert len(gaps) == 9
        for slot in gaps:
            assert body_triple(packet, slot) == (0, 0, 0)

    def test_slot_order_not_declaration_order(self, builder):
        """Z (declared after Left Shift, at x=2) is written to slot 10."""
        colors = {entry.slot: Color.off() for entry in AKIRA_LAYOUT}
        colors[10] = Color(r=9, g=8, b=7)

        packet = builder.build(colors)

        assert body_triple(packet, 10) == (9, 8, 7)

    def test_accepts_tuples(self, builder):
        packet = builder.build_uniform((10, 20, 30))
        assert body_triple(packet, 0) == (10, 20, 30)

    def test_tuple_out_of_range(self, builder):
        with pytest.raises(ValueError, match="out of range"):
            builder.build_uniform((256, 0, 0))

    def test_missing_slot_color(self, builder):
        with pytest.raises(KeyError):
            builder.build({0: Color.off()})

    def test_small_layout(self, small_layout):
        builder = PacketBuilder(small_layout, header=b"\x01")
        packet = builder.build({0: (1, 1, 1), 1: (2, 2, 2), 3: (3, 3, 3)})

        assert packet == bytes([1, 1, 1, 1, 2, 2, 2, 0, 0, 0, 3, 3, 3])
