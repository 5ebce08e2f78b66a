"""Keyboard metadata command."""

import json

import click

from akira_rgb.devices.akira import AKIRA_LAYOUT, PACKET_HEADER, REPORT_LENGTH, AkiraInfo
from akira_rgb.devices.akira.model import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CONFLICTING_PROCESSES,
    DEFAULT_POSITION,
    DEFAULT_SCALE,
)
from akira_rgb.devices.akira.packet import PacketBuilder
from akira_rgb.devices.akira.parameters import controllable_parameters


@click.command(name="info")
@click.option('--json', 'as_json', is_flag=True, help='Print as JSON')
def info(as_json: bool):
    """Show keyboard identification, geometry, parameters and key layout."""
    device = AkiraInfo()
    builder = PacketBuilder(AKIRA_LAYOUT)

    if as_json:
        payload = {
            "device_type": device.device_type,
            "name": device.name,
            "publisher": device.publisher,
            "documentation": device.documentation,
            "vendor_id": device.vendor_id,
            "product_id": device.product_id,
            "size": [CANVAS_WIDTH, CANVAS_HEIGHT],
            "default_position": list(DEFAULT_POSITION),
            "default_scale": DEFAULT_SCALE,
            "led_names": AKIRA_LAYOUT.names(),
            "led_positions": AKIRA_LAYOUT.positions(),
            "led_slots": AKIRA_LAYOUT.slots(),
            "parameters": controllable_parameters(),
            "conflicting_processes": list(CONFLICTING_PROCESSES),
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"{device.name} ({device.device_type}) by {device.publisher}")
    click.echo(f"  USB id:        {device.vendor_id:04x}:{device.product_id:04x}")
    click.echo(f"  Canvas:        {CANVAS_WIDTH}x{CANVAS_HEIGHT} at {list(DEFAULT_POSITION)}, scale {DEFAULT_SCALE}")
    click.echo(f"  Keys:          {len(AKIRA_LAYOUT)} ({AKIRA_LAYOUT.slot_count} buffer slots)")
    click.echo(f"  Report:        {PACKET_HEADER.hex(' ')} + RGB, {builder.packet_length} bytes padded to {REPORT_LENGTH}")
    click.echo(f"  Conflicts:     {', '.join(CONFLICTING_PROCESSES)}")
    click.echo(f"  Documentation: {device.documentation}")

    click.echo("\nParameters:\n")
    for parameter in controllable_parameters():
        extra = f" {parameter['values']}" if "values" in parameter else ""
        click.echo(f"  {parameter['property']:<14} {parameter['type']:<9} default {parameter['default']}{extra}")

    click.echo("\nLayout (name, canvas x,y, slot):\n")
    for name, (x, y), slot in zip(AKIRA_LAYOUT.names(), AKIRA_LAYOUT.positions(), AKIRA_LAYOUT.slots()):
        click.echo(f"  {name:<12} {x:>2},{y}  {slot:>3}")
