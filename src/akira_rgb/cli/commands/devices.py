"""HID device commands."""

import click

from akira_rgb.devices.akira import find_endpoints, matches_lighting_interface
from akira_rgb.devices.akira.model import PRODUCT_ID, VENDOR_ID


@click.group(name="devices")
def devices_group():
    """Keyboard discovery commands."""
    pass


@devices_group.command(name="list")
@click.option('--vendor-id', type=lambda v: int(v, 0), default=f"0x{VENDOR_ID:04x}", help='USB vendor id')
@click.option('--product-id', type=lambda v: int(v, 0), default=f"0x{PRODUCT_ID:04x}", help='USB product id')
def list_devices(vendor_id: int, product_id: int):
    """List HID endpoints and mark the lighting interface."""
    endpoints = find_endpoints(vendor_id, product_id)

    click.echo(f"HID endpoints for {vendor_id:04x}:{product_id:04x}:\n")
    if not endpoints:
        click.echo("  No endpoints found.")
        return

    for i, endpoint in enumerate(endpoints):
        marker = "[OK]" if matches_lighting_interface(endpoint) else "[--]"
        collection = "n/a" if endpoint.collection is None else f"0x{endpoint.collection:04x}"
        click.echo(
            f"  {marker} [{i}] interface={endpoint.interface} "
            f"usage=0x{endpoint.usage:04x} usage_page=0x{endpoint.usage_page:04x} "
            f"collection={collection}"
        )
        click.echo(f"         {endpoint.path.decode(errors='replace')}")
