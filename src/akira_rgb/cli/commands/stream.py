"""Commands that stream lighting to the keyboard."""

import logging
from pathlib import Path
from typing import Optional

import click

from akira_rgb.core import CanvasFrame, FrameScheduler
from akira_rgb.devices.akira import AkiraPlugin, open_transport
from akira_rgb.exceptions import AkiraError, ErrorContext
from akira_rgb.models import AppConfig, Color

from ..errors import exit_with_error

logger = logging.getLogger(__name__)


def _load_canvas(canvas: Optional[Path], fill: Optional[str], config: AppConfig) -> CanvasFrame:
    """Pick the canvas: explicit file, solid fill, configured file, then black."""
    if canvas is not None:
        return CanvasFrame.from_file(canvas)
    if fill is not None:
        return CanvasFrame.solid(Color.from_hex(fill))
    if config.canvas_file is not None:
        return CanvasFrame.from_file(config.canvas_file)
    logger.warning("No canvas given; Canvas mode will show black")
    return CanvasFrame.solid(Color.off())


@click.command(name="run")
@click.pass_context
@click.option(
    '--mode',
    '-m',
    type=click.Choice(['Canvas', 'Forced'], case_sensitive=False),
    default=None,
    help='Lighting mode (default: from config)'
)
@click.option('--forced-color', '-f', default=None, help='Color for Forced mode, e.g. #009bde')
@click.option('--shutdown-color', '-s', default=None, help='Color applied on exit')
@click.option(
    '--canvas',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='Canvas file saved with numpy.save(), shape (6, 15, 3)'
)
@click.option('--fill', default=None, help='Use a solid canvas of this color')
@click.option('--interval', type=click.FloatRange(min=0.001, max=1.0), default=None, help='Seconds per frame')
@click.option('--frames', type=click.IntRange(min=1), default=None, help='Stop after N frames')
@click.option('--suspend-on-exit', is_flag=True, help='Turn LEDs off on exit instead of shutdown color')
def run(
    ctx,
    mode: Optional[str],
    forced_color: Optional[str],
    shutdown_color: Optional[str],
    canvas: Optional[Path],
    fill: Optional[str],
    interval: Optional[float],
    frames: Optional[int],
    suspend_on_exit: bool,
):
    """
    Stream lighting frames to the keyboard until Ctrl+C.

    On exit the keyboard receives one final frame with the shutdown color
    (or black with --suspend-on-exit).
    """
    log_path = ctx.obj.get("log_path") if ctx.obj else None
    config_path = ctx.obj.get("config_path") if ctx.obj else None

    transport = None
    try:
        config = AppConfig.load_or_default(config_path)
        frame_colors = _load_canvas(canvas, fill, config)

        overrides = {
            "LightingMode": mode,
            "forcedColor": forced_color,
            "shutdownColor": shutdown_color,
        }
        overrides = {key: value for key, value in overrides.items() if value is not None}

        with ErrorContext("open keyboard", logger_instance=logger):
            transport = open_transport()

        plugin = AkiraPlugin(transport, frame_colors, configuration=config.lighting)
        if overrides:
            plugin.update_parameters(overrides)

        scheduler = FrameScheduler(plugin, frame_interval=interval or config.frame_interval)
        suspending = suspend_on_exit or config.system_suspending_on_exit

        lighting = plugin.settings.current
        click.echo(
            f"Streaming to {plugin.name()} in {lighting.lighting_mode.value} mode "
            f"({scheduler.frame_interval * 1000:.0f} ms/frame). Press Ctrl+C to stop."
        )
        count = scheduler.run(max_frames=frames, system_suspending=suspending)
        click.echo(f"Sent {count} frames.")

    except AkiraError as e:
        exit_with_error(e, log_path)
    finally:
        if transport is not None:
            transport.close()


@click.command(name="off")
@click.pass_context
@click.option('--color', default=None, help='Shutdown color (default: from config)')
@click.option('--suspend', is_flag=True, help='Turn all LEDs off (ignores --color)')
def off(ctx, color: Optional[str], suspend: bool):
    """Send the shutdown frame once and exit."""
    log_path = ctx.obj.get("log_path") if ctx.obj else None
    config_path = ctx.obj.get("config_path") if ctx.obj else None

    transport = None
    try:
        config = AppConfig.load_or_default(config_path)
        with ErrorContext("open keyboard", logger_instance=logger):
            transport = open_transport()

        plugin = AkiraPlugin(transport, CanvasFrame.solid(Color.off()), configuration=config.lighting)
        if color is not None:
            plugin.update_parameters({"shutdownColor": color})

        plugin.shutdown(system_suspending=suspend)
        applied = "off" if suspend else plugin.settings.current.shutdown_color.to_hex()
        click.echo(f"Applied shutdown color: {applied}")

    except AkiraError as e:
        exit_with_error(e, log_path)
    finally:
        if transport is not None:
            transport.close()
