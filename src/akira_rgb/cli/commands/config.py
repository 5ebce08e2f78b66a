"""
Configuration commands.

Commands:
    - config show                 # Display configuration
    - config set --option VALUE   # Update and save configuration
    - config validate             # Validate config file
    - config reset                # Restore defaults
"""

import logging
from pathlib import Path
from typing import Any, Optional

import click
from pydantic import ValidationError

from akira_rgb.exceptions import AkiraError, wrap_pydantic_error
from akira_rgb.model_manager import PydanticPersistence
from akira_rgb.models import AppConfig

from ..errors import exit_with_error

logger = logging.getLogger(__name__)


def _paths(ctx) -> tuple[Optional[Path], Optional[Path]]:
    obj = ctx.obj or {}
    return obj.get("config_path"), obj.get("log_path")


@click.group(name="config")
def config():
    """Configure akira-rgb settings."""
    pass


@config.command(name="show")
@click.pass_context
def show_config(ctx):
    """Display the current configuration."""
    config_path, log_path = _paths(ctx)
    try:
        app_config = AppConfig.load_or_default(config_path)
    except AkiraError as e:
        exit_with_error(e, log_path)

    lighting = app_config.lighting
    click.echo(f"Configuration ({config_path}):\n")
    click.echo(f"  frame_interval:            {app_config.frame_interval}")
    click.echo(f"  lighting.lighting_mode:    {lighting.lighting_mode.value}")
    click.echo(f"  lighting.forced_color:     {lighting.forced_color.to_hex()}")
    click.echo(f"  lighting.shutdown_color:   {lighting.shutdown_color.to_hex()}")
    click.echo(f"  canvas_file:               {app_config.canvas_file}")
    click.echo(f"  system_suspending_on_exit: {app_config.system_suspending_on_exit}")


@config.command(name="set")
@click.pass_context
@click.option('--frame-interval', type=float, default=None, help='Seconds between frames')
@click.option(
    '--mode',
    type=click.Choice(['Canvas', 'Forced'], case_sensitive=False),
    default=None,
    help='Lighting mode'
)
@click.option('--forced-color', default=None, help='Color for Forced mode')
@click.option('--shutdown-color', default=None, help='Color applied on exit')
@click.option('--canvas-file', type=click.Path(dir_okay=False, path_type=Path), default=None, help='Default canvas file')
@click.option('--suspend-on-exit', type=click.BOOL, default=None, help='Turn LEDs off on exit (true/false)')
def set_config(
    ctx,
    frame_interval: Optional[float],
    mode: Optional[str],
    forced_color: Optional[str],
    shutdown_color: Optional[str],
    canvas_file: Optional[Path],
    suspend_on_exit: Optional[bool],
):
    """Update configuration values and save them."""
    config_path, log_path = _paths(ctx)
    try:
        app_config = AppConfig.load_or_default(config_path)
        data: dict[str, Any] = app_config.model_dump()

        lighting_updates = {
            "lighting_mode": mode,
            "forced_color": forced_color,
            "shutdown_color": shutdown_color,
        }
        data["lighting"].update({k: v for k, v in lighting_updates.items() if v is not None})

        top_level = {
            "frame_interval": frame_interval,
            "canvas_file": canvas_file,
            "system_suspending_on_exit": suspend_on_exit,
        }
        data.update({k: v for k, v in top_level.items() if v is not None})

        try:
            updated = AppConfig.model_validate(data)
        except ValidationError as e:
            raise wrap_pydantic_error(e, str(config_path)) from e

        updated.save(config_path)
    except AkiraError as e:
        exit_with_error(e, log_path)

    logger.info(f"Saved configuration to {config_path}")
    click.echo(f"[OK] Saved configuration to {config_path}")


@config.command(name="validate")
@click.pass_context
def validate_config(ctx):
    """Check the configuration file."""
    config_path, _ = _paths(ctx)
    is_valid, message = PydanticPersistence.validate_json(config_path, AppConfig)
    if is_valid:
        click.echo(f"[OK] {config_path}")
    else:
        click.echo(f"[FAIL] {message}")
        ctx.exit(1)


@config.command(name="reset")
@click.pass_context
@click.confirmation_option(prompt='Reset configuration to defaults?')
def reset_config(ctx):
    """Restore default configuration."""
    config_path, log_path = _paths(ctx)
    try:
        AppConfig().save(config_path)
    except OSError as e:
        exit_with_error(e, log_path)
    click.echo(f"[OK] Reset configuration at {config_path}")
