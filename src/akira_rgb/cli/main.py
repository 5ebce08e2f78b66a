"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from akira_rgb import __version__
from akira_rgb.models.config import CONFIG_DIR, DEFAULT_CONFIG_PATH

from .commands import config, devices_group, info, off, run

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Where log output goes for the given flags."""
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "akira-rgb-debug.log"
    return CONFIG_DIR / "logs" / "akira-rgb.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> Path:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)

    Returns:
        Path of the log file
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Explicit log level wins for custom log files
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="akira-rgb")
@click.option(
    '--config-file',
    '-c',
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help='Configuration file'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./akira-rgb-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    config_file: Path,
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Akira RGB - per-key lighting driver for the AdamantiuN Akira keyboard.

    Streams a 15x6 color canvas (or a forced color) to the keyboard at a
    fixed frame rate and applies a shutdown color on exit.

    \b
    Examples:
      # Show the keyboard's layout and parameters
      akira-rgb info

    \b
      # Find the lighting interface
      akira-rgb devices list

    \b
      # Paint every key one color until Ctrl+C
      akira-rgb run --mode forced --forced-color '#009bde'

    \b
      # Stream a canvas saved with numpy.save()
      akira-rgb run --canvas rainbow.npy

    \b
      # Turn the LEDs off
      akira-rgb off --suspend
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_file
    ctx.obj["log_path"] = setup_logging(verbose, debug, log_file, log_level)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(info)
cli.add_command(devices_group)
cli.add_command(run)
cli.add_command(off)
cli.add_command(config)

if __name__ == "__main__":
    cli()
