"""Consistent error output for CLI commands."""

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from akira_rgb.exceptions import AkiraError, format_error_for_display

logger = logging.getLogger(__name__)


def exit_with_error(error: Exception, log_path: Optional[Path] = None) -> NoReturn:
    """
    Show an error without a traceback and exit with status 1.

    Args:
        error: The exception to report
        log_path: Log file to point the user at
    """
    logger.error(f"Command failed: {error}", exc_info=not isinstance(error, AkiraError))

    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)

    sys.exit(1)
