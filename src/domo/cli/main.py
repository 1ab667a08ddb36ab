"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from domo import __version__
from domo.exceptions import ConfigurationError, format_error_for_display
from domo.settings import DEFAULT_SETTINGS_PATH, DomoSettings

from .commands import config, demo, samples

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, log_file: Optional[Path]) -> None:
    """
    Configure logging for the command line.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        log_file: Optional log file; gets a rotating handler at the same level
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if verbose:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Keeps last 5 files, max 10MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


def exit_with_error(error: Exception) -> None:
    """Print a formatted error (and recovery hint) to stderr and exit with code 1."""
    message, hint = format_error_for_display(error)
    click.echo(f"ERROR: {message}", err=True)
    if hint:
        click.echo(f"\n{hint}", err=True)
    sys.exit(1)


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="domo")
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Settings file (default: {DEFAULT_SETTINGS_PATH})'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write logs to this file'
)
def cli(ctx, config_path: Optional[Path], verbose: int, log_file: Optional[Path]):
    """
    Domo - typed, observable in-process state repositories.

    \b
    Examples:
      # Walk through add / update / delete on an integer repository
      domo demo

      # Register the sample application repositories and list them
      domo samples

      # Show the active settings
      domo config show
    """
    setup_logging(verbose, log_file)

    path = config_path or DEFAULT_SETTINGS_PATH
    try:
        settings = DomoSettings.load_or_default(path)
    except ConfigurationError as e:
        logger.error(f"Failed to load settings: {e.detail}")
        exit_with_error(e)

    ctx.obj = {"settings": settings, "settings_path": path}


cli.add_command(demo)
cli.add_command(samples)
cli.add_command(config)

if __name__ == "__main__":
    cli()
