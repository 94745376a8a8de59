"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from remote25sl import __version__

from .commands import chart, decode_command

logger = logging.getLogger(__name__)

# Handlers installed by setup_logging, replaced on each call
_handlers: list[logging.Handler] = []


def setup_logging(verbose: int, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the command line tool.

    Without -v nothing is logged to the console: errors are shown to the user
    as friendly messages and the technical detail goes to the log file only.
    With -v, log records are also written to stderr so stdout stays clean for
    decoded events.

    Args:
        verbose: Verbosity count (0 = no console logging, 1 = INFO, 2+ = DEBUG)
        log_file: Optional log file path (rotating)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()

    level = logging.WARNING
    if verbose:
        level = logging.DEBUG if verbose >= 2 else logging.INFO
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)
        _handlers.append(console_handler)

    if log_file:
        file_level = getattr(logging, log_level.upper())

        # Create rotating file handler (keeps last 5 files, max 10MB each)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        _handlers.append(file_handler)
        level = min(level, file_level) if verbose else file_level

    if not _handlers:
        # Keep records off stderr (logging's last-resort handler)
        null_handler = logging.NullHandler()
        root_logger.addHandler(null_handler)
        _handlers.append(null_handler)

    root_logger.setLevel(level)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.version_option(version=__version__, prog_name="remote25sl")
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
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(verbose: int, log_file: Optional[Path], log_level: str):
    """
    ReMOTE 25SL decoder - turn raw Novation ReMOTE 25SL MIDI bytes into named events.

    \b
    Examples:
      # Decode a single message
      remote25sl decode B0 0A 40

      # Decode a keyboard note
      remote25sl decode --port keyboard 90 3C 64

      # Decode a dump, one message per line, showing why lines were ignored
      cat dump.txt | remote25sl decode --explain

      # Print the controller mapping
      remote25sl chart
    """
    setup_logging(verbose, log_file, log_level)


cli.add_command(decode_command)
cli.add_command(chart)

if __name__ == "__main__":
    cli()
