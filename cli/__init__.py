"""Command line interface for icsgen."""

import logging
import sys

from icsgen.config import IcsConfig

logger = logging.getLogger(__name__)

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    # quiet wins when both flags are given
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False, quiet: bool = False, config: IcsConfig | None = None
) -> None:
    """Send all records to the log file and filtered ones to stderr.

    stdout is reserved for rendered calendars, so nothing logs there.

    Args:
        verbose: Show INFO records on stderr
        quiet: Show only ERROR records on stderr
        config: Supplies the log directory and filename; read from the
            environment when omitted
    """
    if config is None:
        config = IcsConfig.from_env()

    config.log_dir.mkdir(parents=True, exist_ok=True)
    log_path = config.log_dir / config.log_filename

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    console_handler.setLevel(_console_level(verbose, quiet))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    # repeated invocations in one process must not stack handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logger.debug(f"Logging to {log_path}")


def main() -> None:
    """Entry point for the ``icsgen`` console script."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
