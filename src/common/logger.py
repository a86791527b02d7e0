"""Logging utilities with rich output.

Every module gets its logger through get_logger, which attaches a rich console
handler once per logger name.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Checking %d headers", len(headers))
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from common.env import env

# Diagnostics go to stderr so they never mix with a host's document output
console = Console(stderr=True)


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a configured logger with rich output.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               If None, uses environment variable LOG_LEVEL or defaults to INFO.
        show_time: Show timestamp in log output
        show_path: Show file path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding multiple handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel(level.upper() if level else env.log_level())

    rich_handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=True,
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    logger.addHandler(rich_handler)

    # Propagate so pytest caplog can capture records
    logger.propagate = True

    return logger
