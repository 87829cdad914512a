"""Logging setup for the protoutline CLI."""

import logging
import sys

LOGGER_NAME = "protoutline"


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Send protoutline.* log records to stderr.

    Existing handlers on the protoutline logger are replaced, so calling
    this more than once does not duplicate output.

    Args:
        level: Logging level as a number or name (e.g. "DEBUG").

    Returns:
        The configured protoutline namespace logger.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))

    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # Don't propagate to root logger
    root.propagate = False
    return root
