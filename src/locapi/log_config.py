# locapi/log_config.py
"""Loguru setup for locapi.

The library only emits records through ``logger``; nothing is configured on
import. Applications that want to see the URLs locapi builds and the requests
it sends call ``configure_logging()`` once, typically with ``level="DEBUG"``.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO", sink=sys.stderr):
    """
    Route loguru output to a single sink.

    Existing handlers are removed first, so calling this again replaces the
    previous configuration instead of duplicating output.

    Args:
        level: The minimum level, case-insensitive (e.g. "debug", "WARNING").
        sink: Anything loguru accepts as a sink: a stream, a path or a callable.
    """
    level = level.upper()
    logger.remove()
    logger.add(
        sink,
        level=level,
        format=LOG_FORMAT,
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=False,
    )
    logger.info(f"locapi log level set to {level}")


__all__ = ["LOG_FORMAT", "configure_logging", "logger"]
