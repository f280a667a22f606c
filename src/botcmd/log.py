"""Logging configuration for botcmd.

Attaches a single handler to the package logger, writing either to stderr
or to a log file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level state
_handler: Optional[logging.Handler] = None


def configure_logging(
    level: int | str = logging.WARNING,
    log_file: Optional[Path] = None,
) -> logging.Handler:
    """Configure the botcmd logger.

    Replaces any handler installed by a previous call.

    Args:
        level: Logging level (int or name such as "DEBUG")
        log_file: Write to this file instead of stderr

    Returns:
        The installed handler
    """
    global _handler

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    close_logging()

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    else:
        _handler = logging.StreamHandler()
    _handler.setLevel(level)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    pkg_logger = logging.getLogger("botcmd")
    pkg_logger.addHandler(_handler)
    pkg_logger.setLevel(level)
    return _handler


def close_logging() -> None:
    """Remove and close the handler installed by configure_logging."""
    global _handler

    if _handler is not None:
        logging.getLogger("botcmd").removeHandler(_handler)
        _handler.close()
        _handler = None
