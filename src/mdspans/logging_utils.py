#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdspans/logging_utils.py
"""Logging setup for the ``mdspans`` command line.

Handlers are installed on the ``mdspans`` package logger rather than the
root logger, so embedding applications keep control of their own logging.
Rule match tracing goes through ``mdspans.parser.core`` and is only worth
enabling when that logger would actually emit DEBUG records.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "mdspans"
MATCH_LOGGER = "mdspans.parser.core"

_PLAIN_FORMAT = "%(levelname)s: %(message)s"
_TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def resolve_level(log_level: int | str) -> int:
    """Turn a level name or number into a numeric level, defaulting to INFO."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install console and optional file handlers on the package logger.

    Calling it again replaces the handlers installed by the previous call.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g., "INFO")
    log_file : str, optional
        Path of a file that receives a copy of every record
    trace_mode : bool, default False
        Add timestamps and logger names to each line

    Returns
    -------
    logging.Logger
        The configured ``mdspans`` logger

    """
    level = resolve_level(log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.propagate = False
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        _TRACE_FORMAT if trace_mode else _PLAIN_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S" if trace_mode else None,
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            package_logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
            package_logger.info("Logging to file: %s", log_file)

    return package_logger


def match_logging_enabled() -> bool:
    """Return True when per-match DEBUG records from the parser would be emitted."""
    return logging.getLogger(MATCH_LOGGER).isEnabledFor(logging.DEBUG)
