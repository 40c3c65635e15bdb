#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/cardkit/logging_utils.py
"""Logging setup for applications that import, store or render card documents.

cardkit itself only creates module loggers and never installs handlers.
Host applications call :func:`configure_logging` once to route the
``cardkit.*`` warnings (skipped records, failed card renders, failed
dynamic-data fetches) to stderr and optionally to a file.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

SIMPLE_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Libraries whose debug output drowns out card-level messages
NOISY_LOGGERS = ("bs4", "markdown_it")


def resolve_log_level(log_level: int | str) -> int:
    """Return the numeric level for ``log_level``, falling back to INFO for unknown names."""
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    logger_name: str = "",
) -> logging.Logger:
    """Install stderr (and optional file) handlers for card document logging.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "debug").
    log_file : str, optional
        Path of a file that receives the same records as stderr.
    trace_mode : bool, default False
        Include timestamps and logger names, useful when tracing which card
        failed to render.
    logger_name : str, default ""
        Logger to configure. The root logger by default; pass ``"cardkit"``
        to leave the host application's own handlers untouched.

    Returns
    -------
    logging.Logger
        The configured logger.

    """
    level = resolve_log_level(log_level)
    formatter = logging.Formatter(
        TRACE_FORMAT if trace_mode else SIMPLE_FORMAT,
        datefmt=TRACE_DATE_FORMAT if trace_mode else None,
    )

    target = logging.getLogger(logger_name or None)
    target.setLevel(level)
    target.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            target.warning("Could not open log file %s: %s", log_file, exc)
            log_file = None

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        target.addHandler(handler)

    if log_file:
        target.info("Logging to file: %s", log_file)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return target
