# rfcli/logging/logger.py
"""
Unified logging setup for rfcli.

All modules use:
    from rfcli.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in the CLI entry point, via configure_logging().
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: int | str = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    stream=None,
) -> None:
    """
    Configure the root logging handler.

    Safe to call multiple times - handler duplication is prevented.
    Logs go to stderr by default so they never end up in pager input.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Do NOT configure logging here - configuration happens in configure_logging().
    """
    return logging.getLogger(name)
