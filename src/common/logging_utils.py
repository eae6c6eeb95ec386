"""Centralized logging setup shared by the CLI entry points."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from constants import Constants

_HANDLER_NAME = "pkgsweep-console"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure the root logger; calling again replaces the console handler.

    Console output goes to stderr so it never mixes with the listings and
    prompts written to stdout.

    Args:
        level: Level name, e.g. "DEBUG". Unknown names fall back to INFO.
        log_file: Optional path receiving a timestamped copy of the log.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)
    console = logging.StreamHandler(sys.stderr)
    console.set_name(_HANDLER_NAME)
    console.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    root.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
        root.addHandler(file_handler)
        root.info("Logging to file: %s", log_file)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when debug records from `logger` would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)
