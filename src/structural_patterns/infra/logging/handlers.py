from __future__ import annotations

"""
Logging Sinks.

Builds the handlers the queue listener forwards records to. Every handler
created here carries a marker attribute so reconfiguration only tears down
what this package installed.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional, TypeVar

from structural_patterns.infra.logging.config import (
    CONSOLE_FORMAT,
    DATE_FORMAT,
    FILE_FORMAT,
    LoggingConfig,
)

_HANDLER_TAG_ATTR: str = "_structural_patterns_handler"

H = TypeVar("H", bound=logging.Handler)


def mark(handler: H) -> H:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def is_marked(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_sinks(cfg: LoggingConfig) -> List[logging.Handler]:
    """
    Create the output handlers requested by the settings.

    A log file that cannot be opened is reported on stderr and skipped;
    the console sink still works.
    """
    level = cfg.numeric_level
    sinks: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(level)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        sinks.append(mark(console))

    if cfg.log_file:
        file_sink = _open_file_sink(cfg.log_file, cfg.rotate_at, cfg.keep)
        if file_sink is not None:
            file_sink.setLevel(level)
            file_sink.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
            sinks.append(mark(file_sink))

    return sinks


def _open_file_sink(path: str, rotate_at: int, keep: int) -> Optional[RotatingFileHandler]:
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        return RotatingFileHandler(path, maxBytes=rotate_at, backupCount=keep, encoding="utf-8")
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{path}': {e}\n")
        return None
