from __future__ import annotations

"""
Logging Settings.

The settings object handed to `configure_logging`, plus the fixed record
layouts used by the console and file sinks.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from structural_patterns.domain.constants import LOG_LEVELS

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Diagnostics settings resolved from the CLI and the config file.

    Attributes:
        level: Level name; unknown names behave as WARNING.
        console: Mirror records to stderr.
        log_file: Rotating log file path, or None for no file.
        rotate_at: File size in bytes that triggers a rollover.
        keep: Rolled-over files retained next to the active one.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None
    rotate_at: int = 256 * 1024
    keep: int = 2

    @property
    def numeric_level(self) -> int:
        name = (self.level or "").strip().upper()
        if name == "WARN" or name not in LOG_LEVELS:
            return logging.WARNING
        return getattr(logging, name)
