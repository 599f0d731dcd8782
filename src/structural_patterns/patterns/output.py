from __future__ import annotations

"""
Line Output Sink.

Every pattern sample reports its behaviour as plain text lines. Instead of
printing directly, samples push each line into an emitter so callers can
route the output to the console, a list, or a log.
"""

import sys
from typing import Callable

Emitter = Callable[[str], None]


def console_emitter(line: str) -> None:
    """Write a single line to standard output."""
    sys.stdout.write(f"{line}\n")
