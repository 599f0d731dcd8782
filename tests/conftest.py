from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for output capture and configuration dictionaries.
"""

import logging
import os
import sys
from logging.handlers import QueueListener
from typing import Any, Dict, Iterator, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def lines() -> List[str]:
    """Accumulator used as an emitter via `lines.append`."""
    return []


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        "patterns": ["composite", "bridge"],
        "json_output": False,
        "log_level": "INFO",
        "log_file": "",
    }


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Detach package-managed logging handlers before and after a test."""
    _reset_root_logger()
    yield
    _reset_root_logger()


def _reset_root_logger() -> None:
    from structural_patterns.infra.logging import (
        _CONFIGURED_FLAG_ATTR,
        _HANDLER_TAG_ATTR,
        _QUEUE_LISTENER_ATTR,
    )

    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if isinstance(listener, QueueListener):
        if getattr(listener, "_thread", None) is not None:
            listener.stop()
        for h in listener.handlers:
            h.close()
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)
