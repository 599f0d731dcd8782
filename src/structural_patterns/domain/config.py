from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration and loads user overrides from a
JSON file. Missing or unreadable files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from structural_patterns.domain.constants import PATTERN_NAMES

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Selection
        "patterns": list(PATTERN_NAMES),

        # Output
        "json_output": False,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str]) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file on top of the defaults.

    Args:
        path: Location of the JSON document. None or empty means defaults only.

    Returns:
        Dict[str, Any]: Defaults merged with the file content.
    """
    config = get_default_config()

    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    config.update(data)
    return config
