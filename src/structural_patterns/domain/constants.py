from __future__ import annotations

"""
Domain Constants.

Centralizes the catalogue of available pattern demonstrations and the
application identity used by the CLI.
"""

from typing import Dict, List

APP_NAME = "structural-patterns"
APP_VERSION = "1.0.0"
CURRENT_CONFIG_VERSION = "1.0.0"

# Demonstration order used when no explicit selection is made
PATTERN_NAMES: List[str] = [
    "flyweight",
    "proxy",
    "composite",
    "adapter",
    "decorator",
    "facade",
    "bridge",
]

PATTERN_DESCRIPTIONS: Dict[str, str] = {
    "flyweight": "Game map trees sharing intrinsic state.",
    "proxy": "Image viewer loading images lazily.",
    "composite": "File system tree of files and folders.",
    "adapter": "Restaurant menus unified behind one interface.",
    "decorator": "Coffee with stackable condiments.",
    "facade": "File system operations behind a single entry point.",
    "bridge": "Message styles decoupled from delivery channels.",
}

# Level names accepted in config files; WARN is an alias of WARNING
LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL"]
