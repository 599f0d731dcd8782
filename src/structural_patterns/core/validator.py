from __future__ import annotations

"""
Configuration Validation Service.

Checks the four runtime keys (`patterns`, `json_output`, `log_level`,
`log_file`) before demonstrations run. Lenient mode repairs bad values and
reports what it changed; strict mode raises on the first problem.
"""

import logging
from typing import Any, Dict, List, Tuple, Type

from structural_patterns.domain.config import get_default_config
from structural_patterns.domain.constants import LOG_LEVELS, PATTERN_NAMES

logger = logging.getLogger(__name__)

_TRUE_WORDS = ("true", "yes", "y", "1", "on")
_FALSE_WORDS = ("false", "no", "n", "0", "off")


class _Findings:
    """Collects repair notes, or raises immediately in strict mode."""

    def __init__(self, strict: bool) -> None:
        self.strict = strict
        self.notes: List[str] = []

    def reject(self, message: str, repair: str, error: Type[Exception] = TypeError) -> None:
        if self.strict:
            raise error(message)
        self.notes.append(f"{message} {repair}")

    def note(self, message: str) -> None:
        self.notes.append(message)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid input instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    findings = _Findings(strict)
    defaults = get_default_config()

    if not isinstance(config, dict):
        findings.reject(
            f"Invalid config type: expected dict, received {type(config).__name__}.",
            "Using defaults.",
        )
        logger.warning(findings.notes[-1])
        return defaults, findings.notes

    clean: Dict[str, Any] = dict(defaults)
    clean.update(config)

    clean["patterns"] = _check_patterns(clean.get("patterns"), findings)
    clean["json_output"] = _check_json_output(clean.get("json_output"), defaults["json_output"], findings)
    clean["log_level"] = _check_log_level(clean.get("log_level"), defaults["log_level"], findings)
    clean["log_file"] = _check_log_file(clean.get("log_file"), findings)

    return clean, findings.notes


# -----------------------------------------------------------------------------
# PER-KEY CHECKS
# -----------------------------------------------------------------------------

def _check_patterns(value: Any, findings: _Findings) -> List[str]:
    """Known demonstration names, lower-cased, de-duplicated; all of them if none survive."""
    if value is None:
        return list(PATTERN_NAMES)

    if isinstance(value, str) and not findings.strict:
        findings.note("Field 'patterns' converted from CSV string to list.")
        value = value.split(",")
    elif not isinstance(value, list):
        findings.reject(
            f"Invalid field 'patterns': expected list of names, received {type(value).__name__}.",
            "Running all demonstrations.",
        )
        return list(PATTERN_NAMES)

    selected: List[str] = []
    for raw in value:
        if not isinstance(raw, str):
            findings.reject(f"Pattern entry {raw!r} is not a name.", "Entry discarded.")
            continue
        name = raw.strip().lower()
        if not name or name in selected:
            continue
        if name not in PATTERN_NAMES:
            findings.reject(f"Unknown pattern '{raw.strip()}'.", "Entry discarded.", ValueError)
            continue
        selected.append(name)

    return selected or list(PATTERN_NAMES)


def _check_json_output(value: Any, fallback: bool, findings: _Findings) -> bool:
    if value is None:
        return fallback
    if isinstance(value, bool):
        return value

    if not findings.strict:
        word = str(value).strip().lower()
        if word in _TRUE_WORDS or word in _FALSE_WORDS:
            flag = word in _TRUE_WORDS
            findings.note(f"Field 'json_output' converted from {value!r} to {flag}.")
            return flag

    findings.reject(
        f"Invalid field 'json_output': expected bool, received {type(value).__name__}.",
        f"Using {fallback}.",
    )
    return fallback


def _check_log_level(value: Any, fallback: str, findings: _Findings) -> str:
    if value is None:
        return fallback
    if not isinstance(value, str):
        findings.reject(
            f"Invalid field 'log_level': expected str, received {type(value).__name__}.",
            f"Using {fallback}.",
        )
        return fallback

    level = value.strip().upper()
    if not level:
        return fallback
    if level not in LOG_LEVELS:
        findings.reject(f"Unknown log level '{value}'.", f"Using {fallback}.", ValueError)
        return fallback
    return level


def _check_log_file(value: Any, findings: _Findings) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        findings.reject(
            f"Invalid field 'log_file': expected path string, received {type(value).__name__}.",
            "File logging disabled.",
        )
        return ""
    return value.strip()
