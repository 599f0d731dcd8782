from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict, List

from structural_patterns.domain.constants import APP_NAME, APP_VERSION, PATTERN_NAMES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the structural-patterns CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Run structural design pattern demonstrations.",
    )

    # --- Selection ---
    p.add_argument(
        "patterns",
        nargs="*",
        metavar="PATTERN",
        help=f"Demonstrations to run ({', '.join(PATTERN_NAMES)}). Defaults to all.",
    )
    p.add_argument(
        "--list",
        dest="list_patterns",
        action="store_true",
        help="List available demonstrations and exit.",
    )

    # --- Configuration ---
    p.add_argument(
        "-c", "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    # --- Output ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Report demonstration results as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["patterns"] = _normalize_names(args.patterns) or None
    overrides["log_file"] = args.log_file

    if args.json_output:
        overrides["json_output"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides


def unknown_patterns(names: List[str]) -> List[str]:
    """Return the requested names that match no registered demonstration."""
    return [n for n in _normalize_names(names) if n not in PATTERN_NAMES]

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _normalize_names(names: List[str]) -> List[str]:
    """Lower-case names and expand comma separated entries."""
    out: List[str] = []
    for raw in names or []:
        out.extend(x.strip().lower() for x in raw.split(",") if x.strip())
    return out
