from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration loading and
merging (defaults, JSON file, CLI overrides), logging initialization,
demonstration execution and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Tuple

from structural_patterns.core.runner import run_demo, run_demos
from structural_patterns.core.validator import validate_config
from structural_patterns.domain.config import get_default_config, load_config
from structural_patterns.domain.constants import PATTERN_DESCRIPTIONS, PATTERN_NAMES
from structural_patterns.domain.demo_models import DemoResult
from structural_patterns.infra.logging import LoggingConfig, configure_logging, get_logger
from structural_patterns.interface.cli import args as cli_args
from structural_patterns.patterns.output import console_emitter

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 demonstration failure, 2 usage error).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.list_patterns:
        _print_catalogue()
        return 0

    unknown = cli_args.unknown_patterns(args.patterns)
    if unknown:
        print(f"ERROR: Unknown pattern(s): {', '.join(unknown)}", file=sys.stderr)
        print(f"Available: {', '.join(PATTERN_NAMES)}", file=sys.stderr)
        return 2

    # 2. Logging bootstrap from CLI flags, so config file diagnostics are captured
    overrides = cli_args.args_to_overrides(args)
    boot_conf, _ = validate_config(_merge_config(get_default_config(), overrides), strict=False)
    _apply_logging(boot_conf)

    # 3. Resolve configuration hierarchy
    base_conf = load_config(args.config_path)
    raw_conf = _merge_config(base_conf, overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # The file may raise verbosity or add a log file
    if _logging_view(clean_conf) != _logging_view(boot_conf):
        _apply_logging(clean_conf, force=True)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Demonstration phase
    names = clean_conf["patterns"]
    logger.debug(f"Selected demonstrations: {names}")
    json_output = clean_conf["json_output"]

    try:
        if json_output:
            results = run_demos(names)
        else:
            results = _run_with_banners(names)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    # 5. Output rendering phase
    if json_output:
        print(json.dumps([asdict(r) for r in results], ensure_ascii=False, indent=2))
    else:
        _print_failures(results)

    return 0 if all(r.ok for r in results) else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of non-None override values for known keys.
    """
    out = dict(base)
    keys_to_merge = ["patterns", "json_output", "log_level", "log_file"]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# LOGGING BOOTSTRAP
# -----------------------------------------------------------------------------

def _logging_view(conf: Dict[str, Any]) -> Tuple[str, str]:
    return conf["log_level"], conf["log_file"]


def _apply_logging(conf: Dict[str, Any], *, force: bool = False) -> None:
    """Console on stderr, plus the rotating file when one is configured."""
    configure_logging(
        LoggingConfig(level=conf["log_level"], console=True, log_file=conf["log_file"] or None),
        force=force,
    )

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _run_with_banners(names: List[str]) -> List[DemoResult]:
    """
    Run demonstrations echoing their output live.

    A title banner separates demonstrations when more than one is selected,
    so a single selection prints exactly the scenario output.
    """
    results: List[DemoResult] = []
    for i, name in enumerate(names):
        if len(names) > 1:
            if i:
                console_emitter("")
            console_emitter(f"##### {name.upper()} #####")
        results.append(run_demo(name, echo=console_emitter))
    return results


def _print_catalogue() -> None:
    for name in PATTERN_NAMES:
        print(f"{name:<10} {PATTERN_DESCRIPTIONS[name]}")


def _print_failures(results: List[DemoResult]) -> None:
    for result in results:
        if not result.ok:
            print(f"ERROR: {result.error}", file=sys.stderr)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
