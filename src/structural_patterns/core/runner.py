from __future__ import annotations

"""
Demonstration Runner.

Executes registered pattern scenarios, captures their output lines and
reports each outcome as a DemoResult. A failing scenario never aborts the
remaining ones.
"""

import logging
from typing import Iterable, List, Optional

from structural_patterns.core.demos import DEMOS
from structural_patterns.domain.demo_models import (
    DemoResult,
    create_error_result,
    create_success_result,
)
from structural_patterns.patterns.output import Emitter

logger = logging.getLogger(__name__)


def run_demo(name: str, *, echo: Optional[Emitter] = None) -> DemoResult:
    """
    Run one pattern demonstration.

    Args:
        name: Registered pattern identifier.
        echo: Optional emitter receiving each line as it is produced.

    Returns:
        DemoResult: Captured lines and status.

    Raises:
        KeyError: If no demonstration is registered under the name.
    """
    demo = DEMOS[name]
    lines: List[str] = []

    def _emit(line: str) -> None:
        lines.append(line)
        if echo is not None:
            echo(line)

    logger.debug(f"Running '{name}' demonstration.")
    try:
        demo(_emit)
    except Exception as e:
        msg = f"Demonstration '{name}' failed: {e}"
        logger.error(msg, exc_info=True)
        return create_error_result(name, msg, lines)

    logger.info(f"Demonstration '{name}' completed ({len(lines)} lines).")
    return create_success_result(name, lines)


def run_demos(names: Iterable[str], *, echo: Optional[Emitter] = None) -> List[DemoResult]:
    """
    Run several demonstrations in the given order.

    Args:
        names: Pattern identifiers.
        echo: Optional emitter receiving each line as it is produced.

    Returns:
        List[DemoResult]: One result per requested name.
    """
    return [run_demo(name, echo=echo) for name in names]
