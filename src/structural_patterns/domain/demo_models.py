from __future__ import annotations

"""
Demonstration Result Models.

Defines the data structures used to report the outcome of a pattern
demonstration from the runner to the interface layer.
"""

from dataclasses import dataclass, field
from typing import List

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DemoResult:
    """
    Outcome of a single pattern demonstration.

    Attributes:
        name: Pattern identifier.
        ok: Flag indicating the scenario completed.
        error: Descriptive message in case of failure.
        lines: Output lines produced, including those emitted before a failure.
    """
    name: str
    ok: bool
    error: str = ""
    lines: List[str] = field(default_factory=list)


# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(name: str, lines: List[str]) -> DemoResult:
    return DemoResult(name=name, ok=True, lines=list(lines))


def create_error_result(name: str, error: str, lines: List[str]) -> DemoResult:
    return DemoResult(name=name, ok=False, error=error, lines=list(lines))
