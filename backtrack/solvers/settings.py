"""Settings consumed by one solve invocation."""

from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class SolveSettings:
    """
    Options for BackTrackSolver.

    Attributes:
        pre_pass_propagation: Fill naked singles before choosing each branch.
        trace: Report every assignment and undo to the solver's observer.
        report_difference: Return only the cells the solver filled in.
        step_delay: Seconds to pause after each tentative assignment.
    """
    pre_pass_propagation: bool = True
    trace: bool = False
    report_difference: bool = False
    step_delay: float = 0.0

    def __post_init__(self):
        if self.step_delay < 0:
            raise ValueError(f"step_delay must be >= 0, got {self.step_delay}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SolveSettings:
        """Build settings from a mapping, e.g. a loaded JSON file."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)
