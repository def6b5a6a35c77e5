"""
Configuration for the forest BFS solver.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Search limits for the solver. ``None`` leaves a limit off."""

    max_rounds: Optional[int] = None  # Rounds that chop one more tree
    max_states: Optional[int] = None  # Distinct forest states recorded
    timeout_ms: Optional[float] = None

    def __post_init__(self):
        """Validate configuration."""
        if self.max_rounds is not None and self.max_rounds <= 0:
            raise ValueError("max_rounds must be positive")
        if self.max_states is not None and self.max_states <= 0:
            raise ValueError("max_states must be positive")
        if self.timeout_ms is not None and self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")

    @property
    def is_bounded(self) -> bool:
        return (
            self.max_rounds is not None
            or self.max_states is not None
            or self.timeout_ms is not None
        )
