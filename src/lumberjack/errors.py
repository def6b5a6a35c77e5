"""
Exceptions raised by the lumberjack forest solver.

"No path" and "no solution" are ordinary results, not errors: they are
reported as ``None`` / ``NO_SOLUTION`` by the pathfinding and solver APIs.
"""


class LumberjackError(Exception):
    """Base class for all solver errors."""


class InvalidInputError(LumberjackError, ValueError):
    """Malformed grid, out-of-range entry, or out-of-bounds start position."""


class OutOfBoundsError(LumberjackError, IndexError):
    """A position query fell outside the grid."""


class SearchLimitExceeded(LumberjackError, RuntimeError):
    """A configured solver limit was hit before the search finished."""
