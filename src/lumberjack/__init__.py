"""
Lumberjack forest solver.

Finds the shortest walk that chops down every tree in a terrain grid, from
shortest to tallest, moving in cardinal steps over flat ground.
"""

from .errors import (InvalidInputError, LumberjackError, OutOfBoundsError,
                     SearchLimitExceeded)

__version__ = "0.1.0"

__all__ = [
    "LumberjackError",
    "InvalidInputError",
    "OutOfBoundsError",
    "SearchLimitExceeded",
]
