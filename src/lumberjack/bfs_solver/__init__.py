"""
BFS solver for the lumberjack forest.

Finds the shortest walk that clears the forest in height order.
"""

from .config import SolverConfig
from .path import Path
from .solver import NO_SOLUTION, Solver, SolverResult

__all__ = ["Solver", "SolverResult", "SolverConfig", "Path", "NO_SOLUTION"]
