"""
Terrain grid, forest states and level handling for the lumberjack solver.
"""

from .grid import TerrainGrid
from .levels import BUILTIN_LEVELS, ForestLevel, LevelMetadata, get_builtin_level
from .pathfinding import Passability, min_distance
from .position import Cell, Direction, Position
from .state import ForestState, StateJump

__all__ = [
    "Cell",
    "Direction",
    "Position",
    "TerrainGrid",
    "Passability",
    "min_distance",
    "ForestState",
    "StateJump",
    "ForestLevel",
    "LevelMetadata",
    "BUILTIN_LEVELS",
    "get_builtin_level",
]
