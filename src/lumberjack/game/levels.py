import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..errors import InvalidInputError
from .grid import TerrainGrid
from .position import Position
from .state import ForestState, valid_height


@dataclass
class LevelMetadata:
    name: str
    description: str = ""
    difficulty: str = "medium"
    author: str = "Unknown"
    version: str = "1.0"
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "difficulty": self.difficulty,
            "author": self.author,
            "version": self.version,
            "tags": self.tags,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LevelMetadata":
        return cls(
            name=data.get("name", "Untitled"),
            description=data.get("description", ""),
            difficulty=data.get("difficulty", "medium"),
            author=data.get("author", "Unknown"),
            version=data.get("version", "1.0"),
            tags=list(data.get("tags", [])),
        )


class ForestLevel:
    """A forest puzzle: terrain plus the lumberjack's starting position."""

    def __init__(self, metadata: LevelMetadata, grid: TerrainGrid, start: Position):
        self.metadata = metadata
        self.grid = grid
        self.start = start

    def create_state(self) -> ForestState:
        return ForestState(self.grid, self.start)

    def validate(self) -> List[str]:
        errors = []

        for cell in self.grid.cells():
            if not valid_height(cell.height):
                errors.append(f"Height {cell.height} at {cell.position} is below -1")

        if not self.grid.in_bounds(self.start):
            errors.append(f"Start {self.start} is outside the grid")

        return errors

    def tree_count(self) -> int:
        return self.grid.count_trees()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "grid": self.grid.to_dict(),
            "start": [self.start.row, self.start.col],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ForestLevel":
        try:
            metadata = LevelMetadata.from_dict(data.get("metadata", {}))
            grid_data = data["grid"]
            row, col = data["start"]
            start = Position(int(row), int(col))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise InvalidInputError(f"Malformed level payload: {e}") from e

        grid = TerrainGrid.from_dict(grid_data, valid_height)
        if not grid.in_bounds(start):
            raise InvalidInputError(f"Start {start} is outside the grid")
        return cls(metadata, grid, start)

    def save_to_file(self, filename: str) -> None:
        with open(filename, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filename: str) -> "ForestLevel":
        with open(filename, "r") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidInputError(f"{filename} is not valid JSON: {e}") from e
        return cls.from_dict(data)

    def __str__(self) -> str:
        return (
            f"Level: {self.metadata.name} ({self.grid.depth}x{self.grid.width}, "
            f"{self.tree_count()} trees)"
        )


# name -> (grid, start, description)
_BUILTIN: Dict[str, Tuple[List[List[int]], Tuple[int, int], str]] = {
    "grid1": (
        [[0, 1, 0],
         [0, 0, -1],
         [3, 0, 0]],
        (0, 0),
        "Two trees, chop right then walk round to the tall one",
    ),
    "moat": (
        [[0, 0, 0, 0, 0],
         [0, -1, -1, -1, 0],
         [0, -1, 1, -1, 0],
         [0, -1, -1, -1, 0],
         [0, 0, 0, 0, 0]],
        (0, 0),
        "A single tree surrounded by a trench, unsolvable",
    ),
    "line": (
        [[1, 1, 1, 1],
         [0, 0, 0, 0]],
        (1, 0),
        "A line of equal trees with lots of branching",
    ),
    "grid6": (
        [[0, 0, 0, 0, 3],
         [0, 2, -1, 0, 0],
         [0, -1, -1, 0, 0],
         [0, 0, 0, 0, 0],
         [4, 0, 0, 0, 1]],
        (0, 0),
        "Four trees at the corners of a trench, one way through",
    ),
    "dense": (
        [[1, 1, 1, 2, 3],
         [1, 1, 1, 2, 1],
         [1, 1, 2, 2, 1],
         [1, 2, 2, 2, 1],
         [1, 1, 1, 1, 0]],
        (4, 4),
        "Almost no flat ground, heavy branching",
    ),
}  # fmt: skip

BUILTIN_LEVELS = sorted(_BUILTIN)


def get_builtin_level(name: str) -> ForestLevel:
    """Return a fresh copy of a named sample forest."""
    if name not in _BUILTIN:
        raise InvalidInputError(
            f"Unknown level {name!r}, expected one of {', '.join(BUILTIN_LEVELS)}"
        )
    values, (row, col), description = _BUILTIN[name]
    metadata = LevelMetadata(
        name=name, description=description, author="builtin", tags=["builtin"]
    )
    return ForestLevel(metadata, TerrainGrid(values, valid_height), Position(row, col))
