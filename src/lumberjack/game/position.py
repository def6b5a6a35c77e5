from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple

TRENCH = -1
FLAT = 0


class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def drow(self) -> int:
        return self.value[0]

    @property
    def dcol(self) -> int:
        return self.value[1]

    def opposite(self) -> "Direction":
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]


@dataclass(frozen=True, order=True)
class Position:
    """A grid location. ``row`` measures depth, ``col`` measures width."""

    row: int
    col: int

    def step(self, direction: Direction) -> "Position":
        return Position(self.row + direction.drow, self.col + direction.dcol)

    def cardinal_neighbors(self) -> Iterator["Position"]:
        """Yield the four cardinal neighbours; bounds are not checked."""
        for direction in Direction:
            yield self.step(direction)

    def manhattan(self, other: "Position") -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True)
class Cell:
    """What a grid holds at a position, captured at query time."""

    row: int
    col: int
    height: int

    @property
    def position(self) -> Position:
        return Position(self.row, self.col)

    @property
    def is_flat(self) -> bool:
        return self.height == FLAT

    @property
    def is_trench(self) -> bool:
        return self.height == TRENCH

    @property
    def is_tree(self) -> bool:
        return self.height > 0

    def __str__(self) -> str:
        return f"({self.row}, {self.col}, {self.height})"
