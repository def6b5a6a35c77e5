from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Set, Tuple, Union

from ..errors import InvalidInputError
from ..logger import logger
from .grid import TerrainGrid
from .pathfinding import Passability, min_distance
from .position import FLAT, TRENCH, Cell, Position

PositionLike = Union[Position, Tuple[int, int]]

log = logger.bind(component="forest")


def _as_position(pos: PositionLike) -> Position:
    if isinstance(pos, Position):
        return pos
    row, col = pos
    return Position(int(row), int(col))


def valid_height(h: int) -> bool:
    return h >= TRENCH


class ForestState:
    """The lumberjack's forest: a terrain grid plus the lumberjack's position.

    Flat spots are 0, impassable trenches are -1 and a tree of height n > 0 is
    stored as n. Every state owns a private copy of its grid and is never
    changed after construction; transitions build new states.
    """

    def __init__(self, grid: TerrainGrid, position: PositionLike):
        """Create a state from a grid and a lumberjack position.

        Args:
            grid: Terrain to take a private copy of
            position: Lumberjack position, checked to be on the grid

        Raises:
            InvalidInputError: if a height is below -1 or the position is off
                the grid
        """
        for cell in grid.cells():
            if not valid_height(cell.height):
                raise InvalidInputError(
                    f"Invalid height {cell.height} at {cell.position}, "
                    f"expected {TRENCH} or more"
                )
        position = _as_position(position)
        if not grid.in_bounds(position):
            raise InvalidInputError(
                f"Lumberjack position {position} is not on the "
                f"{grid.depth}x{grid.width} grid"
            )
        self._grid = grid.copy()
        self._position = position
        self._hash = hash((self._grid.shape, self._grid.content_key(), position))

    @classmethod
    def from_heights(
        cls, values: Sequence[Sequence[int]], position: PositionLike
    ) -> "ForestState":
        """Validate raw heights (every entry >= -1) and build the initial state."""
        return cls(TerrainGrid(values, valid_height), position)

    @classmethod
    def _adopt(cls, grid: TerrainGrid, position: Position) -> "ForestState":
        # Takes ownership of an already private grid copy
        state = cls.__new__(cls)
        state._grid = grid
        state._position = position
        state._hash = hash((grid.shape, grid.content_key(), position))
        return state

    @property
    def position(self) -> Position:
        return self._position

    @property
    def grid(self) -> TerrainGrid:
        return self._grid.copy()

    @property
    def depth(self) -> int:
        return self._grid.depth

    @property
    def width(self) -> int:
        return self._grid.width

    def height_at(self, pos: PositionLike) -> int:
        return self._grid.height(_as_position(pos))

    def __iter__(self) -> Iterator[Cell]:
        return self._grid.cells()

    def has_standing_trees(self) -> bool:
        return self._grid.count_trees() > 0

    def contour(self, height: int) -> Set[Position]:
        """Return the set of positions having exactly the given height."""
        return self._grid.find_cells(height)

    def next_choppable_trees(self) -> Set[Position]:
        """Return the trees that may be chopped next.

        These are all trees of the minimum standing height. Some of them may
        still be unreachable because of trenches and taller trees.
        """
        min_height = FLAT
        for cell in self:
            if cell.is_tree and (min_height == FLAT or cell.height < min_height):
                min_height = cell.height

        if min_height == FLAT:
            return set()

        return self.contour(min_height)

    def find_path(self, to: PositionLike) -> Optional[int]:
        """Find the shortest walk from the lumberjack to ``to``.

        A walk is a sequence of cardinal steps over flat ground. The only
        non-flat cell it may enter is ``to`` itself, and only if ``to`` is not
        a trench.

        Returns:
            Minimum distance, or None if there is no such walk
        """
        to = _as_position(to)
        passable = Passability.FLAT_OR_DESTINATION.predicate(to)
        return min_distance(self._grid, self._position, to, passable)

    def chop(self, pos: PositionLike) -> "ForestState":
        """Return the state after walking to ``pos`` and chopping it down."""
        pos = _as_position(pos)
        grid = self._grid.copy()
        grid.set_height(pos, FLAT)
        return ForestState._adopt(grid, pos)

    def successors(self) -> List["StateJump"]:
        """Return the states reachable by chopping one of the next trees.

        Trees with no walk to them are left out.
        """
        jumps = []
        for pos in sorted(self.next_choppable_trees()):
            dist = self.find_path(pos)
            if dist is None:
                log.debug(f"Tree at {pos} is unreachable from {self._position}")
                continue
            jumps.append(StateJump(self.chop(pos), dist))
        return jumps

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ForestState):
            return NotImplemented
        return (
            self._hash == other._hash
            and self._position == other._position
            and self._grid == other._grid
        )

    def __hash__(self) -> int:
        return self._hash

    def annotate(self, mark: str = "X") -> str:
        return self._grid.annotate(self._position, mark)

    def __str__(self) -> str:
        return f"{self._grid}\npos = {self._position}"

    def __repr__(self) -> str:
        return f"ForestState({self._grid.to_list()!r}, {self._position!r})"


@dataclass(frozen=True)
class StateJump:
    """A state paired with the distance walked to reach it from its predecessor."""

    state: ForestState
    distance: int

    def __post_init__(self):
        if self.distance < 0:
            raise ValueError(f"distance must be non-negative, got {self.distance}")
