from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Set

import numpy as np

from ..errors import InvalidInputError, OutOfBoundsError
from .position import Cell, Position

EntryValidator = Callable[[int], bool]
CellPredicate = Callable[[Cell], bool]


class TerrainGrid:
    """A rectangular grid of integer heights.

    Rows correspond to depth and columns to width, so ``Position(row, col)``
    reads ``grid[row, col]``. The input values are always copied.
    """

    def __init__(
        self,
        values: Sequence[Sequence[int]],
        validator: Optional[EntryValidator] = None,
    ):
        """Build a grid from nested rows of ints.

        Args:
            values: At least one row, each with the same positive length
            validator: Optional check applied to every entry; a failing entry
                raises InvalidInputError

        Raises:
            InvalidInputError: on an empty dimension, ragged rows, non-integer
                or out of range entries, or an entry rejected by ``validator``
        """
        if isinstance(values, np.ndarray):
            values = values.tolist()
        try:
            rows = [list(row) for row in values]
        except TypeError as e:
            raise InvalidInputError(f"Grid must be a sequence of rows: {e}") from e
        if len(rows) == 0:
            raise InvalidInputError("Grid must have at least one row")
        width = len(rows[0])
        if width == 0:
            raise InvalidInputError("Grid must have at least one column")

        for i, row in enumerate(rows):
            if len(row) != width:
                raise InvalidInputError(
                    f"Grid row {i} has {len(row)} entries, expected {width}"
                )
            for j, value in enumerate(row):
                if isinstance(value, bool) or not isinstance(
                    value, (int, np.integer)
                ):
                    raise InvalidInputError(
                        f"Grid entry at ({i}, {j}) is not an integer: {value!r}"
                    )
                if validator is not None and not validator(int(value)):
                    raise InvalidInputError(
                        f"Invalid grid entry {value} at ({i}, {j})"
                    )

        try:
            self._grid = np.array(rows, dtype=int)
        except OverflowError as e:
            raise InvalidInputError(f"Grid entry out of range: {e}") from e

    @classmethod
    def _from_array(cls, array: np.ndarray) -> "TerrainGrid":
        grid = cls.__new__(cls)
        grid._grid = array.copy()
        return grid

    @property
    def depth(self) -> int:
        return self._grid.shape[0]

    @property
    def width(self) -> int:
        return self._grid.shape[1]

    @property
    def shape(self):
        return self._grid.shape

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.depth and 0 <= pos.col < self.width

    def _check_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise OutOfBoundsError(
                f"Position {pos} is outside {self.depth}x{self.width} grid"
            )

    def height(self, pos: Position) -> int:
        self._check_bounds(pos)
        return int(self._grid[pos.row, pos.col])

    def set_height(self, pos: Position, value: int) -> None:
        self._check_bounds(pos)
        self._grid[pos.row, pos.col] = value

    def cell(self, pos: Position) -> Cell:
        return Cell(pos.row, pos.col, self.height(pos))

    def cells(self) -> Iterator[Cell]:
        """Yield every cell once, across columns first, then down rows."""
        for row in range(self.depth):
            for col in range(self.width):
                yield Cell(row, col, int(self._grid[row, col]))

    def __iter__(self) -> Iterator[Cell]:
        return self.cells()

    def neighbors(self, pos: Position, passable: CellPredicate) -> Set[Position]:
        """Return in-bounds cardinal neighbours of ``pos`` accepted by ``passable``."""
        return {
            n
            for n in pos.cardinal_neighbors()
            if self.in_bounds(n) and passable(self.cell(n))
        }

    def find_cells(self, height: int) -> Set[Position]:
        rows, cols = np.nonzero(self._grid == height)
        return {Position(int(r), int(c)) for r, c in zip(rows, cols)}

    def max_height(self) -> int:
        return int(self._grid.max())

    def count_trees(self) -> int:
        return int(np.count_nonzero(self._grid > 0))

    def copy(self) -> "TerrainGrid":
        return TerrainGrid._from_array(self._grid)

    def content_key(self) -> bytes:
        return self._grid.tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TerrainGrid):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._grid, other._grid)
        )

    def __hash__(self) -> int:
        return hash((self.shape, self.content_key()))

    def to_list(self) -> List[List[int]]:
        return self._grid.tolist()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "depth": self.depth,
            "width": self.width,
            "grid": self.to_list(),
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], validator: Optional[EntryValidator] = None
    ) -> "TerrainGrid":
        if not isinstance(data, dict) or "grid" not in data:
            raise InvalidInputError("Grid payload is missing 'grid'")
        grid = cls(data["grid"], validator)
        if "depth" in data and data["depth"] != grid.depth:
            raise InvalidInputError(
                f"Grid depth {grid.depth} does not match declared {data['depth']}"
            )
        if "width" in data and data["width"] != grid.width:
            raise InvalidInputError(
                f"Grid width {grid.width} does not match declared {data['width']}"
            )
        return grid

    def annotate(self, pos: Optional[Position] = None, mark: str = "") -> str:
        """Format the grid as right-aligned text, putting ``mark`` at ``pos``.

        With an empty mark the grid is rendered as is.
        """
        entry_width = max(len(str(v)) for v in self._grid.flat)
        entry_width = max(entry_width, len(mark))

        lines = []
        for row in range(self.depth):
            entries = []
            for col in range(self.width):
                if mark and pos is not None and pos == Position(row, col):
                    entries.append(f"{mark:>{entry_width}}")
                else:
                    entries.append(f"{int(self._grid[row, col]):>{entry_width}}")
            lines.append(" ".join(entries))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.annotate()

    def __repr__(self) -> str:
        return f"TerrainGrid({self.to_list()!r})"
