"""
Shortest-path search over a terrain grid.

All moves are single cardinal steps of unit cost, so Dijkstra's algorithm
reduces to a layered breadth-first search.
"""

from enum import Enum
from typing import Callable, Dict, Optional, Set

from .grid import CellPredicate, TerrainGrid
from .position import Cell, Position


class Passability(Enum):
    """Rules deciding which cells a walk may step onto."""

    FLAT_ONLY = "flat_only"
    FLAT_OR_DESTINATION = "flat_or_destination"

    def predicate(self, destination: Optional[Position] = None) -> CellPredicate:
        """Build the per-cell test for this rule.

        Args:
            destination: Target of the walk, required for FLAT_OR_DESTINATION

        Returns:
            Callable accepting a Cell and returning whether it may be entered
        """
        if self is Passability.FLAT_ONLY:
            return _flat_only

        if destination is None:
            raise ValueError(f"{self.name} requires a destination")

        def flat_or_destination(cell: Cell) -> bool:
            # Trenches stay closed even when they are the destination
            if cell.is_flat:
                return True
            return not cell.is_trench and cell.position == destination

        return flat_or_destination


def _flat_only(cell: Cell) -> bool:
    return cell.is_flat


def min_distance(
    grid: TerrainGrid,
    start: Position,
    goal: Position,
    passable: Callable[[Cell], bool],
) -> Optional[int]:
    """Compute the minimum number of cardinal steps from ``start`` to ``goal``.

    ``passable`` is evaluated on cells reached by expansion only, never on
    ``start``: the walker is already standing there.

    Args:
        grid: Terrain to walk over
        start: Starting position (must be on the grid)
        goal: Destination position
        passable: Per-cell test deciding whether a cell may be entered

    Returns:
        The minimum distance, or None if ``goal`` cannot be reached
    """
    grid.cell(start)  # bounds check

    frontier: Set[Position] = {start}
    # A position is visited once all of its neighbours have distances recorded
    visited: Set[Position] = set()
    best: Dict[Position, int] = {start: 0}

    # Invariant: every frontier position is unvisited and has an entry in best
    while frontier:
        next_frontier: Set[Position] = set()
        for pos in frontier:
            dist = best[pos] + 1
            for n in grid.neighbors(pos, passable):
                if n not in best or best[n] > dist:
                    best[n] = dist
                if n not in visited and n not in frontier:
                    next_frontier.add(n)
            visited.add(pos)
        frontier = next_frontier

    return best.get(goal)
