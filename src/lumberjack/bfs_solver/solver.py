"""
Pruned BFS over forest states, finding the shortest walk that chops down
every tree from shortest to tallest.
"""

import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..errors import SearchLimitExceeded
from ..game.state import ForestState, StateJump
from ..logger import logger
from .config import SolverConfig
from .path import Path

NO_SOLUTION = -1


@dataclass
class SolverResult:
    """Result of a solver run."""

    path: Optional[Path]
    distance: int
    success: bool
    rounds: int
    nodes_explored: int
    states_seen: int
    terminal_paths: int
    dead_ends: int
    time_taken_ms: float
    truncated: bool = False
    limit_reason: Optional[str] = None


class Solver:
    """BFS solver for the lumberjack forest."""

    def __init__(self, initial: ForestState, config: Optional[SolverConfig] = None):
        """Initialize the solver.

        Args:
            initial: Forest and lumberjack position to start from
            config: Optional search limits; unbounded by default
        """
        self.initial = initial
        self.config = config if config is not None else SolverConfig()
        self.logger = logger.bind(component="solver")

    def solve(self) -> int:
        """Return the minimal distance needed to cut down the whole forest.

        Returns NO_SOLUTION (-1) if the forest cannot be cleared.

        Raises:
            SearchLimitExceeded: if a configured limit stopped the search
        """
        path = self.detailed_solve()
        if path is None:
            return NO_SOLUTION
        return path.distance

    def detailed_solve(self) -> Optional[Path]:
        """Return a minimal path that cuts down all trees in height order.

        Raises:
            SearchLimitExceeded: if a configured limit stopped the search
        """
        result = self.run()
        if result.truncated:
            raise SearchLimitExceeded(
                f"Search stopped after {result.rounds} rounds: {result.limit_reason}"
            )
        return result.path

    def run(self) -> SolverResult:
        """Run the pruned BFS and report statistics alongside the best path."""
        start_time = time.time()

        # Best known distance to every forest state reached so far
        best_known: Dict[ForestState, int] = {self.initial: 0}

        frontier: List[Path] = [Path.start(self.initial)]
        # Paths whose final state has no successors, cleared or stuck
        terminal: List[Path] = []

        rounds = 0
        nodes_explored = 0
        limit_reason = None

        while frontier:
            expanding: List[Tuple[Path, List[StateJump]]] = []
            for path in frontier:
                nodes_explored += 1
                jumps = path.final_state.successors()
                if jumps:
                    expanding.append((path, jumps))
                else:
                    terminal.append(path)

            # A round only counts once it chops something
            if not expanding:
                break

            limit_reason = self._check_limits(rounds, start_time)
            if limit_reason is not None:
                break

            # Every chop removes exactly one tree, so a state can only show up
            # in one round. Keeping one path per state here prunes the rest.
            next_frontier: Dict[ForestState, Path] = {}
            for path, jumps in expanding:
                for jump in jumps:
                    total = path.distance + jump.distance
                    known = best_known.get(jump.state)
                    if known is None and self._state_cap_reached(len(best_known)):
                        limit_reason = f"max_states={self.config.max_states}"
                        break
                    if known is None or known > total:
                        best_known[jump.state] = total
                        next_frontier[jump.state] = path.extend(jump)
                if limit_reason is not None:
                    break

            if limit_reason is not None:
                break

            frontier = list(next_frontier.values())
            rounds += 1
            self.logger.debug(f"Round {rounds}: path set size {len(frontier)}")

        elapsed_ms = (time.time() - start_time) * 1000

        if limit_reason is not None:
            self.logger.warning(
                f"Search truncated after {rounds} rounds ({limit_reason})"
            )
            return SolverResult(
                path=None,
                distance=NO_SOLUTION,
                success=False,
                rounds=rounds,
                nodes_explored=nodes_explored,
                states_seen=len(best_known),
                terminal_paths=len(terminal),
                dead_ends=0,
                time_taken_ms=elapsed_ms,
                truncated=True,
                limit_reason=limit_reason,
            )

        # Drop paths that got stuck with trees still standing
        cleared = [p for p in terminal if not p.final_state.has_standing_trees()]
        dead_ends = len(terminal) - len(cleared)
        if dead_ends:
            self.logger.warning(
                f"Filtered {dead_ends} final paths with trees left"
            )

        best_path = min(cleared, key=lambda p: p.distance) if cleared else None

        self.logger.info(
            f"{rounds} BFS rounds, {len(best_known)} states, "
            f"{nodes_explored} nodes in {elapsed_ms:.1f}ms"
        )

        return SolverResult(
            path=best_path,
            distance=best_path.distance if best_path is not None else NO_SOLUTION,
            success=best_path is not None,
            rounds=rounds,
            nodes_explored=nodes_explored,
            states_seen=len(best_known),
            terminal_paths=len(terminal),
            dead_ends=dead_ends,
            time_taken_ms=elapsed_ms,
        )

    def _state_cap_reached(self, states_seen: int) -> bool:
        max_states = self.config.max_states
        return max_states is not None and states_seen >= max_states

    def _check_limits(self, rounds: int, start_time: float) -> Optional[str]:
        """Return why the search must stop before another round, or None."""
        config = self.config
        if config.max_rounds is not None and rounds >= config.max_rounds:
            return f"max_rounds={config.max_rounds}"
        if config.timeout_ms is not None:
            elapsed_ms = (time.time() - start_time) * 1000
            if elapsed_ms > config.timeout_ms:
                return f"timeout_ms={config.timeout_ms}"
        return None
