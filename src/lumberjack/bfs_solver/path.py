from typing import Iterable, Iterator, List, Optional, Tuple

from ..game.position import Position
from ..game.state import ForestState, StateJump


class Path:
    """An ordered record of state jumps with a running total distance.

    By convention the first step is the initial state with distance zero.
    Paths are never modified in place; ``extend`` returns a new path.
    """

    __slots__ = ("_steps", "_distance")

    def __init__(self, steps: Iterable[StateJump] = ()):
        self._steps: Tuple[StateJump, ...] = tuple(steps)
        self._distance = sum(step.distance for step in self._steps)

    @classmethod
    def start(cls, state: ForestState) -> "Path":
        return cls([StateJump(state, 0)])

    @classmethod
    def _append(cls, steps: Tuple[StateJump, ...], distance: int) -> "Path":
        path = cls.__new__(cls)
        path._steps = steps
        path._distance = distance
        return path

    def extend(self, step: StateJump) -> "Path":
        """Return a new path with ``step`` added to the end."""
        return Path._append(self._steps + (step,), self._distance + step.distance)

    @property
    def distance(self) -> int:
        return self._distance

    @property
    def num_steps(self) -> int:
        return len(self._steps)

    @property
    def head(self) -> Optional[StateJump]:
        """Return the last step, or None for an empty path."""
        if not self._steps:
            return None
        return self._steps[-1]

    @property
    def final_state(self) -> Optional[ForestState]:
        head = self.head
        return head.state if head is not None else None

    @property
    def steps(self) -> Tuple[StateJump, ...]:
        return self._steps

    def positions(self) -> List[Position]:
        return [step.state.position for step in self._steps]

    def legs(self) -> List[Tuple[Position, int]]:
        """Return (position, distance walked to get there) for every step."""
        return [(step.state.position, step.distance) for step in self._steps]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[StateJump]:
        return iter(self._steps)

    def __str__(self) -> str:
        return " -> ".join(str(pos) for pos in self.positions())

    def __repr__(self) -> str:
        return f"Path({self}, distance={self._distance})"
