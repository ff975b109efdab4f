"""Exploration state accumulated during a single attempt."""

from typing import Optional

from .maze_model import ORIGIN, Coordinate, Direction


class KnowledgeBase:
    """
    What the agent has learnt about the maze in one attempt.

    Passages are keyed by one fixed neighbouring cell:
    horizontal passages by the cell on their left,
    vertical passages by the cell above them.
    """

    def __init__(self, origin: Coordinate = ORIGIN):
        self.visited: set[Coordinate] = set()
        self.horizontal: dict[Coordinate, int] = {}
        self.vertical: dict[Coordinate, int] = {}
        self.rejected: set[tuple[Coordinate, Direction]] = set()

        self.visit(origin)

    @staticmethod
    def passage_key(at: Coordinate, direction: Direction) -> Coordinate:
        """Key of the passage leaving `at` in `direction`."""
        if direction in (Direction.LEFT, Direction.UP):
            return at.step(direction)
        return at

    def _counters(self, direction: Direction) -> dict[Coordinate, int]:
        return self.horizontal if direction.is_horizontal else self.vertical

    def passage_count(self, at: Coordinate, direction: Direction) -> int:
        """How many times the passage has been crossed."""
        return self._counters(direction).get(self.passage_key(at, direction), 0)

    def cross(self, at: Coordinate, direction: Direction, times: int = 1) -> int:
        """Record `times` crossings of a passage. Returns the new count."""
        if times < 1:
            raise ValueError(f"Crossing count must be positive, got {times}")
        counters = self._counters(direction)
        key = self.passage_key(at, direction)
        counters[key] = counters.get(key, 0) + times
        return counters[key]

    def visit(self, at: Coordinate) -> bool:
        """Mark a junction visited. Returns True the first time only."""
        if at in self.visited:
            return False
        self.visited.add(at)
        return True

    def is_visited(self, at: Coordinate) -> bool:
        return at in self.visited

    def reject(self, at: Coordinate, direction: Direction) -> None:
        """Remember a passage the host refused, from both of its ends."""
        self.rejected.add((at, direction))
        self.rejected.add((at.step(direction), direction.opposite))

    def is_rejected(self, at: Coordinate, direction: Direction) -> bool:
        return (at, direction) in self.rejected

    def max_count(self, at: Coordinate, directions: list[Direction]) -> Optional[int]:
        """Largest passage count among directions, None if there are none."""
        if not directions:
            return None
        return max(self.passage_count(at, d) for d in directions)

    def __repr__(self) -> str:
        return (
            f"KnowledgeBase(visited={len(self.visited)}, "
            f"horizontal={len(self.horizontal)}, vertical={len(self.vertical)})"
        )
