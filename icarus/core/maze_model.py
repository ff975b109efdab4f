"""
Icarus Maze Model

Value types describing what the agent knows about a single cell:
- Direction labels understood by the maze host
- Coordinates relative to the agent's start cell
- Surveys of the walls around the current cell

Axis orientation:
    up    = y - 1
    down  = y + 1
    left  = x - 1
    right = x + 1
"""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Movement directions, valued by their wire labels."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_label(cls, label: "Direction | str") -> "Direction":
        """Convert a wire label to a Direction."""
        if isinstance(label, cls):
            return label
        try:
            return cls(label)
        except ValueError:
            valid = tuple(d.value for d in cls)
            raise ValueError(
                f"Invalid direction '{label}'. Must be one of: {valid}"
            ) from None

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        deltas = {
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.RIGHT: (1, 0),
            Direction.LEFT: (-1, 0),
        }
        return deltas[self]

    @property
    def opposite(self) -> "Direction":
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


@dataclass(frozen=True)
class Coordinate:
    """Position relative to the agent's start cell."""
    x: int
    y: int

    def step(self, direction: Direction) -> "Coordinate":
        """Return the neighbouring coordinate in direction."""
        dx, dy = direction.delta
        return Coordinate(self.x + dx, self.y + dy)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


ORIGIN = Coordinate(0, 0)


@dataclass(frozen=True)
class Survey:
    """Walls around the current cell. True means the way is blocked."""
    top: bool = False
    right: bool = False
    bottom: bool = False
    left: bool = False

    def blocks(self, direction: Direction) -> bool:
        """Check whether a wall blocks movement in direction."""
        walls = {
            Direction.UP: self.top,
            Direction.DOWN: self.bottom,
            Direction.RIGHT: self.right,
            Direction.LEFT: self.left,
        }
        return walls[direction]

    def open_directions(self) -> list[Direction]:
        """Directions not blocked by a wall, in declaration order."""
        return [d for d in Direction if not self.blocks(d)]

    def __repr__(self) -> str:
        marks = "".join(
            label if self.blocks(d) else "."
            for label, d in zip("URDL", (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT))
        )
        return f"Survey({marks})"
