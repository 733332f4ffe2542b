"""
Grid geometry for the snake board.

Coordinates are plain (x, y) tuples with (0, 0) in the top-left corner,
y growing downwards as on screen.
"""

from enum import Enum
from typing import Iterator, Tuple

Coordinate = Tuple[int, int]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self):
        return Direction((-self.value[0], -self.value[1]))

    def step(self, position: Coordinate) -> Coordinate:
        """Return the cell one step from position in this direction"""
        return (position[0] + self.value[0], position[1] + self.value[1])


# Candidate order used wherever neighbours are enumerated
NEIGHBOUR_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


def manhattan_distance(a: Coordinate, b: Coordinate) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Grid:
    """Fixed-size rectangular board"""

    def __init__(self, width=50, height=40):
        self.width = width
        self.height = height

    def in_bounds(self, position: Coordinate) -> bool:
        return 0 <= position[0] < self.width and 0 <= position[1] < self.height

    def neighbors(self, position: Coordinate) -> Iterator[Coordinate]:
        """Yield the four axis neighbours (Up, Down, Left, Right), bounds unchecked"""
        for direction in NEIGHBOUR_ORDER:
            yield direction.step(position)

    def center(self) -> Coordinate:
        return (self.width // 2, self.height // 2)

    def __repr__(self):
        return f"Grid({self.width}x{self.height})"
