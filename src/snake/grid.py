# grid.py
from enum import Enum
from typing import Iterator, Tuple

Position = Tuple[int, int]


class Direction(Enum):
    """Unit step on the grid, (dx, dy) with y growing downwards."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.dx + b.dx == 0 and a.dy + b.dy == 0


def step(pos: Position, direction: Direction) -> Position:
    """Neighbouring cell of pos in the given direction (no bounds check)."""
    return (pos[0] + direction.dx, pos[1] + direction.dy)


def in_bounds(pos: Position, columns: int, rows: int) -> bool:
    x, y = pos
    return 0 <= x < columns and 0 <= y < rows


def all_cells(columns: int, rows: int) -> Iterator[Position]:
    """Every cell of the grid, row by row."""
    for y in range(rows):
        for x in range(columns):
            yield (x, y)
