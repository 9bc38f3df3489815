"""Bounded 2D cell grid holding dirt, obstacles and cleaning progress.

Every in-bounds coordinate holds exactly one ``CellState``. Coordinates
outside ``[0, width) x [0, height)`` do not exist: queries on them answer
``False`` and setters refuse them with ``GridBoundsError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Cells = tuple[tuple["CellState", ...], ...]
"""Row-major immutable cell snapshot, indexed ``cells[y][x]``."""


class CellState(Enum):
    """Contents of a single grid cell."""

    EMPTY = "empty"
    DIRT = "dirt"
    OBSTACLE = "obstacle"
    CLEANED = "cleaned"


class GridBoundsError(IndexError):
    """Raised when a setter addresses a coordinate outside the grid."""


class CellStateError(ValueError):
    """Raised when a transition is requested from the wrong cell state."""


def _is_coordinate(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Grid:
    """Fixed-size field of cells, all ``EMPTY`` on creation."""

    width: int
    height: int
    _cells: dict[tuple[int, int], CellState] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"grid dimensions must be positive, got {self.width}x{self.height}")
        self._cells = {
            (x, y): CellState.EMPTY for x in range(self.width) for y in range(self.height)
        }

    def is_in_bounds(self, x: int, y: int) -> bool:
        """True iff (x, y) is an integer coordinate inside the grid."""
        if not (_is_coordinate(x) and _is_coordinate(y)):
            return False
        return 0 <= x < self.width and 0 <= y < self.height

    def is_dirt(self, x: int, y: int) -> bool:
        return self.is_in_bounds(x, y) and self._cells[(x, y)] is CellState.DIRT

    def is_obstacle(self, x: int, y: int) -> bool:
        return self.is_in_bounds(x, y) and self._cells[(x, y)] is CellState.OBSTACLE

    def cell(self, x: int, y: int) -> CellState:
        """Return the state at (x, y); raises ``GridBoundsError`` when out of bounds."""
        self._require_in_bounds(x, y)
        return self._cells[(x, y)]

    def add_obstacle(self, x: int, y: int) -> None:
        """Mark (x, y) as an obstacle, replacing whatever was there."""
        self._require_in_bounds(x, y)
        self._cells[(x, y)] = CellState.OBSTACLE

    def add_dirt(self, x: int, y: int) -> None:
        """Mark (x, y) as dirty, replacing whatever was there."""
        self._require_in_bounds(x, y)
        self._cells[(x, y)] = CellState.DIRT

    def clean(self, x: int, y: int) -> None:
        """Turn a dirty cell into a cleaned one.

        Out-of-bounds coordinates are ignored. Only ``DIRT`` may be cleaned;
        any other in-bounds state raises ``CellStateError`` so obstacles and
        empty floor can never be reported as cleaned.
        """
        if not self.is_in_bounds(x, y):
            return
        current = self._cells[(x, y)]
        if current is not CellState.DIRT:
            raise CellStateError(f"cannot clean ({x}, {y}): cell is {current.value}")
        self._cells[(x, y)] = CellState.CLEANED

    def count(self, state: CellState) -> int:
        return sum(1 for value in self._cells.values() if value is state)

    def cells(self) -> Cells:
        """Immutable row-major snapshot of every cell."""
        return tuple(
            tuple(self._cells[(x, y)] for x in range(self.width)) for y in range(self.height)
        )

    def _require_in_bounds(self, x: int, y: int) -> None:
        if not self.is_in_bounds(x, y):
            raise GridBoundsError(
                f"({x!r}, {y!r}) is outside the {self.width}x{self.height} grid"
            )
