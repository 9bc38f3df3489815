"""Typed render payloads.

A ``Frame`` is what every renderer receives after a successful move or a
cleaning action. It is a frozen copy of the grid plus the agent position, so
a renderer holding on to frames cannot observe or cause later mutation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from robot_cleaner.domain.grid import Cells, CellState


class RenderEvent(Enum):
    """Agent action that triggered a render notification."""

    MOVE = "move"
    CLEAN = "clean"


@dataclass(frozen=True)
class Frame:
    """Immutable snapshot of the world at one render notification."""

    step: int
    event: RenderEvent
    x: int
    y: int
    cells: Cells

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self) -> int:
        return len(self.cells)

    def state_at(self, x: int, y: int) -> CellState:
        return self.cells[y][x]
