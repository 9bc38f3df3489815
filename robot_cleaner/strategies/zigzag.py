"""Boustrophedon coverage: sweep each row, reversing direction every row."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from robot_cleaner.domain.agent import Agent


class ZigzagStrategy:
    """Row-by-row sweep starting left-to-right on row 0.

    Every cell of a row is attempted in order; a blocked cell is skipped
    without detour and the current spot is still cleaned.
    """

    def run_full_cleaning(self, agent: Agent) -> None:
        width, height = agent.grid.width, agent.grid.height
        direction = 1
        for y in range(height):
            xs = range(width) if direction == 1 else range(width - 1, -1, -1)
            for x in xs:
                agent.move(x, y)
                agent.clean_current_spot()
            direction = -direction
