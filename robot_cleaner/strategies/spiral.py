"""Outward square-spiral coverage from the grid centre."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from robot_cleaner.domain.agent import Agent

# East, South, West, North in screen coordinates (y grows downwards)
DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


def spiral_start(width: int, height: int) -> tuple[int, int]:
    """Centre cell, rounding towards the top-left on even dimensions."""
    return ((width - 1) // 2, (height - 1) // 2)


class SpiralStrategy:
    """Square spiral with segment lengths 1, 1, 2, 2, 3, 3, ...

    The planned position advances whether or not each move succeeds. The run
    stops once the segment length exceeds ``min(width, height)``, which does
    not guarantee that every cell is reached on non-square grids.
    """

    def run_full_cleaning(self, agent: Agent) -> None:
        width, height = agent.grid.width, agent.grid.height
        pos_x, pos_y = spiral_start(width, height)
        agent.move(pos_x, pos_y)
        agent.clean_current_spot()

        segment_length = 1
        direction = 0
        while segment_length <= min(width, height):
            dx, dy = DIRECTIONS[direction]
            for _ in range(segment_length):
                pos_x += dx
                pos_y += dy
                agent.move(pos_x, pos_y)
                agent.clean_current_spot()
            direction = (direction + 1) % len(DIRECTIONS)
            if direction % 2 == 0:
                segment_length += 1
