"""Cleaning agent: position, move/clean contract and strategy delegation."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from robot_cleaner.config.constants import START_POSITION
from robot_cleaner.domain.grid import Grid
from robot_cleaner.domain.snapshot import Frame, RenderEvent

if TYPE_CHECKING:
    from robot_cleaner.strategies.base import Strategy

logger = logging.getLogger(__name__)

Renderer = Callable[[Frame], None]
"""Presentation sink notified after every successful move and clean."""


class Agent:
    """Single cleaning robot operating on a borrowed ``Grid``.

    The agent starts at ``START_POSITION`` whatever that cell contains. A move
    is legal iff the target is in bounds and not an obstacle; an illegal move
    leaves the agent where it is and is reported as ``False``, never raised.
    """

    def __init__(
        self,
        grid: Grid,
        strategy: Strategy,
        renderers: Iterable[Renderer] = (),
    ) -> None:
        self._grid = grid
        self._strategy = strategy
        self._renderers = list(renderers)
        self.x, self.y = START_POSITION
        self.path: list[tuple[int, int]] = []
        self.cleaned: list[tuple[int, int]] = []
        self.blocked_moves = 0
        self._frames_emitted = 0

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def move(self, new_x: int, new_y: int) -> bool:
        """Relocate to (new_x, new_y) if the cell is enterable."""
        if self._grid.is_in_bounds(new_x, new_y) and not self._grid.is_obstacle(new_x, new_y):
            self.x, self.y = new_x, new_y
            self.path.append((new_x, new_y))
            self._notify(RenderEvent.MOVE)
            return True
        self.blocked_moves += 1
        logger.debug("Move to (%d, %d) blocked; staying at (%d, %d)", new_x, new_y, self.x, self.y)
        return False

    def clean_current_spot(self) -> None:
        """Clean the occupied cell if it holds dirt; otherwise do nothing.

        This is the only call site of ``Grid.clean`` during a run.
        """
        if not self._grid.is_dirt(self.x, self.y):
            return
        self._grid.clean(self.x, self.y)
        self.cleaned.append((self.x, self.y))
        self._notify(RenderEvent.CLEAN)

    def start_cleaning(self) -> None:
        """Run the configured strategy to completion."""
        name = type(self._strategy).__name__
        logger.info("Starting %s at (%d, %d)", name, self.x, self.y)
        self._strategy.run_full_cleaning(self)
        logger.info(
            "%s finished at (%d, %d): %d moves, %d blocked, %d cleaned",
            name,
            self.x,
            self.y,
            len(self.path),
            self.blocked_moves,
            len(self.cleaned),
        )

    def snapshot(self, event: RenderEvent) -> Frame:
        return Frame(
            step=self._frames_emitted,
            event=event,
            x=self.x,
            y=self.y,
            cells=self._grid.cells(),
        )

    def _notify(self, event: RenderEvent) -> None:
        if self._renderers:
            frame = self.snapshot(event)
            for render in self._renderers:
                render(frame)
        self._frames_emitted += 1
