"""Domain layer: grid, agent and render snapshots."""

from robot_cleaner.domain.agent import Agent, Renderer
from robot_cleaner.domain.grid import Cells, CellState, CellStateError, Grid, GridBoundsError
from robot_cleaner.domain.snapshot import Frame, RenderEvent

__all__ = [
    "Agent",
    "CellState",
    "CellStateError",
    "Cells",
    "Frame",
    "Grid",
    "GridBoundsError",
    "RenderEvent",
    "Renderer",
]
