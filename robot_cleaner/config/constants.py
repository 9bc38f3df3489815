"""Centralized defaults for cleaning simulations.

All literals shared by the runner, renderers and CLI are defined here.
Consuming modules should import from this module rather than defining
their own inline values.
"""

from __future__ import annotations

GRID_WIDTH = 9
"""Default grid width in cells."""

GRID_HEIGHT = 9
"""Default grid height in cells."""

START_POSITION: tuple[int, int] = (0, 0)
"""Cell the agent occupies before its strategy issues the first move."""

DEFAULT_DIRT: tuple[tuple[int, int], ...] = ((5, 3), (1, 8), (8, 8))
"""Dirt cells of the reference scenario."""

DEFAULT_OBSTACLES: tuple[tuple[int, int], ...] = ((8, 4),)
"""Obstacle cells of the reference scenario."""

DEFAULT_STRATEGY = "spiral"
"""Strategy used by the reference scenario."""

RENDER_DELAY_SECONDS = 0.2
"""Pause after each console redraw."""

FLUSH_THRESHOLD = 4_096
"""Flush event-log rows to Parquet once this in-memory row count is reached."""

CELL_GLYPHS: dict[str, str] = {
    "empty": ".",
    "dirt": "D",
    "obstacle": "#",
    "cleaned": "C",
}
"""Console glyph per cell-state value."""

ROBOT_GLYPH = "R"
"""Console glyph for the agent's cell."""

DISPLAY_TITLE = "Vacuum cleaner robot simulation"
DISPLAY_LEGEND = "Legends: #=Obstacles, D=Dirt, .=Empty, R=Robot, C=Cleaned"
