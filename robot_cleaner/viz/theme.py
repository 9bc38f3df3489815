"""Visualization theme presets for grid renderers.

Themes are frozen dataclasses grouping all styling constants, so palettes can
be swapped via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Fill per cell state, in CellState declaration order
    empty_cell_color: str = "#F0F0F0"
    dirt_color: str = "#8D6E63"
    obstacle_color: str = "#263238"
    cleaned_color: str = "#81C784"
    robot_color: str = "#E53935"
    grid_line_color: str = "#CCCCCC"
    background_color: str = "#FFFFFF"
    title_color: str = "black"

    @property
    def cell_colors(self) -> tuple[str, ...]:
        """Colors indexed by cell code: empty, dirt, obstacle, cleaned, robot."""
        return (
            self.empty_cell_color,
            self.dirt_color,
            self.obstacle_color,
            self.cleaned_color,
            self.robot_color,
        )


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    empty_cell_color="#FFFFFF",
    dirt_color="#7f7f7f",
    obstacle_color="#000000",
    cleaned_color="#2ca02c",
    robot_color="#d62728",
    grid_line_color="#E0E0E0",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
