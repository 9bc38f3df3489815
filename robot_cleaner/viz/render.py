"""Renderers for cleaning runs: terminal redraw and matplotlib figures."""

from __future__ import annotations

import json
import sys
import time
from pathlib import Path
from typing import TextIO

import matplotlib.pyplot as plt
import numpy as np
import pyarrow.parquet as pq
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.patches import Patch

from robot_cleaner.config.constants import (
    CELL_GLYPHS,
    DISPLAY_LEGEND,
    DISPLAY_TITLE,
    RENDER_DELAY_SECONDS,
    ROBOT_GLYPH,
)
from robot_cleaner.config.types import ScenarioConfig
from robot_cleaner.domain.grid import Cells, CellState
from robot_cleaner.domain.snapshot import Frame, RenderEvent
from robot_cleaner.io.paths import resolve_within_base as _resolve_within_base
from robot_cleaner.simulation.engine import build_grid
from robot_cleaner.viz.theme import DEFAULT_THEME, Theme, get_theme

_active_theme: Theme = DEFAULT_THEME

# Cell codes used in image arrays; the robot overrides its cell
_CELL_CODES: dict[CellState, int] = {state: i for i, state in enumerate(CellState)}
ROBOT_CODE = len(_CELL_CODES)
_CELL_LABELS = ("Empty", "Dirt", "Obstacle", "Cleaned", "Robot")

_ANSI_CLEAR = "\033[2J\033[H"


def set_active_theme(name: str) -> Theme:
    """Select the theme used when renderers are called without one."""
    global _active_theme
    _active_theme = get_theme(name)
    return _active_theme


def active_theme() -> Theme:
    return _active_theme


# ---------------------------------------------------------------------------
# Terminal rendering
# ---------------------------------------------------------------------------


def format_frame(frame: Frame) -> str:
    """Build the text screen for *frame*: title, legend, then one row per line."""
    lines = [DISPLAY_TITLE, "-" * 32, DISPLAY_LEGEND]
    for y, row in enumerate(frame.cells):
        glyphs = [
            ROBOT_GLYPH if (x, y) == (frame.x, frame.y) else CELL_GLYPHS[state.value]
            for x, state in enumerate(row)
        ]
        lines.append("".join(f"{g} " for g in glyphs))
    return "\n".join(lines) + "\n"


class ConsoleRenderer:
    """Redraw the whole grid on every notification, then pause."""

    def __init__(
        self,
        delay: float = RENDER_DELAY_SECONDS,
        stream: TextIO | None = None,
        clear: bool = True,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.delay = delay
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear

    def __call__(self, frame: Frame) -> None:
        if self.clear:
            self.stream.write(_ANSI_CLEAR)
        self.stream.write(format_frame(frame))
        self.stream.flush()
        if self.delay:
            time.sleep(self.delay)


# ---------------------------------------------------------------------------
# Cell-fill helpers
# ---------------------------------------------------------------------------


def _build_cell_array(cells: Cells, robot: tuple[int, int] | None = None) -> np.ndarray:
    """Return (H, W) int array of cell codes, with the robot's cell marked."""
    grid = np.array([[_CELL_CODES[state] for state in row] for row in cells], dtype=int)
    if robot is not None:
        x, y = robot
        if 0 <= y < grid.shape[0] and 0 <= x < grid.shape[1]:
            grid[y, x] = ROBOT_CODE
    return grid


def _cell_cmap(theme: Theme) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 5-color colormap (4 cell states + robot)."""
    cmap = ListedColormap(list(theme.cell_colors))
    norm = BoundaryNorm([-0.5, 0.5, 1.5, 2.5, 3.5, 4.5], cmap.N)
    return cmap, norm


def _build_cell_legend_handles(theme: Theme) -> list[Patch]:
    return [
        Patch(facecolor=color, edgecolor="gray", label=label)
        for color, label in zip(theme.cell_colors, _CELL_LABELS, strict=True)
    ]


def _draw_cell_grid(
    ax: plt.Axes,
    grid: np.ndarray,
    cmap: ListedColormap,
    norm: BoundaryNorm,
    theme: Theme,
) -> AxesImage:
    """Shared renderer: imshow with subtle grid lines on *ax*."""
    img = ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = grid.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def render_frame_image(frame: Frame, output_path: Path, theme: Theme | None = None) -> None:
    """Save a single frame as a static image."""
    theme = theme or _active_theme
    cmap, norm = _cell_cmap(theme)
    fig, ax = plt.subplots(figsize=(4, 4.6))
    fig.patch.set_facecolor(theme.background_color)
    _draw_cell_grid(ax, _build_cell_array(frame.cells, (frame.x, frame.y)), cmap, norm, theme)
    ax.set_title(
        f"Step {frame.step} ({frame.event.value}) robot at ({frame.x}, {frame.y})",
        fontsize=9,
        color=theme.title_color,
    )
    fig.legend(
        handles=_build_cell_legend_handles(theme),
        loc="lower center",
        ncol=5,
        fontsize=7,
        frameon=False,
    )
    fig.tight_layout(rect=(0, 0.08, 1, 1))
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, facecolor=fig.get_facecolor())
    plt.close(fig)


# ---------------------------------------------------------------------------
# Replay from persisted artifacts
# ---------------------------------------------------------------------------


def replay_frames(event_rows: list[dict[str, object]], scenario: ScenarioConfig) -> list[Frame]:
    """Rebuild the frame sequence of a run from its event-log rows."""
    grid = build_grid(scenario)
    frames: list[Frame] = []
    for row in sorted(event_rows, key=lambda r: int(r["step"])):  # type: ignore[call-overload]
        event = RenderEvent(str(row["event"]))
        x, y = int(row["x"]), int(row["y"])  # type: ignore[call-overload]
        if event is RenderEvent.CLEAN:
            grid.clean(x, y)
        frames.append(
            Frame(step=int(row["step"]), event=event, x=x, y=y, cells=grid.cells())  # type: ignore[call-overload]
        )
    return frames


def render_filmstrip(
    event_log_path: Path,
    scenario_json_path: Path,
    output_path: Path,
    n_frames: int = 6,
    base_dir: Path | None = None,
    theme: Theme | None = None,
) -> None:
    """Render a horizontal strip of evenly spaced frames from a recorded run."""
    if base_dir is None:
        event_log_path = Path(event_log_path).resolve()
        scenario_json_path = Path(scenario_json_path).resolve()
        output_path = Path(output_path).resolve()
    else:
        base_dir = Path(base_dir).resolve()
        event_log_path = _resolve_within_base(Path(event_log_path), base_dir)
        scenario_json_path = _resolve_within_base(Path(scenario_json_path), base_dir)
        output_path = _resolve_within_base(Path(output_path), base_dir)

    if n_frames < 1:
        raise ValueError("n_frames must be >= 1")

    payload = json.loads(scenario_json_path.read_text())
    run_id = payload.get("run_id")
    if not isinstance(run_id, str) or not run_id:
        raise ValueError("Scenario JSON must include non-empty string field 'run_id'")
    scenario = ScenarioConfig.from_payload(payload)

    rows = pq.read_table(event_log_path, filters=[("run_id", "=", run_id)]).to_pylist()
    if not rows:
        raise ValueError(f"No event rows found for run_id={run_id}")
    frames = replay_frames(rows, scenario)

    actual_n = max(1, min(n_frames, len(frames)))
    indices = [int(i * (len(frames) - 1) / max(1, actual_n - 1)) for i in range(actual_n)]

    theme = theme or _active_theme
    cmap, norm = _cell_cmap(theme)
    fig, axes = plt.subplots(1, actual_n, figsize=(3 * actual_n, 3), squeeze=False)
    fig.patch.set_facecolor(theme.background_color)
    for col_idx, frame_idx in enumerate(indices):
        frame = frames[frame_idx]
        ax = axes[0, col_idx]
        _draw_cell_grid(ax, _build_cell_array(frame.cells, (frame.x, frame.y)), cmap, norm, theme)
        ax.set_title(f"Step {frame.step}", fontsize=9, color=theme.title_color)

    fig.suptitle(f"Run: {run_id}", fontsize=11, color=theme.title_color)
    fig.legend(
        handles=_build_cell_legend_handles(theme),
        loc="lower center",
        ncol=5,
        fontsize=8,
        frameon=False,
    )
    fig.tight_layout(rect=(0, 0.10, 1, 0.95))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=200, facecolor=fig.get_facecolor())
    plt.close(fig)
