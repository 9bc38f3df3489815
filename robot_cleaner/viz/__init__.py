"""Visualization layer: themes, renderers and CLI."""

from robot_cleaner.viz.render import (
    ConsoleRenderer,
    format_frame,
    render_filmstrip,
    render_frame_image,
    replay_frames,
    set_active_theme,
)
from robot_cleaner.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)
from robot_cleaner.viz.cli import main

__all__ = [
    "ConsoleRenderer",
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "format_frame",
    "get_theme",
    "main",
    "render_filmstrip",
    "render_frame_image",
    "replay_frames",
    "set_active_theme",
]
