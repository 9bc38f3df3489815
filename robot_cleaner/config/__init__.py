"""Configuration layer: constants and typed config dataclasses."""

from robot_cleaner.config.constants import (
    DEFAULT_DIRT,
    DEFAULT_OBSTACLES,
    DEFAULT_STRATEGY,
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    RENDER_DELAY_SECONDS,
    START_POSITION,
)
from robot_cleaner.config.types import (
    Coordinate,
    RuntimeConfig,
    ScenarioConfig,
    SimulationResult,
    StrategyName,
)

__all__ = [
    "Coordinate",
    "DEFAULT_DIRT",
    "DEFAULT_OBSTACLES",
    "DEFAULT_STRATEGY",
    "FLUSH_THRESHOLD",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "RENDER_DELAY_SECONDS",
    "RuntimeConfig",
    "START_POSITION",
    "ScenarioConfig",
    "SimulationResult",
    "StrategyName",
]
