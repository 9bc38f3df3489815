"""Grid coverage simulation for a single cleaning robot."""

from robot_cleaner.config.types import RuntimeConfig, ScenarioConfig, SimulationResult
from robot_cleaner.domain.agent import Agent
from robot_cleaner.domain.grid import CellState, Grid
from robot_cleaner.simulation.engine import run_simulation
from robot_cleaner.strategies import SpiralStrategy, ZigzagStrategy, get_strategy

__all__ = [
    "Agent",
    "CellState",
    "Grid",
    "RuntimeConfig",
    "ScenarioConfig",
    "SimulationResult",
    "SpiralStrategy",
    "ZigzagStrategy",
    "get_strategy",
    "run_simulation",
]
