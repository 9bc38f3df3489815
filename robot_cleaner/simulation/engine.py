"""Scenario setup and single-run orchestration."""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Iterable
from contextlib import ExitStack
from pathlib import Path
from random import Random

from robot_cleaner.config.constants import START_POSITION
from robot_cleaner.config.types import (
    RuntimeConfig,
    ScenarioConfig,
    SimulationResult,
    StrategyName,
)
from robot_cleaner.domain.agent import Agent, Renderer
from robot_cleaner.domain.grid import CellState, Grid
from robot_cleaner.io.paths import event_log_path, scenario_json_path
from robot_cleaner.io.schemas import SCENARIO_PAYLOAD_SCHEMA_VERSION
from robot_cleaner.simulation.persistence import EventLogRecorder
from robot_cleaner.strategies.base import get_strategy

logger = logging.getLogger(__name__)


def _deterministic_run_id(scenario: ScenarioConfig) -> str:
    """Build a run ID that is stable for identical scenarios and distinct otherwise.

    The suffix is a short digest of the full scenario payload, so two layouts
    with the same size and strategy never share an ID.
    """
    canonical = json.dumps(scenario.to_payload(), sort_keys=True, separators=(",", ":"))
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:12]
    return f"{scenario.strategy_name.value}_w{scenario.width}_h{scenario.height}_{digest}"


def build_grid(scenario: ScenarioConfig) -> Grid:
    """Create the grid and apply the scenario's obstacle and dirt placements."""
    grid = Grid(scenario.width, scenario.height)
    for x, y in scenario.obstacles:
        grid.add_obstacle(x, y)
    for x, y in scenario.dirt:
        grid.add_dirt(x, y)
    if grid.is_obstacle(*START_POSITION):
        # Start is not relocated; the agent begins inside the obstacle
        logger.warning("Start cell %s is an obstacle", START_POSITION)
    return grid


def random_scenario(
    width: int,
    height: int,
    n_dirt: int,
    n_obstacles: int,
    strategy: str | StrategyName,
    seed: int = 0,
) -> ScenarioConfig:
    """Sample distinct dirt and obstacle cells with a seeded RNG.

    Obstacles are never placed on the start cell.
    """
    if n_dirt < 0 or n_obstacles < 0:
        raise ValueError("n_dirt and n_obstacles must be >= 0")
    rng = Random(seed)
    all_positions = [(x, y) for y in range(height) for x in range(width)]
    obstacle_candidates = [p for p in all_positions if p != START_POSITION]
    if n_obstacles > len(obstacle_candidates):
        raise ValueError("n_obstacles exceeds available cells")
    obstacles = rng.sample(obstacle_candidates, n_obstacles)
    taken = set(obstacles)
    dirt_candidates = [p for p in all_positions if p not in taken]
    if n_dirt > len(dirt_candidates):
        raise ValueError("n_dirt exceeds available cells")
    dirt = rng.sample(dirt_candidates, n_dirt)
    return ScenarioConfig(
        width=width,
        height=height,
        dirt=tuple(sorted(dirt)),
        obstacles=tuple(sorted(obstacles)),
        strategy=strategy,
    )


def write_scenario_json(scenario: ScenarioConfig, run_id: str, path: Path) -> None:
    payload = {
        "schema_version": SCENARIO_PAYLOAD_SCHEMA_VERSION,
        "run_id": run_id,
        **scenario.to_payload(),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2))


def run_simulation(
    scenario: ScenarioConfig | None = None,
    runtime: RuntimeConfig | None = None,
    renderers: Iterable[Renderer] = (),
    out_dir: Path | None = None,
) -> SimulationResult:
    """Run one scenario to completion and summarise the outcome.

    When *out_dir* is given, ``scenario.json`` and ``logs/event_log.parquet``
    are written there so the run can be replayed by the filmstrip renderer.
    """
    scenario = scenario or ScenarioConfig()
    runtime = runtime or RuntimeConfig()
    run_id = _deterministic_run_id(scenario)

    grid = build_grid(scenario)
    strategy = get_strategy(scenario.strategy_name)
    sinks = list(renderers)

    with ExitStack() as stack:
        if out_dir is not None:
            out_dir = Path(out_dir)
            write_scenario_json(scenario, run_id, scenario_json_path(out_dir))
            recorder = stack.enter_context(
                EventLogRecorder(
                    run_id=run_id,
                    event_log_path=event_log_path(out_dir),
                    flush_threshold=runtime.flush_threshold,
                )
            )
            sinks.append(recorder)
        agent = Agent(grid, strategy, renderers=sinks)
        agent.start_cleaning()

    result = SimulationResult(
        run_id=run_id,
        strategy=scenario.strategy_name.value,
        final_position=agent.position,
        moves=len(agent.path),
        blocked_moves=agent.blocked_moves,
        cleaned_cells=tuple(agent.cleaned),
        dirt_remaining=grid.count(CellState.DIRT),
        cells_visited=len(set(agent.path)),
        reachable_cells=grid.width * grid.height - grid.count(CellState.OBSTACLE),
    )
    logger.info(
        "Run %s finished: cleaned=%d dirt_remaining=%d coverage=%.3f",
        run_id,
        len(result.cleaned_cells),
        result.dirt_remaining,
        result.coverage,
    )
    return result
