"""Tests for scenario setup and run orchestration (run_simulation)."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from robot_cleaner.config.types import RuntimeConfig, ScenarioConfig
from robot_cleaner.domain.grid import CellState
from robot_cleaner.domain.snapshot import Frame, RenderEvent
from robot_cleaner.io.schemas import EVENT_LOG_SCHEMA, EVENT_LOG_SCHEMA_VERSION
from robot_cleaner.simulation.engine import build_grid, random_scenario, run_simulation


class TestBuildGrid:
    def test_applies_reference_layout(self) -> None:
        grid = build_grid(ScenarioConfig())
        assert grid.is_obstacle(8, 4)
        for cell in [(5, 3), (1, 8), (8, 8)]:
            assert grid.is_dirt(*cell)
        assert grid.count(CellState.EMPTY) == 81 - 4

    def test_obstacle_on_start_cell_is_kept_and_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        scenario = ScenarioConfig(width=3, height=3, dirt=(), obstacles=((0, 0),))
        with caplog.at_level(logging.WARNING, logger="robot_cleaner.simulation.engine"):
            grid = build_grid(scenario)
        assert grid.is_obstacle(0, 0)
        assert "Start cell" in caplog.text


class TestReferenceScenario:
    """Reference run: 9x9, spiral, dirt at (5,3) (1,8) (8,8), obstacle at (8,4)."""

    def test_agent_never_enters_obstacle(self) -> None:
        frames: list[Frame] = []
        run_simulation(ScenarioConfig(), renderers=[frames.append])
        assert frames
        assert all((f.x, f.y) != (8, 4) for f in frames)

    def test_all_dirt_on_traced_path_is_cleaned(self) -> None:
        result = run_simulation(ScenarioConfig())
        # E3 passes row 3, S7 ends on column 8, W8 sweeps row 8
        assert result.cleaned_cells == ((5, 3), (8, 8), (1, 8))
        assert result.dirt_remaining == 0

    def test_move_counts_and_final_position(self) -> None:
        result = run_simulation(ScenarioConfig())
        assert result.moves == 80
        assert result.blocked_moves == 11
        assert result.final_position == (8, 0)
        assert result.cells_visited == 80
        assert result.reachable_cells == 80
        assert result.coverage == 1.0

    def test_render_notifications_per_move_and_clean(self) -> None:
        frames: list[Frame] = []
        run_simulation(ScenarioConfig(), renderers=[frames.append])
        assert len(frames) == 83
        assert sum(f.event is RenderEvent.CLEAN for f in frames) == 3
        assert (frames[0].x, frames[0].y) == (4, 4)

    def test_zigzag_on_reference_layout(self) -> None:
        result = run_simulation(ScenarioConfig(strategy="zigzag"))
        assert result.cleaned_cells == ((5, 3), (1, 8), (8, 8))
        assert result.blocked_moves == 1
        assert result.final_position == (8, 8)


class TestRunSimulationArtifacts:
    def test_writes_scenario_json_and_event_log(self, tmp_path: Path) -> None:
        result = run_simulation(ScenarioConfig(), out_dir=tmp_path)
        payload = json.loads((tmp_path / "scenario.json").read_text())
        assert payload["run_id"] == result.run_id
        assert payload["strategy"] == "spiral"
        assert payload["obstacles"] == [[8, 4]]
        table = pq.read_table(tmp_path / "logs" / "event_log.parquet")
        assert table.schema.equals(EVENT_LOG_SCHEMA)
        assert table.num_rows == 83

    def test_event_log_steps_are_contiguous(self, tmp_path: Path) -> None:
        run_simulation(
            ScenarioConfig(strategy="zigzag"),
            runtime=RuntimeConfig(flush_threshold=7),
            out_dir=tmp_path,
        )
        table = pq.read_table(tmp_path / "logs" / "event_log.parquet")
        steps = table.column("step").to_pylist()
        assert steps == list(range(len(steps)))

    def test_clean_rows_report_cleaned_cell(self, tmp_path: Path) -> None:
        run_simulation(ScenarioConfig(), out_dir=tmp_path)
        rows = pq.read_table(tmp_path / "logs" / "event_log.parquet").to_pylist()
        clean_rows = [r for r in rows if r["event"] == "clean"]
        assert [(r["x"], r["y"]) for r in clean_rows] == [(5, 3), (8, 8), (1, 8)]
        assert all(r["cell_state"] == "cleaned" for r in clean_rows)

    def test_run_id_is_deterministic(self) -> None:
        first = run_simulation(ScenarioConfig(strategy="zigzag"))
        second = run_simulation(ScenarioConfig(strategy="zigzag"))
        assert first.run_id == second.run_id
        assert first.run_id.startswith("zigzag_w9_h9_")

    def test_run_id_distinguishes_layouts_with_equal_counts(self) -> None:
        a = ScenarioConfig(width=4, height=4, dirt=((1, 1),), obstacles=((2, 2),))
        b = ScenarioConfig(width=4, height=4, dirt=((3, 3),), obstacles=((2, 2),))
        assert run_simulation(a).run_id != run_simulation(b).run_id

    def test_event_log_carries_schema_version(self, tmp_path: Path) -> None:
        run_simulation(ScenarioConfig(), out_dir=tmp_path)
        schema = pq.read_schema(tmp_path / "logs" / "event_log.parquet")
        assert schema.metadata[b"schema_version"] == str(EVENT_LOG_SCHEMA_VERSION).encode()


class TestRandomScenario:
    def test_same_seed_same_layout(self) -> None:
        a = random_scenario(6, 5, n_dirt=5, n_obstacles=4, strategy="zigzag", seed=3)
        b = random_scenario(6, 5, n_dirt=5, n_obstacles=4, strategy="zigzag", seed=3)
        assert a == b

    def test_counts_and_disjointness(self) -> None:
        scenario = random_scenario(6, 5, n_dirt=7, n_obstacles=6, strategy="spiral", seed=1)
        assert len(set(scenario.dirt)) == 7
        assert len(set(scenario.obstacles)) == 6
        assert not set(scenario.dirt) & set(scenario.obstacles)

    def test_obstacles_avoid_start_cell(self) -> None:
        for seed in range(20):
            scenario = random_scenario(2, 2, n_dirt=0, n_obstacles=3, strategy="zigzag", seed=seed)
            assert (0, 0) not in scenario.obstacles

    def test_too_many_cells_rejected(self) -> None:
        with pytest.raises(ValueError, match="n_obstacles"):
            random_scenario(2, 2, n_dirt=0, n_obstacles=4, strategy="zigzag")
        with pytest.raises(ValueError, match="n_dirt"):
            random_scenario(2, 2, n_dirt=2, n_obstacles=3, strategy="zigzag")
