"""Tests for robot_cleaner.domain.agent module."""

from __future__ import annotations

from robot_cleaner.domain.agent import Agent
from robot_cleaner.domain.grid import CellState, Grid
from robot_cleaner.domain.snapshot import Frame, RenderEvent


class _NoopStrategy:
    def __init__(self) -> None:
        self.calls: list[Agent] = []

    def run_full_cleaning(self, agent: Agent) -> None:
        self.calls.append(agent)


class _ScriptedStrategy:
    def __init__(self, targets: list[tuple[int, int]]) -> None:
        self.targets = targets

    def run_full_cleaning(self, agent: Agent) -> None:
        for x, y in self.targets:
            agent.move(x, y)
            agent.clean_current_spot()


def _make_agent(grid: Grid, frames: list[Frame] | None = None) -> Agent:
    renderers = [frames.append] if frames is not None else []
    return Agent(grid, _NoopStrategy(), renderers=renderers)


class TestAgentMove:
    def test_starts_at_origin(self) -> None:
        agent = _make_agent(Grid(3, 3))
        assert agent.position == (0, 0)
        assert agent.path == []

    def test_starts_at_origin_even_on_obstacle(self) -> None:
        grid = Grid(3, 3)
        grid.add_obstacle(0, 0)
        assert _make_agent(grid).position == (0, 0)

    def test_successful_move_updates_position_and_renders(self) -> None:
        frames: list[Frame] = []
        agent = _make_agent(Grid(3, 3), frames)
        assert agent.move(2, 1) is True
        assert agent.position == (2, 1)
        assert agent.path == [(2, 1)]
        assert len(frames) == 1
        assert frames[0].event is RenderEvent.MOVE
        assert (frames[0].x, frames[0].y) == (2, 1)

    def test_move_is_not_restricted_to_neighbours(self) -> None:
        agent = _make_agent(Grid(5, 5))
        assert agent.move(4, 4)
        assert agent.position == (4, 4)

    def test_move_into_obstacle_is_blocked(self) -> None:
        frames: list[Frame] = []
        grid = Grid(3, 3)
        grid.add_obstacle(1, 0)
        agent = _make_agent(grid, frames)
        assert agent.move(1, 0) is False
        assert agent.position == (0, 0)
        assert agent.blocked_moves == 1
        assert frames == []

    def test_move_out_of_bounds_is_blocked(self) -> None:
        agent = _make_agent(Grid(3, 3))
        agent.move(1, 1)
        for target in [(-1, 1), (3, 1), (1, 3), (1, -1)]:
            before = agent.position
            assert agent.move(*target) is False
            assert agent.position == before
        assert agent.blocked_moves == 4


class TestAgentClean:
    def test_clean_current_spot_cleans_dirt_once(self) -> None:
        frames: list[Frame] = []
        grid = Grid(3, 3)
        grid.add_dirt(1, 1)
        agent = _make_agent(grid, frames)
        agent.move(1, 1)
        agent.clean_current_spot()
        agent.clean_current_spot()
        assert grid.cell(1, 1) is CellState.CLEANED
        assert agent.cleaned == [(1, 1)]
        assert [f.event for f in frames] == [RenderEvent.MOVE, RenderEvent.CLEAN]

    def test_clean_on_empty_cell_is_noop(self) -> None:
        frames: list[Frame] = []
        grid = Grid(2, 2)
        agent = _make_agent(grid, frames)
        agent.clean_current_spot()
        assert grid.cell(0, 0) is CellState.EMPTY
        assert frames == []

    def test_clean_never_touches_obstacle_start_cell(self) -> None:
        grid = Grid(2, 2)
        grid.add_obstacle(0, 0)
        agent = _make_agent(grid)
        agent.clean_current_spot()
        assert grid.is_obstacle(0, 0)

    def test_clean_frame_shows_cleaned_cell(self) -> None:
        frames: list[Frame] = []
        grid = Grid(2, 2)
        grid.add_dirt(0, 0)
        agent = _make_agent(grid, frames)
        agent.clean_current_spot()
        assert frames[0].state_at(0, 0) is CellState.CLEANED


class TestAgentFrames:
    def test_frames_are_numbered_in_order(self) -> None:
        frames: list[Frame] = []
        agent = _make_agent(Grid(3, 1), frames)
        agent.move(1, 0)
        agent.move(2, 0)
        assert [f.step for f in frames] == [0, 1]

    def test_frames_are_immutable_snapshots(self) -> None:
        frames: list[Frame] = []
        grid = Grid(2, 1)
        grid.add_dirt(1, 0)
        agent = _make_agent(grid, frames)
        agent.move(1, 0)
        agent.clean_current_spot()
        assert frames[0].state_at(1, 0) is CellState.DIRT
        assert frames[1].state_at(1, 0) is CellState.CLEANED
        assert (frames[0].width, frames[0].height) == (2, 1)

    def test_every_renderer_is_notified(self) -> None:
        first: list[Frame] = []
        second: list[Frame] = []
        agent = Agent(Grid(2, 2), _NoopStrategy(), renderers=[first.append, second.append])
        agent.move(1, 1)
        assert first == second
        assert len(first) == 1


class TestAgentStartCleaning:
    def test_delegates_to_strategy_with_itself(self) -> None:
        strategy = _NoopStrategy()
        agent = Agent(Grid(2, 2), strategy)
        agent.start_cleaning()
        assert strategy.calls == [agent]

    def test_scripted_run_cleans_reachable_dirt(self) -> None:
        grid = Grid(3, 1)
        grid.add_dirt(2, 0)
        grid.add_obstacle(1, 0)
        agent = Agent(grid, _ScriptedStrategy([(1, 0), (2, 0)]))
        agent.start_cleaning()
        assert agent.path == [(2, 0)]
        assert grid.cell(2, 0) is CellState.CLEANED
