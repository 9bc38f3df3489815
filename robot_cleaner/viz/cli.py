"""CLI entrypoint: run a cleaning scenario or replay a recorded run."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from robot_cleaner.config.constants import (
    DEFAULT_DIRT,
    DEFAULT_OBSTACLES,
    DEFAULT_STRATEGY,
    GRID_HEIGHT,
    GRID_WIDTH,
    RENDER_DELAY_SECONDS,
)
from robot_cleaner.config.types import RuntimeConfig, ScenarioConfig, StrategyName
from robot_cleaner.domain.agent import Renderer
from robot_cleaner.domain.snapshot import Frame
from robot_cleaner.simulation.engine import random_scenario, run_simulation
from robot_cleaner.viz import render as viz_render
from robot_cleaner.viz.render import ConsoleRenderer, render_filmstrip, render_frame_image

logger = logging.getLogger(__name__)


def _parse_coordinate(raw: str) -> tuple[int, int]:
    """Parse an ``X,Y`` pair of non-negative integers."""
    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected X,Y format, got: {raw}")
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError(f"Coordinates must be integers, got: {raw}") from exc
    if x < 0 or y < 0:
        raise ValueError(f"Coordinates must be non-negative, got: {raw}")
    return (x, y)


def _build_run_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("run", help="Run one cleaning scenario")
    p.set_defaults(func=_handle_run)
    p.add_argument(
        "--strategy",
        choices=[s.value for s in StrategyName],
        default=DEFAULT_STRATEGY,
    )
    p.add_argument("--width", type=int, default=GRID_WIDTH)
    p.add_argument("--height", type=int, default=GRID_HEIGHT)
    p.add_argument(
        "--dirt",
        type=_parse_coordinate,
        action="append",
        default=None,
        metavar="X,Y",
        help="Dirt cell (can repeat)",
    )
    p.add_argument(
        "--obstacle",
        type=_parse_coordinate,
        action="append",
        default=None,
        metavar="X,Y",
        help="Obstacle cell (can repeat)",
    )
    p.add_argument("--random-dirt", type=int, default=0, help="Sample N dirt cells")
    p.add_argument("--random-obstacles", type=int, default=0, help="Sample N obstacle cells")
    p.add_argument("--seed", type=int, default=0)
    p.add_argument("--delay", type=float, default=RENDER_DELAY_SECONDS)
    p.add_argument("--display", action=argparse.BooleanOptionalAction, default=True)
    p.add_argument("--out-dir", type=Path, default=None)
    p.add_argument("--snapshot", type=Path, default=None, help="Save the final frame as PNG")


def _build_filmstrip_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("filmstrip", help="Render filmstrip of a recorded run")
    p.set_defaults(func=_handle_filmstrip)
    p.add_argument("--event-log", type=Path, required=True)
    p.add_argument("--scenario-json", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--n-frames", type=int, default=6)
    p.add_argument("--base-dir", type=Path, default=Path("."))


class _LastFrame:
    """Renderer that keeps only the most recent frame."""

    def __init__(self) -> None:
        self.frame: Frame | None = None

    def __call__(self, frame: Frame) -> None:
        self.frame = frame


def _scenario_from_args(args: argparse.Namespace) -> ScenarioConfig:
    if args.random_dirt or args.random_obstacles:
        if args.dirt or args.obstacle:
            raise ValueError("--dirt/--obstacle cannot be combined with random placement")
        return random_scenario(
            width=args.width,
            height=args.height,
            n_dirt=args.random_dirt,
            n_obstacles=args.random_obstacles,
            strategy=args.strategy,
            seed=args.seed,
        )
    # The reference layout only applies to the reference grid size
    is_default_size = (args.width, args.height) == (GRID_WIDTH, GRID_HEIGHT)
    explicit = args.dirt is not None or args.obstacle is not None
    if explicit or not is_default_size:
        dirt = tuple(args.dirt or ())
        obstacles = tuple(args.obstacle or ())
    else:
        dirt, obstacles = DEFAULT_DIRT, DEFAULT_OBSTACLES
    return ScenarioConfig(
        width=args.width,
        height=args.height,
        dirt=dirt,
        obstacles=obstacles,
        strategy=args.strategy,
    )


def _handle_run(args: argparse.Namespace) -> None:
    scenario = _scenario_from_args(args)
    runtime = RuntimeConfig(render_delay=args.delay, display=args.display)

    renderers: list[Renderer] = []
    if runtime.display:
        renderers.append(ConsoleRenderer(delay=runtime.render_delay))
    last_frame = _LastFrame()
    if args.snapshot is not None:
        renderers.append(last_frame)

    print("Initialize robot")
    result = run_simulation(
        scenario=scenario, runtime=runtime, renderers=renderers, out_dir=args.out_dir
    )
    print("Done.")
    print(
        f"strategy={result.strategy} moves={result.moves} blocked={result.blocked_moves} "
        f"cleaned={len(result.cleaned_cells)} dirt_remaining={result.dirt_remaining} "
        f"coverage={result.coverage:.1%}"
    )

    if args.snapshot is not None:
        if last_frame.frame is not None:
            render_frame_image(last_frame.frame, args.snapshot)
        else:
            logger.warning("No frames were rendered; snapshot %s not written", args.snapshot)


def _handle_filmstrip(args: argparse.Namespace) -> None:
    render_filmstrip(
        event_log_path=args.event_log,
        scenario_json_path=args.scenario_json,
        output_path=args.output,
        n_frames=args.n_frames,
        base_dir=args.base_dir,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Robot cleaner coverage simulation")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme preset name (default, paper)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_run_parser(sub)
    _build_filmstrip_parser(sub)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Apply theme
    viz_render.set_active_theme(args.theme)

    try:
        args.func(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
