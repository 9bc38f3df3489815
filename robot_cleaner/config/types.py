"""Configuration dataclasses for cleaning simulations.

Scenario layout and runtime knobs are split the same way the runner consumes
them: ``ScenarioConfig`` describes what the grid looks like before the first
move, ``RuntimeConfig`` describes how the run is presented and persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from robot_cleaner.config.constants import (
    DEFAULT_DIRT,
    DEFAULT_OBSTACLES,
    DEFAULT_STRATEGY,
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    RENDER_DELAY_SECONDS,
)

__all__ = [
    "Coordinate",
    "RuntimeConfig",
    "ScenarioConfig",
    "SimulationResult",
    "StrategyName",
    "parse_strategy_name",
]

Coordinate = tuple[int, int]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Summary of one completed cleaning run."""

    run_id: str
    strategy: str
    final_position: Coordinate
    moves: int
    blocked_moves: int
    cleaned_cells: tuple[Coordinate, ...]
    dirt_remaining: int
    cells_visited: int
    reachable_cells: int

    @property
    def coverage(self) -> float:
        """Fraction of non-obstacle cells the agent occupied at least once."""
        if self.reachable_cells == 0:
            return 0.0
        return self.cells_visited / self.reachable_cells


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


class StrategyName(Enum):
    """Registered coverage strategies."""

    ZIGZAG = "zigzag"
    SPIRAL = "spiral"


def parse_strategy_name(raw: str | StrategyName) -> StrategyName:
    """Resolve a strategy name (case-insensitive) or pass an enum member through."""
    if isinstance(raw, StrategyName):
        return raw
    try:
        return StrategyName(str(raw).lower())
    except ValueError as exc:
        valid = ", ".join(sorted(s.value for s in StrategyName))
        raise ValueError(f"Unknown strategy {raw!r}; available: {valid}") from exc


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class ScenarioConfig:
    """Grid size, initial dirt/obstacle layout and the selected strategy."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    dirt: tuple[Coordinate, ...] = DEFAULT_DIRT
    obstacles: tuple[Coordinate, ...] = DEFAULT_OBSTACLES
    strategy: StrategyName | str = DEFAULT_STRATEGY

    def __post_init__(self) -> None:
        for label, value in (("width", self.width), ("height", self.height)):
            if not _is_int(value):
                raise ValueError(f"{label} must be an integer, got {value!r}")
        if self.width < 1:
            raise ValueError("width must be >= 1")
        if self.height < 1:
            raise ValueError("height must be >= 1")
        # Normalise list inputs (e.g. from JSON) into hashable tuples
        object.__setattr__(self, "dirt", tuple(tuple(c) for c in self.dirt))
        object.__setattr__(self, "obstacles", tuple(tuple(c) for c in self.obstacles))
        object.__setattr__(self, "strategy", parse_strategy_name(self.strategy))
        for label, cells in (("dirt", self.dirt), ("obstacle", self.obstacles)):
            for cell in cells:
                if len(cell) != 2:
                    raise ValueError(f"{label} coordinate must have two values: {cell!r}")
                x, y = cell
                if not (_is_int(x) and _is_int(y)):
                    raise ValueError(f"{label} coordinate must be integers: {cell!r}")
                if not (0 <= x < self.width and 0 <= y < self.height):
                    raise ValueError(
                        f"{label} coordinate {cell!r} outside {self.width}x{self.height} grid"
                    )
        overlap = set(self.dirt) & set(self.obstacles)
        if overlap:
            raise ValueError(f"cells cannot be both dirt and obstacle: {sorted(overlap)}")

    @property
    def strategy_name(self) -> StrategyName:
        return self.strategy  # type: ignore[return-value]

    def to_payload(self) -> dict[str, object]:
        """JSON-serialisable representation, inverse of ``from_payload``."""
        return {
            "width": self.width,
            "height": self.height,
            "dirt": [list(c) for c in self.dirt],
            "obstacles": [list(c) for c in self.obstacles],
            "strategy": self.strategy_name.value,
        }

    @classmethod
    def from_payload(cls, payload: dict[str, object]) -> ScenarioConfig:
        try:
            return cls(
                width=int(payload["width"]),  # type: ignore[call-overload]
                height=int(payload["height"]),  # type: ignore[call-overload]
                dirt=tuple(tuple(c) for c in payload.get("dirt", ())),  # type: ignore[union-attr]
                obstacles=tuple(tuple(c) for c in payload.get("obstacles", ())),  # type: ignore[union-attr]
                strategy=str(payload.get("strategy", DEFAULT_STRATEGY)),
            )
        except KeyError as exc:
            raise ValueError(f"scenario payload missing field {exc.args[0]!r}") from exc


@dataclass(frozen=True)
class RuntimeConfig:
    """Presentation and persistence knobs for one run."""

    render_delay: float = RENDER_DELAY_SECONDS
    display: bool = True
    flush_threshold: int = FLUSH_THRESHOLD

    def __post_init__(self) -> None:
        if self.render_delay < 0:
            raise ValueError("render_delay must be >= 0")
        if self.flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
