"""Strategy protocol and name-based registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from robot_cleaner.config.types import StrategyName, parse_strategy_name
from robot_cleaner.strategies.spiral import SpiralStrategy
from robot_cleaner.strategies.zigzag import ZigzagStrategy

if TYPE_CHECKING:
    from robot_cleaner.domain.agent import Agent


class Strategy(Protocol):
    """Complete traversal algorithm driving an agent to completion."""

    def run_full_cleaning(self, agent: Agent) -> None: ...


REGISTERED_STRATEGIES: dict[StrategyName, type[Strategy]] = {
    StrategyName.ZIGZAG: ZigzagStrategy,
    StrategyName.SPIRAL: SpiralStrategy,
}


def get_strategy(name: str | StrategyName) -> Strategy:
    """Instantiate the strategy registered under *name* (case-insensitive)."""
    return REGISTERED_STRATEGIES[parse_strategy_name(name)]()
