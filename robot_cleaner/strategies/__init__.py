"""Coverage strategies and their registry."""

from robot_cleaner.strategies.base import REGISTERED_STRATEGIES, Strategy, get_strategy
from robot_cleaner.strategies.spiral import SpiralStrategy, spiral_start
from robot_cleaner.strategies.zigzag import ZigzagStrategy

__all__ = [
    "REGISTERED_STRATEGIES",
    "SpiralStrategy",
    "Strategy",
    "ZigzagStrategy",
    "get_strategy",
    "spiral_start",
]
