"""Simulation runner: scenario setup, run orchestration and event-log persistence."""

from robot_cleaner.simulation.engine import (
    build_grid,
    random_scenario,
    run_simulation,
    write_scenario_json,
)
from robot_cleaner.simulation.persistence import EventLogRecorder, flush_event_columns

__all__ = [
    "EventLogRecorder",
    "build_grid",
    "flush_event_columns",
    "random_scenario",
    "run_simulation",
    "write_scenario_json",
]
