"""Persistence schemas and output path conventions."""

from robot_cleaner.io.paths import (
    event_log_path,
    logs_dir,
    resolve_within_base,
    scenario_json_path,
)
from robot_cleaner.io.schemas import (
    EVENT_LOG_SCHEMA,
    EVENT_LOG_SCHEMA_VERSION,
    SCENARIO_PAYLOAD_SCHEMA_VERSION,
)

__all__ = [
    "EVENT_LOG_SCHEMA",
    "EVENT_LOG_SCHEMA_VERSION",
    "SCENARIO_PAYLOAD_SCHEMA_VERSION",
    "event_log_path",
    "logs_dir",
    "resolve_within_base",
    "scenario_json_path",
]
