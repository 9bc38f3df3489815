"""Arrow schema for the per-run event log.

Each row is one render notification: the agent's position after the event
and the state of the cell it occupies.
"""

from __future__ import annotations

import pyarrow as pa

EVENT_LOG_SCHEMA_VERSION = 1
SCENARIO_PAYLOAD_SCHEMA_VERSION = 1

EVENT_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("step", pa.int64()),
        ("event", pa.string()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("cell_state", pa.string()),
    ],
    metadata={"schema_version": str(EVENT_LOG_SCHEMA_VERSION)},
)
