"""Parquet persistence for the per-run event log."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from robot_cleaner.config.constants import FLUSH_THRESHOLD
from robot_cleaner.domain.snapshot import Frame
from robot_cleaner.io.schemas import EVENT_LOG_SCHEMA


def flush_event_columns(
    event_columns: dict[str, list[int | str]],
    event_log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated event rows to Parquet and clear in-memory buffers."""
    if not event_columns["run_id"]:
        return writer
    table = pa.Table.from_pydict(event_columns, schema=EVENT_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(event_log_path, EVENT_LOG_SCHEMA)
    writer.write_table(table)
    for values in event_columns.values():
        values.clear()
    return writer


class EventLogRecorder:
    """Renderer that streams every frame into a Parquet event log.

    Use as a context manager, or call ``close()``, so the last partial
    buffer is written and the file footer is finalised.
    """

    def __init__(
        self, run_id: str, event_log_path: Path, flush_threshold: int = FLUSH_THRESHOLD
    ) -> None:
        self.run_id = run_id
        self.event_log_path = Path(event_log_path)
        self.flush_threshold = flush_threshold
        self.rows_written = 0
        self._writer: pq.ParquetWriter | None = None
        self._columns: dict[str, list[int | str]] = {
            name: [] for name in EVENT_LOG_SCHEMA.names
        }

    def __call__(self, frame: Frame) -> None:
        self._columns["run_id"].append(self.run_id)
        self._columns["step"].append(frame.step)
        self._columns["event"].append(frame.event.value)
        self._columns["x"].append(frame.x)
        self._columns["y"].append(frame.y)
        self._columns["cell_state"].append(frame.state_at(frame.x, frame.y).value)
        self.rows_written += 1
        if len(self._columns["run_id"]) >= self.flush_threshold:
            self._flush()

    def _flush(self) -> None:
        self.event_log_path.parent.mkdir(parents=True, exist_ok=True)
        self._writer = flush_event_columns(self._columns, self.event_log_path, self._writer)

    def close(self) -> None:
        self._flush()
        if self._writer is not None:
            self._writer.close()
            self._writer = None
        elif not self.event_log_path.exists():
            # A run with no frames still leaves a readable, empty log
            self.event_log_path.parent.mkdir(parents=True, exist_ok=True)
            pq.write_table(EVENT_LOG_SCHEMA.empty_table(), self.event_log_path)

    def __enter__(self) -> EventLogRecorder:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
