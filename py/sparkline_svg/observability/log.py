from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from sparkline_svg.observability.context import get_trace_id
from sparkline_svg.paths import RuntimePaths


def write_structured_log(paths: RuntimePaths, event_type: str, payload: dict[str, Any]) -> None:
    paths.ensure()
    row = {
        "event_type": event_type,
        "trace_id": get_trace_id(),
        "ts": datetime.now(timezone.utc).isoformat(),
        **payload,
    }
    with paths.structured_log_path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(row, sort_keys=True, default=str) + "\n")


def read_structured_log(paths: RuntimePaths, event_type: str | None = None) -> list[dict[str, Any]]:
    log_path = paths.structured_log_path
    if not log_path.exists():
        return []
    rows: list[dict[str, Any]] = []
    with log_path.open("r", encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if not line:
                continue
            try:
                row = json.loads(line)
            except json.JSONDecodeError:
                continue
            if event_type is None or row.get("event_type") == event_type:
                rows.append(row)
    return rows
