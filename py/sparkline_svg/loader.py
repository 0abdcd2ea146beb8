from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Any

import duckdb

SUPPORTED_SUFFIXES = {".csv", ".parquet"}


def _ensure_supported_input(path: Path) -> None:
    if not path.exists():
        raise ValueError(f"input file not found: {path}")
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ValueError("only .csv and .parquet sample files are supported")


def _literal(path: Path) -> str:
    return "'" + path.as_posix().replace("'", "''") + "'"


def _relation_for_file(path: Path) -> str:
    if path.suffix.lower() == ".csv":
        return f"read_csv_auto({_literal(path)}, header=true)"
    return f"read_parquet({_literal(path)})"


def _quote(column: str) -> str:
    return '"' + column.replace('"', '""') + '"'


def _coerce(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    return value


def load_samples_file(
    path: Path,
    position_column: str = "position",
    value_column: str = "value",
) -> list[tuple[Any, Any]]:
    """Read ``(position, value)`` pairs in file order; typed columns keep their temporal types."""
    path = path.resolve()
    _ensure_supported_input(path)
    relation = _relation_for_file(path)
    with duckdb.connect() as conn:
        columns = [row[0] for row in conn.execute(f"SELECT * FROM {relation} LIMIT 0").description]
        missing = [column for column in (position_column, value_column) if column not in columns]
        if missing:
            raise ValueError(f"missing required columns: {missing}")
        rows = conn.execute(
            f"SELECT {_quote(position_column)}, {_quote(value_column)} FROM {relation}"
        ).fetchall()
    return [(_coerce(position), _coerce(value)) for position, value in rows]
