from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Any, Iterable

from sparkline_svg.errors import (
    INVALID_POSITION_TYPE,
    INVALID_VALUE_TYPE,
    MIXED_AXIS_TYPES,
    SparklineError,
)

AXIS_NUMBER = "number"
AXIS_DATETIME = "datetime"
AXIS_DATE = "date"
AXIS_TIME = "time"

AXIS_KINDS = (AXIS_NUMBER, AXIS_DATETIME, AXIS_DATE, AXIS_TIME)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Sample:
    x: float
    y: float
    source: tuple[Any, Any]


@dataclass(frozen=True)
class NormalizedSamples:
    samples: list[Sample]
    kind: str | None

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def is_empty(self) -> bool:
        return not self.samples


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def axis_kind(position: Any) -> str | None:
    # datetime subclasses date, so it has to be checked first.
    if _is_real(position):
        return AXIS_NUMBER
    if isinstance(position, datetime):
        return AXIS_DATETIME
    if isinstance(position, date):
        return AXIS_DATE
    if isinstance(position, time):
        return AXIS_TIME
    return None


def _datetime_seconds(value: datetime) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH).total_seconds()


def _time_seconds(value: time) -> float:
    return value.hour * 3600 + value.minute * 60 + value.second + value.microsecond / 1_000_000


def position_to_x(position: Any, expected_kind: str | None) -> tuple[float, str]:
    """Convert one position to linear seconds (or its own value) and check it against the axis kind."""
    kind = axis_kind(position)
    if kind is None:
        raise SparklineError(INVALID_POSITION_TYPE, f"unsupported position: {position!r}")
    if expected_kind is not None and kind != expected_kind:
        raise SparklineError(
            MIXED_AXIS_TYPES,
            f"position {position!r} is {kind} but the axis is {expected_kind}",
        )
    if kind == AXIS_NUMBER:
        x = float(position)
        if not math.isfinite(x):
            raise SparklineError(INVALID_POSITION_TYPE, f"position must be finite: {position!r}")
        return x, kind
    if kind == AXIS_DATETIME:
        return _datetime_seconds(position), kind
    if kind == AXIS_DATE:
        midnight = datetime(position.year, position.month, position.day, tzinfo=timezone.utc)
        return _datetime_seconds(midnight), kind
    return _time_seconds(position), kind


def parse_position(value: Any, kind: str) -> Any:
    """Decode an ISO-8601 or numeric string into a position of the given axis kind.

    Non-string values are returned unchanged so they can be validated by
    ``normalize`` like any other position.
    """
    if not isinstance(value, str):
        return value
    text = value.strip()
    try:
        if kind == AXIS_NUMBER:
            return float(text)
        if kind == AXIS_DATETIME:
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            return datetime.fromisoformat(text)
        if kind == AXIS_DATE:
            return date.fromisoformat(text)
        if kind == AXIS_TIME:
            return time.fromisoformat(text)
    except ValueError as exc:
        raise SparklineError(INVALID_POSITION_TYPE, f"cannot parse {value!r} as {kind}") from exc
    raise ValueError(f"unknown axis kind: {kind}")


def _value_to_y(value: Any) -> float:
    if not _is_real(value):
        raise SparklineError(INVALID_VALUE_TYPE, f"unsupported value: {value!r}")
    y = float(value)
    if not math.isfinite(y):
        raise SparklineError(INVALID_VALUE_TYPE, f"value must be finite: {value!r}")
    return y


def _split_item(index: int, item: Any) -> tuple[Any, Any]:
    if _is_real(item):
        return index, item
    if isinstance(item, (tuple, list)) and len(item) == 2:
        return item[0], item[1]
    raise SparklineError(INVALID_POSITION_TYPE, f"datapoint {index} is not a (position, value) pair: {item!r}")


def normalize(raw_samples: Iterable[Any]) -> NormalizedSamples:
    kind: str | None = None
    seen: set[float] = set()
    samples: list[Sample] = []
    for index, item in enumerate(raw_samples):
        position, value = _split_item(index, item)
        x, kind = position_to_x(position, kind)
        y = _value_to_y(value)
        if x in seen:
            continue
        seen.add(x)
        samples.append(Sample(x=x, y=y, source=(position, value)))
    samples.sort(key=lambda sample: sample.x)
    return NormalizedSamples(samples=samples, kind=kind)
