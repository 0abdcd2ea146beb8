from __future__ import annotations

import os
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HOME = ".sparkline"
DEFAULT_MAX_DATAPOINTS = 10000

Number = Union[int, float]


class Window(BaseModel):
    """Explicit x-axis bounds; each bound overrides the data-derived one independently."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min: Optional[Any] = None
    max: Optional[Any] = None

    @property
    def is_empty(self) -> bool:
        return self.min is None and self.max is None


class ChartOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    width: Number = 200
    height: Number = 100
    padding: Number = 6
    show_dot: bool = True
    dot_radius: Number = Field(default=1, ge=0)
    dot_color: str = "black"
    show_line: bool = True
    line_width: Number = Field(default=0.25, ge=0)
    line_color: str = "black"
    line_smoothing: Number = 0.2
    show_area: bool = False
    area_color: str = "rgba(0, 0, 0, 0.2)"
    placeholder: str = "No data"
    window: Optional[Window] = None


def resolve_options(options: ChartOptions | dict[str, Any] | None = None, **overrides: Any) -> ChartOptions:
    if options is None:
        base: dict[str, Any] = {}
    elif isinstance(options, ChartOptions):
        if not overrides:
            return options
        base = options.model_dump()
    else:
        base = dict(options)
    return ChartOptions(**{**base, **overrides})


def runtime_home() -> str:
    return os.environ.get("SPARKLINE_HOME", DEFAULT_HOME)


def max_datapoints() -> int:
    value = os.environ.get("SPARKLINE_MAX_DATAPOINTS", str(DEFAULT_MAX_DATAPOINTS))
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"invalid SPARKLINE_MAX_DATAPOINTS value: {value}") from exc
    if parsed <= 0:
        raise ValueError("SPARKLINE_MAX_DATAPOINTS must be positive")
    return parsed
