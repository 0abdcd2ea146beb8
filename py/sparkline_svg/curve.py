from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from sparkline_svg.mapper import ViewportPoint

PRECISION = 3


@dataclass(frozen=True)
class MoveTo:
    point: ViewportPoint


@dataclass(frozen=True)
class CurveTo:
    cp1: ViewportPoint
    cp2: ViewportPoint
    end: ViewportPoint


PathCommand = Union[MoveTo, CurveTo]


def format_number(value: float) -> str:
    # + 0.0 folds -0.0 into 0.0
    return repr(round(float(value), PRECISION) + 0.0)


def format_point(point: ViewportPoint) -> str:
    return f"{format_number(point.x)},{format_number(point.y)}"


def _line(start: ViewportPoint, end: ViewportPoint) -> tuple[float, float]:
    dx = end.x - start.x
    dy = end.y - start.y
    return math.hypot(dx, dy), math.atan2(dy, dx)


def control_point(
    anchor: ViewportPoint,
    prev: ViewportPoint,
    next_: ViewportPoint,
    smoothing: float,
    *,
    reverse: bool = False,
) -> ViewportPoint:
    """Offset ``anchor`` along the prev->next tangent, scaled by ``smoothing``."""
    length, angle = _line(prev, next_)
    if reverse:
        angle += math.pi
    length *= smoothing
    return ViewportPoint(
        x=anchor.x + math.cos(angle) * length,
        y=anchor.y + math.sin(angle) * length,
    )


def build_path(points: list[ViewportPoint], smoothing: float) -> list[PathCommand]:
    if not points:
        return []

    commands: list[PathCommand] = [MoveTo(points[0])]
    last = len(points) - 1
    for index in range(1, len(points)):
        start = points[index - 1]
        end = points[index]
        before = points[index - 2] if index >= 2 else start
        after = points[index + 1] if index < last else end
        commands.append(
            CurveTo(
                cp1=control_point(start, before, end, smoothing),
                cp2=control_point(end, start, after, smoothing, reverse=True),
                end=end,
            )
        )
    return commands


def path_to_string(commands: list[PathCommand]) -> str:
    parts: list[str] = []
    for command in commands:
        if isinstance(command, MoveTo):
            parts.append(f"M{format_point(command.point)}")
        else:
            parts.append(f"C{format_point(command.cp1)} {format_point(command.cp2)} {format_point(command.end)}")
    return "".join(parts)
