from __future__ import annotations

from dataclasses import dataclass

from sparkline_svg.datapoints import Sample
from sparkline_svg.errors import INVALID_DIMENSION, SparklineError
from sparkline_svg.ranges import AxisRange


@dataclass(frozen=True)
class ViewportPoint:
    x: float
    y: float


def check_dimension(length: float, padding: float, name: str = "dimension") -> None:
    if length - 2 * padding <= 0:
        raise SparklineError(
            INVALID_DIMENSION,
            f"{name} {length} leaves no drawable space with padding {padding}",
        )


def map_sample(
    sample: Sample,
    x_range: AxisRange,
    y_range: AxisRange,
    width: float,
    height: float,
    padding: float,
) -> ViewportPoint:
    x = (sample.x - x_range.min) / x_range.width * (width - 2 * padding) + padding
    y = height - (sample.y - y_range.min) / y_range.width * (height - 2 * padding) - padding
    return ViewportPoint(x=x, y=y)


def visible_samples(samples: list[Sample], x_range: AxisRange, *, windowed: bool = False) -> list[Sample]:
    if not windowed:
        return list(samples)
    return [sample for sample in samples if x_range.contains(sample.x)]


def map_samples(
    samples: list[Sample],
    x_range: AxisRange,
    y_range: AxisRange,
    width: float,
    height: float,
    padding: float,
    *,
    windowed: bool = False,
) -> list[ViewportPoint]:
    """Map samples into the viewport; with a window, samples outside the x-range are dropped."""
    return [
        map_sample(sample, x_range, y_range, width, height, padding)
        for sample in visible_samples(samples, x_range, windowed=windowed)
    ]
