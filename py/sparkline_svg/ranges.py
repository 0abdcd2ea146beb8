from __future__ import annotations

from dataclasses import dataclass

from sparkline_svg.datapoints import NormalizedSamples, position_to_x
from sparkline_svg.options import Window


@dataclass(frozen=True)
class AxisRange:
    min: float
    max: float

    @property
    def width(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        # an inverted range (window bound past every sample) contains nothing
        return self.min <= value <= self.max


def _widen(range_: AxisRange, pivot: float) -> AxisRange:
    if range_.width != 0:
        return range_
    if pivot == 0:
        return AxisRange(-1.0, 1.0)
    return AxisRange(min(0.0, 2 * pivot), max(0.0, 2 * pivot))


def window_bounds(window: Window | None, kind: str | None) -> tuple[float | None, float | None]:
    """Normalize the present window bounds to the axis scale established by the samples."""
    if window is None:
        return None, None
    low = None if window.min is None else position_to_x(window.min, kind)[0]
    high = None if window.max is None else position_to_x(window.max, kind)[0]
    return low, high


def resolve_ranges(normalized: NormalizedSamples, window: Window | None = None) -> tuple[AxisRange, AxisRange]:
    samples = normalized.samples
    if not samples:
        raise ValueError("cannot resolve ranges without samples")

    xs = [sample.x for sample in samples]
    ys = [sample.y for sample in samples]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    low, high = window_bounds(window, normalized.kind)
    if low is not None:
        min_x = low
    if high is not None:
        max_x = high

    first = samples[0]
    x_range = _widen(AxisRange(min_x, max_x), first.x)
    y_range = _widen(AxisRange(min_y, max_y), first.y)
    return x_range, y_range
