"""Line chart pipeline: raw datapoints to an SVG document.

``render_chart`` returns a ``ChartResult`` holding either the document or a
``ChartError``; ``render_chart_or_raise`` raises ``SparklineError`` instead.
Dimension checks, normalization and window resolution all run before any
geometry is computed, so a failure never yields a partial document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from sparkline_svg.curve import PRECISION
from sparkline_svg.datapoints import NormalizedSamples, Sample, normalize
from sparkline_svg.errors import ChartError, SparklineError
from sparkline_svg.mapper import ViewportPoint, check_dimension, map_sample, visible_samples
from sparkline_svg.markup import draw_chart
from sparkline_svg.options import ChartOptions, resolve_options
from sparkline_svg.ranges import resolve_ranges, window_bounds


@dataclass(frozen=True)
class ChartResult:
    svg: str | None = None
    error: ChartError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ComputedDatapoint:
    source: tuple[Any, Any]
    computed: tuple[float, float]

    def to_dict(self) -> dict[str, Any]:
        position, value = self.source
        if hasattr(position, "isoformat"):
            position = position.isoformat()
        return {"source": [position, value], "computed": list(self.computed)}


def _computed(
    normalized: NormalizedSamples,
    options: ChartOptions,
) -> list[tuple[Sample, ViewportPoint]]:
    window = options.window
    if normalized.is_empty:
        window_bounds(window, None)
        return []
    x_range, y_range = resolve_ranges(normalized, window)
    windowed = window is not None and not window.is_empty
    return [
        (
            sample,
            map_sample(sample, x_range, y_range, options.width, options.height, options.padding),
        )
        for sample in visible_samples(normalized.samples, x_range, windowed=windowed)
    ]


def _run(raw_samples: Iterable[Any], options: ChartOptions) -> list[tuple[Sample, ViewportPoint]]:
    check_dimension(options.width, options.padding, "width")
    check_dimension(options.height, options.padding, "height")
    return _computed(normalize(raw_samples), options)


def render_chart_or_raise(
    raw_samples: Iterable[Any],
    options: ChartOptions | dict[str, Any] | None = None,
    **overrides: Any,
) -> str:
    resolved = resolve_options(options, **overrides)
    computed = _run(raw_samples, resolved)
    return draw_chart([point for _sample, point in computed], resolved)


def render_chart(
    raw_samples: Iterable[Any],
    options: ChartOptions | dict[str, Any] | None = None,
    **overrides: Any,
) -> ChartResult:
    try:
        svg = render_chart_or_raise(raw_samples, options, **overrides)
    except SparklineError as exc:
        return ChartResult(error=exc.to_error())
    return ChartResult(svg=svg)


def dry_run(
    raw_samples: Iterable[Any],
    options: ChartOptions | dict[str, Any] | None = None,
    **overrides: Any,
) -> list[ComputedDatapoint]:
    """Run the geometry pipeline without producing markup."""
    resolved = resolve_options(options, **overrides)
    return [
        ComputedDatapoint(
            source=sample.source,
            computed=(round(point.x, PRECISION), round(point.y, PRECISION)),
        )
        for sample, point in _run(raw_samples, resolved)
    ]
