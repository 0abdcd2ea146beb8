from sparkline_svg.chart import ChartResult, ComputedDatapoint, dry_run, render_chart, render_chart_or_raise
from sparkline_svg.errors import (
    INVALID_DIMENSION,
    INVALID_POSITION_TYPE,
    INVALID_VALUE_TYPE,
    MIXED_AXIS_TYPES,
    ChartError,
    SparklineError,
)
from sparkline_svg.options import ChartOptions, Window

__version__ = "0.1.0"

__all__ = [
    "INVALID_DIMENSION",
    "INVALID_POSITION_TYPE",
    "INVALID_VALUE_TYPE",
    "MIXED_AXIS_TYPES",
    "ChartError",
    "ChartOptions",
    "ChartResult",
    "ComputedDatapoint",
    "SparklineError",
    "Window",
    "dry_run",
    "render_chart",
    "render_chart_or_raise",
]
