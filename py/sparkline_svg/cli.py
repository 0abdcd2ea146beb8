from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from sparkline_svg.chart import dry_run, render_chart_or_raise
from sparkline_svg.datapoints import AXIS_NUMBER, axis_kind, parse_position
from sparkline_svg.errors import SparklineError
from sparkline_svg.loader import load_samples_file
from sparkline_svg.observability.context import trace_scope
from sparkline_svg.observability.log import write_structured_log
from sparkline_svg.options import ChartOptions, DEFAULT_HOME
from sparkline_svg.paths import RuntimePaths


def _number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)


def _window(args: argparse.Namespace, datapoints: list[tuple[Any, Any]]) -> dict[str, Any] | None:
    if args.window_min is None and args.window_max is None:
        return None
    kind = (axis_kind(datapoints[0][0]) if datapoints else None) or AXIS_NUMBER
    window: dict[str, Any] = {}
    if args.window_min is not None:
        window["min"] = parse_position(args.window_min, kind)
    if args.window_max is not None:
        window["max"] = parse_position(args.window_max, kind)
    return window


def _options(args: argparse.Namespace, datapoints: list[tuple[Any, Any]]) -> ChartOptions:
    return ChartOptions(
        width=args.width,
        height=args.height,
        padding=args.padding,
        line_smoothing=args.smoothing,
        show_area=args.show_area,
        show_dot=not args.no_dots,
        show_line=not args.no_line,
        window=_window(args, datapoints),
    )


def _load(args: argparse.Namespace) -> list[tuple[Any, Any]]:
    return load_samples_file(
        Path(args.path),
        position_column=args.position_column,
        value_column=args.value_column,
    )


def cmd_render(args: argparse.Namespace) -> None:
    paths = RuntimePaths(root=Path(args.runtime_home))
    datapoints = _load(args)
    svg = render_chart_or_raise(datapoints, _options(args, datapoints))
    output = Path(args.output) if args.output else paths.artifact_path(f"{Path(args.path).stem}.svg")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(svg, encoding="utf-8")
    write_structured_log(paths, "cli.render", {"source": str(args.path), "output_path": str(output)})
    print(json.dumps({"output_path": str(output), "datapoints": len(datapoints)}, indent=2))


def cmd_dry_run(args: argparse.Namespace) -> None:
    paths = RuntimePaths(root=Path(args.runtime_home))
    datapoints = _load(args)
    computed = dry_run(datapoints, _options(args, datapoints))
    write_structured_log(paths, "cli.dry_run", {"source": str(args.path), "datapoints": len(computed)})
    print(json.dumps([item.to_dict() for item in computed], indent=2))


def _add_chart_arguments(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("path")
    cmd.add_argument("--position-column", default="position")
    cmd.add_argument("--value-column", default="value")
    cmd.add_argument("--width", type=_number, default=200)
    cmd.add_argument("--height", type=_number, default=100)
    cmd.add_argument("--padding", type=_number, default=6)
    cmd.add_argument("--smoothing", type=float, default=0.2)
    cmd.add_argument("--show-area", action="store_true")
    cmd.add_argument("--no-dots", action="store_true")
    cmd.add_argument("--no-line", action="store_true")
    cmd.add_argument("--window-min")
    cmd.add_argument("--window-max")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sparkline-svg")
    parser.add_argument("--runtime-home", default=DEFAULT_HOME)
    sub = parser.add_subparsers(required=True)

    render_cmd = sub.add_parser("render")
    _add_chart_arguments(render_cmd)
    render_cmd.add_argument("--output")
    render_cmd.set_defaults(func=cmd_render)

    dry_run_cmd = sub.add_parser("dry-run")
    _add_chart_arguments(dry_run_cmd)
    dry_run_cmd.set_defaults(func=cmd_dry_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    with trace_scope():
        try:
            args.func(args)
        except SparklineError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
