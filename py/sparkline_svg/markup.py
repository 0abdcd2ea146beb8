from __future__ import annotations

import html

from sparkline_svg.curve import build_path, format_number, path_to_string
from sparkline_svg.mapper import ViewportPoint
from sparkline_svg.options import ChartOptions

SVG_NS = "http://www.w3.org/2000/svg"


def _document(options: ChartOptions, body: str) -> str:
    return (
        f'<svg width="100%" height="100%" viewBox="0 0 {options.width} {options.height}" xmlns="{SVG_NS}">\n'
        f"{body}"
        "</svg>\n"
    )


def _circle(point: ViewportPoint, options: ChartOptions) -> str:
    return (
        f'  <circle cx="{format_number(point.x)}" cy="{format_number(point.y)}" '
        f'r="{options.dot_radius}" fill="{options.dot_color}"/>\n'
    )


def _stroked_path(d: str, options: ChartOptions) -> str:
    return f'  <path d="{d}" fill="none" stroke="{options.line_color}" stroke-width="{options.line_width}"/>\n'


def draw_placeholder(options: ChartOptions) -> str:
    text = html.escape(options.placeholder)
    return _document(options, f'  <text x="50%" y="50%" text-anchor="middle">{text}</text>\n')


def draw_single(point: ViewportPoint, options: ChartOptions) -> str:
    y = format_number(point.y)
    left = format_number(options.padding)
    right = format_number(options.width - options.padding)
    return _document(options, _stroked_path(f"M{left},{y}L{right},{y}", options) + _circle(point, options))


def draw_area(curve: str, first: ViewportPoint, options: ChartOptions) -> str:
    d = f"{curve}V{format_number(options.height)}H{format_number(first.x)}Z"
    return f'  <path d="{d}" fill="{options.area_color}" stroke="none"/>\n'


def draw_chart(points: list[ViewportPoint], options: ChartOptions) -> str:
    if not points:
        return draw_placeholder(options)
    if len(points) == 1:
        return draw_single(points[0], options)

    curve = path_to_string(build_path(points, options.line_smoothing))
    layers: list[str] = []
    if options.show_area:
        layers.append(draw_area(curve, points[0], options))
    if options.show_line:
        layers.append(_stroked_path(curve, options))
    if options.show_dot:
        layers.extend(_circle(point, options) for point in points)
    return _document(options, "".join(layers))
