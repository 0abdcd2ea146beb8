from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field, ValidationError

from sparkline_svg.chart import ChartResult, dry_run, render_chart
from sparkline_svg.datapoints import AXIS_NUMBER, parse_position
from sparkline_svg.errors import SparklineError
from sparkline_svg.observability.context import get_trace_id, new_trace_id, reset_trace_id, set_trace_id
from sparkline_svg.observability.log import read_structured_log, write_structured_log
from sparkline_svg.options import ChartOptions, max_datapoints, runtime_home
from sparkline_svg.paths import RuntimePaths

SVG_MEDIA_TYPE = "image/svg+xml"


def _runtime_paths() -> RuntimePaths:
    return RuntimePaths(root=Path(runtime_home()))


def _write_structured_log(event_type: str, payload: dict[str, Any]) -> None:
    write_structured_log(_runtime_paths(), event_type, payload)


class LineChartRequest(BaseModel):
    datapoints: list[Any] = Field(default_factory=list)
    axis: Literal["number", "datetime", "date", "time"] = AXIS_NUMBER
    options: dict[str, Any] = Field(default_factory=dict)


app = FastAPI(title="Sparkline SVG API", version="0.1.0")


@app.middleware("http")
async def trace_logging_middleware(request, call_next):  # type: ignore[no-untyped-def]
    trace_id = request.headers.get("x-trace-id") or new_trace_id()
    token = set_trace_id(trace_id)
    started = time.perf_counter()
    _write_structured_log(
        "request.start",
        {
            "method": request.method,
            "path": request.url.path,
        },
    )
    status_code = 500
    try:
        response = await call_next(request)
        status_code = int(response.status_code)
        response.headers["x-trace-id"] = trace_id
        return response
    except Exception as exc:  # noqa: BLE001
        _write_structured_log(
            "request.error",
            {
                "method": request.method,
                "path": request.url.path,
                "error": str(exc),
            },
        )
        raise
    finally:
        duration_ms = (time.perf_counter() - started) * 1000.0
        _write_structured_log(
            "request.end",
            {
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": round(duration_ms, 3),
            },
        )
        reset_trace_id(token)


@app.on_event("startup")
def startup() -> None:
    _runtime_paths().ensure()


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/v1/logs/stats")
def log_stats() -> dict[str, Any]:
    rows = read_structured_log(_runtime_paths())
    durations = [float(row.get("duration_ms", 0.0)) for row in rows if row.get("event_type") == "request.end"]
    avg = sum(durations) / len(durations) if durations else 0.0
    return {
        "request_count": len(durations),
        "error_count": sum(1 for row in rows if str(row.get("event_type", "")).endswith("error")),
        "chart_count": sum(1 for row in rows if row.get("event_type") in {"chart.render", "chart.dry_run"}),
        "avg_request_duration_ms": round(avg, 4),
    }


def _chart_error(kind: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={
            "error": kind,
            "message": message,
            "trace_id": get_trace_id(),
        },
    )


def _max_datapoints_or_raise() -> int:
    try:
        return max_datapoints()
    except ValueError as exc:
        raise HTTPException(status_code=500, detail=f"invalid server config: {exc}") from exc


def _decode_datapoint(item: Any, axis: str) -> Any:
    if isinstance(item, (list, tuple)) and len(item) == 2:
        return (parse_position(item[0], axis), item[1])
    return item


def _decode_request(request: LineChartRequest) -> tuple[list[Any], ChartOptions]:
    limit = _max_datapoints_or_raise()
    if len(request.datapoints) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"too many datapoints: {len(request.datapoints)} > {limit} (SPARKLINE_MAX_DATAPOINTS)",
        )

    options = dict(request.options)
    try:
        window = options.get("window")
        if isinstance(window, dict):
            options["window"] = {key: parse_position(value, request.axis) for key, value in window.items()}
        raw = [_decode_datapoint(item, request.axis) for item in request.datapoints]
    except SparklineError as exc:
        raise _chart_error(exc.kind, exc.message) from exc

    try:
        chart_options = ChartOptions(**options)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=f"invalid chart options: {exc}") from exc
    return raw, chart_options


@app.post("/v1/charts/line")
def line_chart(request: LineChartRequest) -> Response:
    raw, options = _decode_request(request)
    result: ChartResult = render_chart(raw, options)
    if result.error is not None:
        _write_structured_log("chart.error", {"axis": request.axis, "error": result.error.kind})
        raise _chart_error(result.error.kind, result.error.message)
    _write_structured_log("chart.render", {"axis": request.axis, "datapoints": len(raw)})
    return Response(content=result.svg, media_type=SVG_MEDIA_TYPE)


@app.post("/v1/charts/line/dry-run")
def line_chart_dry_run(request: LineChartRequest) -> dict[str, Any]:
    raw, options = _decode_request(request)
    try:
        computed = dry_run(raw, options)
    except SparklineError as exc:
        _write_structured_log("chart.error", {"axis": request.axis, "error": exc.kind})
        raise _chart_error(exc.kind, exc.message) from exc
    _write_structured_log("chart.dry_run", {"axis": request.axis, "datapoints": len(computed)})
    return {
        "count": len(computed),
        "datapoints": [datapoint.to_dict() for datapoint in computed],
    }
