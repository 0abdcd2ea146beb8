from sparkline_svg.observability.context import get_trace_id, reset_trace_id, set_trace_id, trace_scope
from sparkline_svg.observability.log import read_structured_log, write_structured_log

__all__ = [
    "get_trace_id",
    "read_structured_log",
    "reset_trace_id",
    "set_trace_id",
    "trace_scope",
    "write_structured_log",
]
