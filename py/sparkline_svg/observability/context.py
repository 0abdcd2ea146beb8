from __future__ import annotations

import contextvars
import uuid
from contextlib import contextmanager
from typing import Iterator

NO_TRACE = "no-trace"

_TRACE_ID: contextvars.ContextVar[str] = contextvars.ContextVar("sparkline_trace_id", default=NO_TRACE)


def new_trace_id() -> str:
    return uuid.uuid4().hex


def get_trace_id() -> str:
    return _TRACE_ID.get()


def set_trace_id(trace_id: str) -> contextvars.Token[str]:
    return _TRACE_ID.set(trace_id)


def reset_trace_id(token: contextvars.Token[str]) -> None:
    _TRACE_ID.reset(token)


@contextmanager
def trace_scope(trace_id: str | None = None) -> Iterator[str]:
    """Bind a trace id (a fresh one when not given) for the duration of the block."""
    active = trace_id or new_trace_id()
    token = set_trace_id(active)
    try:
        yield active
    finally:
        reset_trace_id(token)
