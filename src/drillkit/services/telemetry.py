"""Telemetry primitives — Span, @traced, trace_span.

Near-zero overhead when disabled (single ContextVar.get per call).
When enabled via --verbose, builds hierarchical span trees with timing
and merges them into ServiceResult.meta.
"""

from __future__ import annotations

import functools
import inspect
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

import structlog

from drillkit.services.result import ServiceResult

log = structlog.get_logger("drillkit.telemetry")

_enabled: ContextVar[bool] = ContextVar("_enabled", default=False)
_current_span: ContextVar[Span | None] = ContextVar("_current_span", default=None)


@dataclass
class Span:
    """A timed unit of work, possibly with nested children."""

    name: str
    children: list[Span] = field(default_factory=list)
    start_time: float = field(default_factory=time.perf_counter)
    end_time: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)

    @property
    def duration_ms(self) -> float:
        if self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time) * 1000

    def end(self) -> None:
        self.end_time = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 2)}
        if self.annotations:
            out["annotations"] = self.annotations
        if self.children:
            out["children"] = [c.to_dict() for c in self.children]
        return out


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Open a child span under the current one.

    Yields None when telemetry is disabled or no root span is active.
    """
    parent = _current_span.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name)
    parent.children.append(child)
    token = _current_span.set(child)
    try:
        yield child
    finally:
        child.end()
        _current_span.reset(token)


def _open(name: str) -> tuple[Span, bool]:
    """Start a span, nested under the active one if there is one.

    Returns the span and whether it is a root.
    """
    span = Span(name=name)
    parent = _current_span.get()
    if parent is not None:
        parent.children.append(span)
    return span, parent is None


def _finish(span: Span, result: Any, *, root: bool) -> Any:
    ok = result.ok if isinstance(result, ServiceResult) else True
    log.debug(
        "span.complete",
        span_name=span.name,
        duration_ms=round(span.duration_ms, 2),
        ok=ok,
        children=len(span.children),
    )
    if root and isinstance(result, ServiceResult):
        meta = {**(result.meta or {}), "telemetry": span.to_dict()}
        return result.model_copy(update={"meta": meta})
    return result


def traced(func: Callable[..., Any]) -> Callable[..., Any]:
    """Time a service method and attach its span tree to the returned ServiceResult.

    Nested traced calls become child spans; only the outermost call
    writes ``meta``. Works on plain and ``async`` methods alike.
    """
    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            if not _enabled.get():
                return await func(*args, **kwargs)
            span, root = _open(func.__qualname__)
            token = _current_span.set(span)
            try:
                result = await func(*args, **kwargs)
            finally:
                span.end()
                _current_span.reset(token)
            return _finish(span, result, root=root)

        return async_wrapper

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not _enabled.get():
            return func(*args, **kwargs)
        span, root = _open(func.__qualname__)
        token = _current_span.set(span)
        try:
            result = func(*args, **kwargs)
        finally:
            span.end()
            _current_span.reset(token)
        return _finish(span, result, root=root)

    return wrapper


def enable_telemetry() -> None:
    """Enable span collection (called by AppContext under --verbose)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def get_current_span() -> Span | None:
    """The active span, for manual annotation. None when disabled."""
    if not _enabled.get():
        return None
    return _current_span.get()
