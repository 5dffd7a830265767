"""Span helpers for the assistant pipeline and the completion client."""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

P = ParamSpec("P")
R = TypeVar("R")

_tracer = trace.get_tracer("taskboard")

# Keyword arguments recorded as span attributes. Chat messages, prompts and
# model output are never in this set.
_RECORDED_KWARGS = frozenset({"task_id", "identifier", "status", "action", "count", "limit"})


def traced(
    span_name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Run the decorated coroutine inside a span named span_name.

    Allowlisted keyword arguments become "arg.<name>" attributes. An exception
    marks the span as failed and is re-raised unchanged.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with _tracer.start_as_current_span(span_name) as span:
                for key in _RECORDED_KWARGS.intersection(kwargs):
                    span.set_attribute(f"arg.{key}", str(kwargs[key]))
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    set_span_error(e)
                    raise

        return wrapper

    return decorator


def add_span_attributes(**attributes: Any) -> None:
    """Attach attributes to the current span if it is recording."""
    span = trace.get_current_span()
    if not span.is_recording():
        return
    for key, value in attributes.items():
        span.set_attribute(key, value)


def set_span_error(exception: Exception) -> None:
    span = trace.get_current_span()
    if span.is_recording():
        span.record_exception(exception)
        span.set_status(Status(StatusCode.ERROR, type(exception).__name__))
