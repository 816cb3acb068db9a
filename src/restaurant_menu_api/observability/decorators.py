"""OpenTelemetry tracing decorators."""

import asyncio
import functools
from collections.abc import Callable
from contextlib import contextmanager
from typing import Any, Iterator, TypeVar

from opentelemetry import trace

F = TypeVar("F", bound=Callable[..., Any])

TRACER_NAME = "menu-api"


@contextmanager
def _span(name: str, func_name: str) -> Iterator[None]:
    with trace.get_tracer(TRACER_NAME).start_as_current_span(name, record_exception=False) as span:
        span.set_attribute("function.name", func_name)
        try:
            yield
        except Exception as e:
            span.set_attribute("success", False)
            span.set_attribute("error.type", type(e).__name__)
            span.record_exception(e)
            raise
        span.set_attribute("success", True)


def traced(span_name: str | None = None) -> Callable[[F], F]:
    """Run the decorated function, plain or async, inside a span.

    The tracer is looked up on every call, so a provider installed after
    import by ``setup_observability`` still applies.

    Args:
        span_name: Name for the span (defaults to the function name)

    Returns:
        Decorated function with tracing
    """

    def decorator(func: F) -> F:
        name = span_name or func.__name__

        if asyncio.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with _span(name, func.__name__):
                    return await func(*args, **kwargs)

            return async_wrapper  # type: ignore

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with _span(name, func.__name__):
                return func(*args, **kwargs)

        return wrapper  # type: ignore

    return decorator
