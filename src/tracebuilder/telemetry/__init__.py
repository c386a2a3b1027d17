"""OpenTelemetry helpers for instrumentation.

With no SDK configured the API returns no-op tracers and meters, so the
helpers here are safe to call unconditionally.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional

from opentelemetry import metrics, trace

from tracebuilder.__version__ import __version__

__all__ = [
    "get_tracer",
    "get_meter",
    "reaction_span",
    "record_dispatch",
]

_dispatch_counter = None


def get_tracer(name: str, version: Optional[str] = None):
    """Return a tracer from the active OpenTelemetry provider."""
    return trace.get_tracer(name, version)


def get_meter(name: str, version: Optional[str] = None):
    """Return a meter from the active OpenTelemetry provider."""
    return metrics.get_meter(name, version)


def _get_dispatch_counter():
    global _dispatch_counter
    if _dispatch_counter is None:
        _dispatch_counter = get_meter("tracebuilder", __version__).create_counter(
            "tracebuilder.reaction.dispatches",
            description="Reaction dispatches that changed the configuration",
        )
    return _dispatch_counter


@contextmanager
def reaction_span(reaction: str) -> Iterator[Any]:
    """Trace one reaction dispatch and yield the span."""
    tracer = get_tracer("tracebuilder", __version__)
    with tracer.start_as_current_span(f"tracebuilder.reaction.{reaction}") as span:
        span.set_attribute("tracebuilder.reaction", reaction)
        yield span


def record_dispatch(reaction: str) -> None:
    """Count one reaction dispatch that committed a change."""
    _get_dispatch_counter().add(1, {"reaction": reaction})
