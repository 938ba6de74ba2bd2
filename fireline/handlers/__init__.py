"""Fireline handlers — the handler protocol, erasure wrappers, routing and sinks."""

from fireline.handlers.base import (
    AnalyticsHandler,
    EventNameMismatchError,
    check_event_name,
    track_any,
)
from fireline.handlers.erased import AnyHandler, HashableAnyHandler
from fireline.handlers.multiplex import (
    MultiplexAnyHandler,
    MultiplexDispatchError,
    MultiplexHandler,
)
from fireline.handlers.sinks import (
    ConsoleHandler,
    EncodingHandler,
    LoggingHandler,
    TrackedEvent,
)

__all__ = [
    "AnalyticsHandler",
    "AnyHandler",
    "ConsoleHandler",
    "EncodingHandler",
    "EventNameMismatchError",
    "HashableAnyHandler",
    "LoggingHandler",
    "MultiplexAnyHandler",
    "MultiplexDispatchError",
    "MultiplexHandler",
    "TrackedEvent",
    "check_event_name",
    "track_any",
]
