"""Handler protocol — the sink every fired event ends up in.

All handlers implement ``track(event, at, data)``.  A handler may expose
``event_name_type`` to have ``fire`` reject events whose name has another
type; leaving it ``None`` (or absent) accepts any name.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, TypeVar, runtime_checkable

from fireline.events.base import AnalyticsEvent, EventNameMismatchError, check_event_name
from fireline.events.configuration import now_utc
from fireline.events.erased import AnyEvent
from fireline.models.metadata import AnyMetadata

NameT_contra = TypeVar("NameT_contra", contravariant=True)


@runtime_checkable
class AnalyticsHandler(Protocol[NameT_contra]):
    """Protocol that every analytics handler must implement."""

    def track(
        self,
        event: AnalyticsEvent[NameT_contra, Any],
        at: datetime,
        data: Any,
    ) -> None:
        """Record *event* that happened *at* with payload *data*.

        Implementations decide how failures surface; the multiplexer applies
        its failure policy to anything raised here.
        """
        ...


def track_any(
    handler: AnalyticsHandler[Any],
    event: AnyEvent[Any],
    data: Any,
    at: datetime | None = None,
) -> None:
    """Track an erased event with an arbitrary payload.

    *data* is wrapped in ``AnyMetadata`` unless it already is one.
    """
    handler.track(
        event,
        at if at is not None else now_utc(),
        AnyMetadata.erase(data),
    )


__all__ = [
    "AnalyticsHandler",
    "EventNameMismatchError",
    "check_event_name",
    "track_any",
]
