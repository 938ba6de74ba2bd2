"""Fireline events — the event protocol, concrete and type-erased events.

Quick start::

    from fireline.events import SomeEvent
    from fireline.models import AnalyticsMetadata, Group

    class LoginFailureReason(AnalyticsMetadata):
        reason: str

    login_failed = SomeEvent[str, LoginFailureReason]("loginFailed")
    login_failed.fire(handler, LoginFailureReason(reason="failed"))
"""

from fireline.events.base import (
    MISSING,
    AnalyticsEvent,
    EnumEvent,
    EventBase,
    EventNameMismatchError,
    check_event_name,
    default_metadata,
    fire_event,
    metadata_type_of,
)
from fireline.events.configuration import (
    DEFAULT_CONFIGURATION,
    AnalyticsConfiguration,
    DefaultConfiguration,
    now_utc,
)
from fireline.events.erased import (
    AnyEvent,
    AnyStringEvent,
    EventTypeMismatchError,
    SomeEvent,
    downcast_event,
)
from fireline.events.global_metadata import GlobalMetadata
from fireline.events.raw import RawEvent

__all__ = [
    "AnalyticsConfiguration",
    "AnalyticsEvent",
    "AnyEvent",
    "AnyStringEvent",
    "DEFAULT_CONFIGURATION",
    "DefaultConfiguration",
    "EnumEvent",
    "EventBase",
    "EventNameMismatchError",
    "EventTypeMismatchError",
    "GlobalMetadata",
    "MISSING",
    "RawEvent",
    "SomeEvent",
    "check_event_name",
    "default_metadata",
    "downcast_event",
    "fire_event",
    "metadata_type_of",
    "now_utc",
]
