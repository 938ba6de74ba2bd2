"""Event protocol and the shared fire implementation.

An event is anything with a ``name``, a ``group`` and a ``configuration``
that can be fired at a handler.  The name type links events to handlers:
a handler for ``str`` names only receives events with ``str`` names.
Statically this is the shared ``NameT`` parameter; at runtime a handler may
declare ``event_name_type`` and ``fire`` checks it.

Two ways to declare events without Pydantic:

* Plain classes mixing in ``EventBase``.
* Enums subclassing ``EnumEvent`` — the member value is the event name::

    class LoginEvent(EnumEvent):
        LOGIN_SCREEN_VIEWED = "loginScreenViewed"
        LOGIN_ATTEMPTED = "loginAttempted"

        @property
        def group(self) -> Group:
            if self is LoginEvent.LOGIN_SCREEN_VIEWED:
                return Group.STATE
            return Group.ACTION
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from pydantic import ValidationError

from fireline.config import settings
from fireline.events.configuration import DEFAULT_CONFIGURATION, AnalyticsConfiguration
from fireline.models.groups import Group
from fireline.models.metadata import EmptyMetadata, MetadataTypeMismatchError

if TYPE_CHECKING:
    from fireline.handlers.base import AnalyticsHandler

logger = logging.getLogger(__name__)

NameT = TypeVar("NameT")
MetadataT = TypeVar("MetadataT")


class _Missing:
    """Sentinel for "no metadata supplied"."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class EventNameMismatchError(TypeError):
    """Raised when an event's name type does not match its handler's."""


@runtime_checkable
class AnalyticsEvent(Protocol[NameT, MetadataT]):
    """A named, grouped, configurable analytics event."""

    @property
    def name(self) -> NameT: ...

    @property
    def group(self) -> Group: ...

    @property
    def configuration(self) -> AnalyticsConfiguration: ...

    def fire(self, handler: AnalyticsHandler[NameT], data: MetadataT = MISSING) -> None:
        """Send this event with *data* to *handler* through ``configuration``."""
        ...


# ---------------------------------------------------------------------------
# Shared implementation
# ---------------------------------------------------------------------------


def metadata_type_of(event: Any) -> type | None:
    """Return the payload type an event declares, or ``None`` if unknown."""
    factory = getattr(event, "metadata_type", None)
    if not callable(factory):
        return None
    declared = factory()
    return declared if isinstance(declared, type) else None


def default_metadata(event: Any) -> Any:
    """Default-construct the payload for an event fired without data.

    Raises
    ------
    TypeError
        If the event declares no payload type or the type needs arguments.
    """
    metadata_type = metadata_type_of(event)
    if metadata_type is None:
        raise TypeError(
            f"Cannot fire {event!r} without data: its metadata type is unknown"
        )
    try:
        return metadata_type()
    except (TypeError, ValidationError) as exc:
        raise TypeError(
            f"Cannot fire {event!r} without data: "
            f"{metadata_type.__qualname__} is not default-constructible"
        ) from exc


def check_event_name(event: Any, handler: Any) -> None:
    """Verify *event* may be tracked by *handler*.

    Handlers opt in by exposing ``event_name_type``; ``None`` accepts any name.

    Raises
    ------
    EventNameMismatchError
        If the event name is not an instance of the handler's name type.
    """
    expected = getattr(handler, "event_name_type", None)
    if expected is None:
        return
    if not isinstance(event.name, expected):
        raise EventNameMismatchError(
            f"{type(handler).__name__} tracks {expected.__qualname__} event names, "
            f"received {type(event.name).__qualname__} ({event.name!r})"
        )


def fire_event(event: Any, handler: Any, data: Any = MISSING) -> None:
    """Fire *event* on *handler*.

    Checks the name type, default-constructs missing metadata, verifies the
    payload type when the event declares one, then delegates to
    ``event.configuration.process``.
    """
    if settings.check_event_names:
        check_event_name(event, handler)
    if data is MISSING:
        data = default_metadata(event)
    else:
        expected = metadata_type_of(event)
        if expected is not None and not isinstance(data, expected):
            raise MetadataTypeMismatchError(expected, type(data))

    logger.debug(
        "Firing %r (group=%s) on %s", event.name, event.group, type(handler).__name__
    )
    event.configuration.process(event, data, handler)


# ---------------------------------------------------------------------------
# Default implementations
# ---------------------------------------------------------------------------


class EventBase:
    """Defaults for hand-written events.

    Subclasses provide ``name``; everything else has a default:
    ``group`` is ``Group.ACTION``, ``configuration`` forwards immediately and
    the payload is ``EmptyMetadata``.
    """

    @property
    def group(self) -> Group:
        return Group.ACTION

    @property
    def configuration(self) -> AnalyticsConfiguration:
        return DEFAULT_CONFIGURATION

    @classmethod
    def metadata_type(cls) -> type:
        return EmptyMetadata

    def fire(self, handler: Any, data: Any = MISSING) -> None:
        fire_event(self, handler, data)


class EnumEvent(EventBase, Enum):
    """Enum-backed events.  The member value is the event name."""

    @property
    def name(self) -> Any:  # type: ignore[override]
        return self._value_
