"""Type-erased events.

``AnyEvent[Name]`` forgets both the concrete event type and its payload type;
its payload is always ``AnyMetadata``.  ``SomeEvent[Name, Metadata]`` forgets
only the concrete event type and keeps the payload type, so firing still
checks the payload.

Erasing is identity-preserving: an event that already is the target erased
type is returned as-is rather than wrapped again.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from fireline.events.base import MISSING, MetadataT, NameT, metadata_type_of
from fireline.events.raw import RawEvent
from fireline.models.metadata import AnyMetadata, EmptyMetadata, MetadataTypeMismatchError

EventT = TypeVar("EventT")


class EventTypeMismatchError(TypeError):
    """Raised when an event is downcast to a type it is not."""

    def __init__(self, expected: type, actual: type) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected event type {expected.__qualname__}, received {actual.__qualname__}"
        )


class AnyEvent(RawEvent[NameT, AnyMetadata], Generic[NameT]):
    """A fully type-erased event; payloads travel as ``AnyMetadata``."""

    type_roles: ClassVar[tuple[str, ...]] = ("name",)

    @classmethod
    def erase(cls, event: Any) -> AnyEvent[Any]:
        """Return *event* itself if it is an ``AnyEvent``, else a converted copy."""
        if isinstance(event, AnyEvent):
            return event
        return cls.from_event(event)

    @classmethod
    def metadata_type(cls) -> type:
        return AnyMetadata

    def fire(self, handler: Any, data: Any = MISSING) -> None:
        if data is MISSING:
            data = EmptyMetadata()
        super().fire(handler, AnyMetadata.erase(data))


AnyStringEvent = AnyEvent[str]


class SomeEvent(RawEvent[NameT, MetadataT], Generic[NameT, MetadataT]):
    """An event whose concrete type is erased but whose payload type is kept.

    Examples
    --------
    >>> from fireline.models import AnalyticsMetadata
    >>> class MessageSelected(AnalyticsMetadata):
    ...     index: int
    >>> selected = SomeEvent[str, MessageSelected]("messageSelected")
    >>> selected.metadata_type() is MessageSelected
    True
    """

    @classmethod
    def erase(cls, event: Any) -> SomeEvent[Any, Any]:
        """Return *event* itself if it is already an instance of ``cls``."""
        if isinstance(event, cls):
            return event
        return cls.from_event(event)

    @classmethod
    def _conversion_target(cls, event: Any) -> type[RawEvent[Any, Any]]:
        source = metadata_type_of(event)
        target = cls.metadata_type()
        if target is None:
            parameters = cls.__pydantic_generic_metadata__.get("parameters") or ()
            if source is None or len(parameters) != 2:
                return cls
            return cls[Any, source]  # type: ignore[index]
        if source is not None and not issubclass(source, target):
            raise MetadataTypeMismatchError(target, source)
        return cls


def downcast_event(event: Any, cls: type[EventT]) -> EventT:
    """Return *event* typed as *cls*.

    Raises
    ------
    EventTypeMismatchError
        If *event* is not an instance of *cls*.
    """
    if not isinstance(event, cls):
        raise EventTypeMismatchError(cls, type(event))
    return event
