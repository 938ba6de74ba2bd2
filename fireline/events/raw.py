"""RawEvent — a frozen, generic event value.

``RawEvent[NameT, MetadataT]`` stores the three event attributes as
validated Pydantic fields.  The generic arguments are kept at runtime, so
the payload type of ``SomeEvent[str, LoginFailureReason]`` is known when
firing and when converting other events.

Every transform returns a new event; instances are never mutated.
"""

from __future__ import annotations

import typing
from typing import Annotated, Any, ClassVar, Generic

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, ValidationError

from fireline.events.base import (
    MISSING,
    EventNameMismatchError,
    MetadataT,
    NameT,
    fire_event,
)
from fireline.events.configuration import AnalyticsConfiguration, DefaultConfiguration
from fireline.models.groups import Group, GroupLike, as_group

GroupField = Annotated[Group, PlainValidator(as_group)]


class RawEvent(BaseModel, Generic[NameT, MetadataT]):
    """An event defined entirely by its attributes.

    Examples
    --------
    >>> from fireline.models import EmptyMetadata
    >>> viewed = RawEvent[str, EmptyMetadata]("screenViewed", group=Group.STATE)
    >>> viewed.appending(Group.ACTION).group == Group.STATE | Group.ACTION
    True
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # Meaning of this class's own type parameters, in order.
    type_roles: ClassVar[tuple[str, ...]] = ("name", "metadata")

    # Names are never coerced between types.
    name: Annotated[NameT, Field(strict=True)]
    group: GroupField = Group.ACTION
    configuration: AnalyticsConfiguration = Field(default_factory=DefaultConfiguration)

    def __init__(self, name: Any = MISSING, /, **data: Any) -> None:
        if name is not MISSING:
            data["name"] = name
        super().__init__(**data)

    # ------------------------------------------------------------------
    # Generic arguments
    # ------------------------------------------------------------------

    @classmethod
    def _type_argument(cls, role: str) -> type | None:
        for klass in cls.__mro__:
            meta = getattr(klass, "__pydantic_generic_metadata__", None)
            if not meta or meta.get("origin") is None:
                continue
            roles = getattr(meta["origin"], "type_roles", ())
            args = meta.get("args") or ()
            if role not in roles or roles.index(role) >= len(args):
                continue
            argument = args[roles.index(role)]
            if isinstance(argument, type):
                return argument
            origin = typing.get_origin(argument)
            if isinstance(origin, type):
                return origin
        return None

    @classmethod
    def name_type(cls) -> type | None:
        """The concrete name type, or ``None`` when unparameterized."""
        return cls._type_argument("name")

    @classmethod
    def metadata_type(cls) -> type | None:
        """The concrete payload type, or ``None`` when unparameterized."""
        return cls._type_argument("metadata")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def some(
        cls,
        name: Any = MISSING,
        group: GroupLike = Group.ACTION,
        configuration: AnalyticsConfiguration | None = None,
    ) -> RawEvent[Any, Any]:
        """Build an event, default-constructing the name when omitted.

        ``SomeEvent[str, M].some(group=Group.INFO)`` has the name ``""``.
        """
        if name is MISSING:
            name_type = cls.name_type()
            if name_type is None:
                raise TypeError(f"{cls.__name__} has no concrete name type to default")
            name = name_type()
        if configuration is None:
            return cls(name, group=group)
        return cls(name, group=group, configuration=configuration)

    @classmethod
    def from_event(
        cls,
        event: Any,
        *,
        transferred_to: GroupLike | None = None,
        appending: GroupLike | None = None,
        configuration: AnalyticsConfiguration | None = None,
    ) -> RawEvent[Any, Any]:
        """Convert any event into this event type.

        The name is always kept.  The group is kept unless ``transferred_to``
        replaces it or ``appending`` adds to it.  The configuration is kept
        unless given.

        Raises
        ------
        ValueError
            If both ``transferred_to`` and ``appending`` are given.
        EventNameMismatchError
            If the name is not an instance of this type's name type.
        """
        if transferred_to is not None and appending is not None:
            raise ValueError("transferred_to and appending are mutually exclusive")

        group = as_group(event.group)
        if transferred_to is not None:
            group = as_group(transferred_to)
        elif appending is not None:
            group = group.union(appending)

        target = cls._conversion_target(event)
        try:
            return target(
                event.name,
                group=group,
                configuration=event.configuration if configuration is None else configuration,
            )
        except ValidationError as exc:
            if not any(error["loc"][:1] == ("name",) for error in exc.errors()):
                raise
            expected = target.name_type()
            raise EventNameMismatchError(
                f"{target.__name__} takes "
                f"{expected.__qualname__ if expected else 'other'} event names, "
                f"received {type(event.name).__qualname__} ({event.name!r})"
            ) from exc

    @classmethod
    def _conversion_target(cls, event: Any) -> type[RawEvent[Any, Any]]:
        return cls

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def transferred_to(self, group: GroupLike) -> RawEvent[NameT, MetadataT]:
        """Return a copy whose group is exactly *group*."""
        return self.model_copy(update={"group": as_group(group)})

    def appending(self, group: GroupLike) -> RawEvent[NameT, MetadataT]:
        """Return a copy whose group also includes *group*."""
        return self.model_copy(update={"group": self.group.union(group)})

    def with_configuration(
        self, configuration: AnalyticsConfiguration
    ) -> RawEvent[NameT, MetadataT]:
        return self.model_copy(update={"configuration": configuration})

    # ------------------------------------------------------------------
    # Fire
    # ------------------------------------------------------------------

    def fire(self, handler: Any, data: Any = MISSING) -> None:
        """Fire this event on *handler*; see :func:`fireline.events.base.fire_event`."""
        fire_event(self, handler, data)
