"""Type-erased handlers.

``AnyHandler`` hides a handler's concrete type.  Every event it forwards is
erased to ``AnyEvent`` and every payload to ``AnyMetadata`` first, so the
wrapped handler sees only erased values.

``HashableAnyHandler`` does the same and also forwards equality and hashing
to the wrapped handler, which lets erased handlers key a dict.
"""

from __future__ import annotations

from collections.abc import Hashable
from datetime import datetime
from typing import Any

from fireline.events.erased import AnyEvent
from fireline.models.metadata import AnyMetadata


class AnyHandler:
    """Erase-then-forward wrapper around one handler."""

    def __init__(self, handler: Any) -> None:
        self._handler = handler

    @property
    def wrapped(self) -> Any:
        return self._handler

    @property
    def event_name_type(self) -> type | None:
        return getattr(self._handler, "event_name_type", None)

    def track(self, event: Any, at: datetime, data: Any) -> None:
        self._handler.track(AnyEvent.erase(event), at, AnyMetadata.erase(data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._handler!r})"


class HashableAnyHandler(AnyHandler):
    """An ``AnyHandler`` that compares and hashes like the handler it wraps.

    Two wrappers are equal when their handlers have the same type and compare
    equal.  Handlers provide their own identity: plain objects hash by
    identity, value types by their fields.

    Raises
    ------
    TypeError
        If the wrapped handler is not hashable.
    """

    def __init__(self, handler: Any) -> None:
        if not isinstance(handler, Hashable):
            raise TypeError(
                f"{type(handler).__name__} is not hashable and cannot be used "
                "as a registry key"
            )
        super().__init__(handler)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HashableAnyHandler):
            return NotImplemented
        return type(self._handler) is type(other._handler) and bool(
            self._handler == other._handler
        )

    def __hash__(self) -> int:
        return hash((type(self._handler), self._handler))
