"""Event configuration — the processing strategy applied at fire time.

``fire`` never calls a handler directly; it hands the event to its
configuration, which decides whether and when ``handler.track`` runs.  The
default strategy forwards immediately.  Subclasses may debounce, throttle,
sample or suppress, but keep the ``process`` signature.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fireline.events.base import AnalyticsEvent
    from fireline.handlers.base import AnalyticsHandler


def now_utc() -> datetime:
    """Timestamp source for fired events."""
    return datetime.now(timezone.utc)


class AnalyticsConfiguration:
    """Base processing strategy.

    Configurations are value-like: two instances are equal when they share a
    type and instance state.  Stateful strategies (e.g. a throttle keeping its
    last-fired time) should override ``__eq__``/``__hash__`` if that is not
    what they want.
    """

    def process(
        self,
        event: AnalyticsEvent[Any, Any],
        data: Any,
        handler: AnalyticsHandler[Any],
        at: datetime | None = None,
    ) -> None:
        """Forward *event* and *data* to ``handler.track``.

        Parameters
        ----------
        event:
            The event being fired.
        data:
            Its metadata payload.
        handler:
            The handler the event was fired on.
        at:
            Event time; defaults to the current UTC time.
        """
        handler.track(event, at if at is not None else now_utc(), data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnalyticsConfiguration):
            return NotImplemented
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DefaultConfiguration(AnalyticsConfiguration):
    """Forwards every event to its handler immediately and unchanged."""


DEFAULT_CONFIGURATION = DefaultConfiguration()
