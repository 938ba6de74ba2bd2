"""Self-describing payloads.

A ``GlobalMetadata`` value knows which event it belongs to, so call sites
can skip declaring the event separately::

    class LoginFailureReason(GlobalMetadata):
        reason: str

        @property
        def event(self) -> SomeEvent[str, LoginFailureReason]:
            return SomeEvent[str, LoginFailureReason]("loginFailed")

    LoginFailureReason(reason="failed").send(to=handler)
"""

from __future__ import annotations

from typing import Any, ClassVar

from fireline.models.metadata import AnalyticsMetadata


class GlobalMetadata(AnalyticsMetadata):
    """Metadata that carries its own event.

    Subclasses either override ``event`` or set ``event_type`` to an event
    class that can be built without arguments (via ``some()`` if it has one).
    """

    event_type: ClassVar[Any] = None

    @property
    def event(self) -> Any:
        event_type = type(self).event_type
        if event_type is None:
            raise NotImplementedError(
                f"{type(self).__name__} must override `event` or set `event_type`"
            )
        factory = getattr(event_type, "some", event_type)
        return factory()

    def send(self, to: Any) -> None:
        """Fire this value's event on the handler *to*, with ``self`` as payload."""
        self.event.fire(to, self)
