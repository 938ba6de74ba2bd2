"""Concrete handlers that encode payloads before emitting them.

``EncodingHandler`` turns each tracked event into a ``TrackedEvent`` record:
the event name, its group, the event time and the payload encoded by an
``AnalyticsEncoder``.  Subclasses decide where the record goes by
implementing ``emit``.

When a payload cannot be encoded the handler applies its
``EncodingFailureAction``: ``ignore`` logs a warning and drops the event,
``error`` re-raises the ``EncodingError``.
"""

from __future__ import annotations

import abc
import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from fireline.config import settings
from fireline.encoding.base import AnalyticsEncoder, EncodingError
from fireline.encoding.dictionary import DictionaryEncoder
from fireline.events.raw import GroupField
from fireline.models.groups import as_group
from fireline.models.policies import EncodingFailureAction

logger = logging.getLogger(__name__)


class TrackedEvent(BaseModel):
    """One encoded event, ready to emit."""

    model_config = ConfigDict(frozen=True)

    name: Any
    group: GroupField
    at: datetime
    payload: dict[str, Any] = {}


class EncodingHandler(abc.ABC):
    """Base class for handlers that emit encoded records.

    Parameters
    ----------
    encoder:
        Encoder for payloads.  Defaults to ``DictionaryEncoder.from_settings``.
    on_encoding_failure:
        Defaults to ``settings.encoding_failure_action``.  Plain values such
        as ``"error"`` are accepted; unknown ones raise ``ValueError``.
    name_type:
        Optional event name type enforced by ``fire``.
    """

    def __init__(
        self,
        encoder: AnalyticsEncoder[dict[str, Any]] | None = None,
        on_encoding_failure: EncodingFailureAction | str | None = None,
        name_type: type | None = None,
    ) -> None:
        self.encoder = encoder if encoder is not None else DictionaryEncoder.from_settings(settings)
        self.on_encoding_failure = EncodingFailureAction(
            on_encoding_failure
            if on_encoding_failure is not None
            else settings.encoding_failure_action
        )
        self.event_name_type = name_type

    def track(self, event: Any, at: datetime, data: Any) -> None:
        try:
            payload = self.encoder.encode_metadata(data)
        except EncodingError as exc:
            if self.on_encoding_failure is EncodingFailureAction.ERROR:
                raise
            logger.warning(
                "%s: dropped event %r, metadata could not be encoded: %s",
                type(self).__name__,
                event.name,
                exc,
            )
            return
        self.emit(
            TrackedEvent(name=event.name, group=as_group(event.group), at=at, payload=payload)
        )

    @abc.abstractmethod
    def emit(self, record: TrackedEvent) -> None:
        """Deliver *record* to this handler's destination."""
        ...


from fireline.handlers.sinks.console import ConsoleHandler  # noqa: E402
from fireline.handlers.sinks.logging_sink import LoggingHandler  # noqa: E402

__all__ = [
    "ConsoleHandler",
    "EncodingHandler",
    "LoggingHandler",
    "TrackedEvent",
]
