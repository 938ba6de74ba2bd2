"""Logging sink — writes each tracked event to a stdlib logger."""

from __future__ import annotations

import logging
from typing import Any

from fireline.handlers.sinks import EncodingHandler, TrackedEvent
from fireline.handlers.sinks._formatting import format_group_label, format_payload


class LoggingHandler(EncodingHandler):
    """Emits one log record per tracked event.

    Parameters
    ----------
    logger:
        Target logger.  Defaults to ``fireline.events.tracked``.
    level:
        Log level for emitted records.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.logger = logger if logger is not None else logging.getLogger("fireline.events.tracked")
        self.level = level

    def emit(self, record: TrackedEvent) -> None:
        self.logger.log(
            self.level,
            "%s [%s] at %s %s",
            record.name,
            format_group_label(record.group),
            record.at.isoformat(),
            format_payload(record),
        )
