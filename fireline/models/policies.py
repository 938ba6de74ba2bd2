"""Closed policy enumerations shared by handlers, encoders and settings."""

from __future__ import annotations

from enum import Enum


class EncodingFailureAction(str, Enum):
    """What a handler does with an event whose metadata fails to encode."""

    IGNORE = "ignore"
    ERROR = "error"


class DispatchFailurePolicy(str, Enum):
    """How a multiplexer reacts when one of its handlers raises.

    * ``fail_fast`` — re-raise the first failure; remaining handlers are skipped.
    * ``collect`` — deliver to every handler, then raise one aggregate error.
    * ``log`` — deliver to every handler, log failures, never raise.
    """

    FAIL_FAST = "fail_fast"
    COLLECT = "collect"
    LOG = "log"
