"""Strategy enumerations for ``DictionaryEncoder``.

Each strategy is a closed set; callers pick one value per encoder.
"""

from __future__ import annotations

from enum import Enum, Flag, auto


class DataEncodingStrategy(str, Enum):
    """How raw ``bytes`` values are represented."""

    BASE64 = "base64"
    HEX = "hex"
    RAW = "raw"  # leave bytes untouched


class DateEncodingStrategy(str, Enum):
    """How ``datetime`` / ``date`` values are represented."""

    DEFERRED = "deferred"  # leave datetime objects untouched
    ISO8601 = "iso8601"
    SECONDS_SINCE_1970 = "seconds_since_1970"
    MILLISECONDS_SINCE_1970 = "milliseconds_since_1970"


class KeyEncodingStrategy(str, Enum):
    """How mapping keys are cased."""

    USE_DEFAULT_KEYS = "use_default_keys"
    CONVERT_TO_SNAKE_CASE = "convert_to_snake_case"
    CONVERT_TO_CAMEL_CASE = "convert_to_camel_case"


class NonConformingFloatEncodingStrategy(str, Enum):
    """How ``inf``, ``-inf`` and ``nan`` are represented."""

    RAISE = "raise"
    CONVERT_TO_STRING = "convert_to_string"
    NULL = "null"


class OutputFormatting(Flag):
    """Formatting options applied when rendering encoded output as JSON text."""

    COMPACT = 0
    PRETTY_PRINTED = auto()
    SORTED_KEYS = auto()
    WITHOUT_ESCAPING_SLASHES = auto()
