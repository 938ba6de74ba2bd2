"""Reference encoder — payloads to plain dict / list / scalar structures.

The payload is first dumped by Pydantic in python mode (so models,
dataclasses and ``AnyMetadata`` wrappers all flatten the same way), then
every leaf is normalised according to the encoder's strategies.  The result
is JSON-compatible unless ``DateEncodingStrategy.DEFERRED`` or
``DataEncodingStrategy.RAW`` keep native objects in place.
"""

from __future__ import annotations

import base64
import json
import math
from collections.abc import Mapping
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter
from pydantic.alias_generators import to_camel, to_snake
from pydantic_core import PydanticSerializationError, to_jsonable_python

from fireline.encoding.base import EncodingError
from fireline.encoding.strategies import (
    DataEncodingStrategy,
    DateEncodingStrategy,
    KeyEncodingStrategy,
    NonConformingFloatEncodingStrategy,
    OutputFormatting,
)

if TYPE_CHECKING:
    from fireline.config import FirelineSettings

_ANY = TypeAdapter(Any)


class DictionaryEncoder:
    """Encodes metadata into a key-value structure.

    Parameters
    ----------
    data_encoding, date_encoding, key_encoding, non_conforming_float:
        Leaf strategies; see :mod:`fireline.encoding.strategies`.
    output_formatting:
        Only used by :meth:`encode_json`.
    positive_infinity, negative_infinity, nan:
        Replacement strings for ``NonConformingFloatEncodingStrategy.CONVERT_TO_STRING``.
    context:
        Passed through to Pydantic serializers as serialization context.

    Examples
    --------
    >>> from fireline.models import EmptyMetadata
    >>> DictionaryEncoder().encode_metadata(EmptyMetadata())
    {}
    """

    def __init__(
        self,
        *,
        data_encoding: DataEncodingStrategy = DataEncodingStrategy.BASE64,
        date_encoding: DateEncodingStrategy = DateEncodingStrategy.DEFERRED,
        key_encoding: KeyEncodingStrategy = KeyEncodingStrategy.USE_DEFAULT_KEYS,
        non_conforming_float: NonConformingFloatEncodingStrategy = (
            NonConformingFloatEncodingStrategy.RAISE
        ),
        output_formatting: OutputFormatting = OutputFormatting.PRETTY_PRINTED,
        positive_infinity: str = "+Infinity",
        negative_infinity: str = "-Infinity",
        nan: str = "NaN",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.data_encoding = data_encoding
        self.date_encoding = date_encoding
        self.key_encoding = key_encoding
        self.non_conforming_float = non_conforming_float
        self.output_formatting = output_formatting
        self.positive_infinity = positive_infinity
        self.negative_infinity = negative_infinity
        self.nan = nan
        self.context = dict(context or {})

    @classmethod
    def from_settings(cls, settings: FirelineSettings, **overrides: Any) -> DictionaryEncoder:
        """Build an encoder using the date and key strategies from *settings*."""
        options: dict[str, Any] = {
            "date_encoding": settings.date_encoding,
            "key_encoding": settings.key_encoding,
        }
        options.update(overrides)
        return cls(**options)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def encode(self, value: Any) -> Any:
        """Encode *value* into nested dicts, lists and scalars.

        Raises
        ------
        EncodingError
            If any part of *value* cannot be represented.
        """
        try:
            dumped = _ANY.dump_python(value, mode="python", context=self.context or None)
        except PydanticSerializationError as exc:
            raise EncodingError(
                f"Cannot serialize {type(value).__name__}: {exc}", value
            ) from exc
        return self._convert(dumped, "$")

    def encode_metadata(self, data: Any) -> dict[str, Any]:
        """Encode *data*, requiring the result to be a mapping.

        Raises
        ------
        EncodingError
            If encoding fails or the encoded shape is not a ``dict``.
        """
        encoded = self.encode(data)
        if not isinstance(encoded, dict):
            raise EncodingError(
                f"Expected: dict[str, Any], received: {type(encoded).__name__}",
                encoded,
            )
        return encoded

    def encode_json(self, value: Any) -> str:
        """Encode *value* and render it as JSON text using ``output_formatting``."""
        encoded = self.encode(value)
        pretty = OutputFormatting.PRETTY_PRINTED in self.output_formatting
        text = json.dumps(
            encoded,
            indent=2 if pretty else None,
            separators=None if pretty else (",", ":"),
            sort_keys=OutputFormatting.SORTED_KEYS in self.output_formatting,
            default=_json_default,
        )
        if OutputFormatting.WITHOUT_ESCAPING_SLASHES not in self.output_formatting:
            text = text.replace("/", "\\/")
        return text

    # ------------------------------------------------------------------
    # Leaf conversion
    # ------------------------------------------------------------------

    def _convert(self, value: Any, path: str) -> Any:
        if isinstance(value, Enum):
            return self._convert(value.value, path)
        if value is None or isinstance(value, (bool, str)):
            return value
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return self._convert_float(value, path)
        if isinstance(value, (datetime, date, time)):
            return self._convert_date(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self._convert_data(bytes(value))
        if isinstance(value, Mapping):
            return {
                self._convert_key(key): self._convert(item, f"{path}.{key}")
                for key, item in value.items()
            }
        if isinstance(value, (list, tuple, set, frozenset)):
            return [self._convert(item, f"{path}[{index}]") for index, item in enumerate(value)]
        try:
            return to_jsonable_python(value)
        except PydanticSerializationError as exc:
            raise EncodingError(
                f"Unsupported value of type {type(value).__name__} at {path}", value
            ) from exc

    def _convert_float(self, value: float, path: str) -> Any:
        if math.isfinite(value):
            return value
        strategy = self.non_conforming_float
        if strategy is NonConformingFloatEncodingStrategy.NULL:
            return None
        if strategy is NonConformingFloatEncodingStrategy.CONVERT_TO_STRING:
            if math.isnan(value):
                return self.nan
            return self.positive_infinity if value > 0 else self.negative_infinity
        raise EncodingError(f"Non-conforming float {value!r} at {path}", value)

    def _convert_date(self, value: datetime | date | time) -> Any:
        strategy = self.date_encoding
        if strategy is DateEncodingStrategy.DEFERRED:
            return value
        if strategy is DateEncodingStrategy.ISO8601 or isinstance(value, time):
            return value.isoformat()
        if not isinstance(value, datetime):
            value = datetime.combine(value, time(), tzinfo=timezone.utc)
        elif value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        seconds = value.timestamp()
        if strategy is DateEncodingStrategy.MILLISECONDS_SINCE_1970:
            return seconds * 1000.0
        return seconds

    def _convert_data(self, value: bytes) -> Any:
        strategy = self.data_encoding
        if strategy is DataEncodingStrategy.RAW:
            return value
        if strategy is DataEncodingStrategy.HEX:
            return value.hex()
        return base64.b64encode(value).decode("ascii")

    def _convert_key(self, key: Any) -> str:
        if isinstance(key, Enum):
            key = key.value
        key = key if isinstance(key, str) else str(key)
        if self.key_encoding is KeyEncodingStrategy.CONVERT_TO_SNAKE_CASE:
            return to_snake(key)
        if self.key_encoding is KeyEncodingStrategy.CONVERT_TO_CAMEL_CASE:
            return to_camel(key)
        return key


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return to_jsonable_python(value)
