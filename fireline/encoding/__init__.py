"""Metadata encoding — the encoder protocol and the reference dictionary encoder."""

from fireline.encoding.base import AnalyticsEncoder, EncodingError
from fireline.encoding.dictionary import DictionaryEncoder
from fireline.encoding.strategies import (
    DataEncodingStrategy,
    DateEncodingStrategy,
    KeyEncodingStrategy,
    NonConformingFloatEncodingStrategy,
    OutputFormatting,
)

__all__ = [
    "AnalyticsEncoder",
    "DataEncodingStrategy",
    "DateEncodingStrategy",
    "DictionaryEncoder",
    "EncodingError",
    "KeyEncodingStrategy",
    "NonConformingFloatEncodingStrategy",
    "OutputFormatting",
]
