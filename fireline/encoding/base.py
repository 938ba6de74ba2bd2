"""Encoder protocol — how handlers turn metadata into an output representation."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

OutputT = TypeVar("OutputT", covariant=True)


class EncodingError(ValueError):
    """Raised when a value cannot be represented by an encoder."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.value = value
        super().__init__(message)


@runtime_checkable
class AnalyticsEncoder(Protocol[OutputT]):
    """Anything that can encode an event payload.

    Implementations raise ``EncodingError`` when the payload cannot be
    represented in their output form.
    """

    def encode_metadata(self, data: Any) -> OutputT:
        """Encode *data* and return the output representation."""
        ...
