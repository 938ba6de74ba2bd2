"""Metadata payloads carried by analytics events.

A payload only has to be serializable.  ``AnalyticsMetadata`` is the usual
base (a frozen Pydantic model); ``EmptyMetadata`` stands for "no payload";
``AnyMetadata`` hides the concrete payload type while still serializing
exactly like the value it wraps.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    model_serializer,
)

T = TypeVar("T")


class MetadataTypeMismatchError(TypeError):
    """Raised when a payload is reinterpreted as a type it does not hold."""

    def __init__(self, expected: Any, actual: Any) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected metadata of type {_type_name(expected)}, "
            f"received {_type_name(actual)}"
        )


class AnalyticsMetadata(BaseModel):
    """Base class for event payloads.

    Examples
    --------
    >>> class LoginFailureReason(AnalyticsMetadata):
    ...     reason: str
    >>> LoginFailureReason(reason="failed").model_dump()
    {'reason': 'failed'}
    """

    model_config = ConfigDict(frozen=True)


class EmptyMetadata(AnalyticsMetadata):
    """Payload of events that carry no data.  Encodes as ``{}``."""


class AnyMetadata(BaseModel):
    """A type-erased payload.

    Owns exactly one underlying value and forwards serialization to it, so
    ``AnyMetadata(value).model_dump()`` equals the dump of ``value`` itself.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any

    def __init__(self, value: Any = None, /, **data: Any) -> None:
        if "value" not in data:
            data["value"] = value
        super().__init__(**data)

    @model_serializer(mode="wrap")
    def _serialize_wrapped(self, handler: SerializerFunctionWrapHandler) -> Any:
        return handler(self)["value"]

    @classmethod
    def erase(cls, value: Any) -> AnyMetadata:
        """Wrap *value* unless it already is an ``AnyMetadata``."""
        if isinstance(value, AnyMetadata):
            return value
        return cls(value)

    @property
    def wrapped_type(self) -> type:
        return type(self.value)

    def downcast(self, cls: type[T]) -> T:
        """Return the wrapped value as *cls*.

        Raises
        ------
        MetadataTypeMismatchError
            If the wrapped value is not an instance of *cls*.
        """
        if not isinstance(self.value, cls):
            raise MetadataTypeMismatchError(cls, type(self.value))
        return self.value

    def try_downcast(self, cls: type[T]) -> T | None:
        """Like :meth:`downcast` but returns ``None`` on mismatch."""
        if isinstance(self.value, cls):
            return self.value
        return None


def unwrap_metadata(data: Any) -> Any:
    """Return the innermost payload, peeling any ``AnyMetadata`` layers."""
    while isinstance(data, AnyMetadata):
        data = data.value
    return data


def _type_name(value: Any) -> str:
    if isinstance(value, type):
        return value.__qualname__
    return repr(value)
