"""Fireline: typed analytics events routed to handlers by group.

  - Events carry a name, a ``Group`` bitset and a configuration
  - Payloads are Pydantic models; ``AnyMetadata`` erases their type
  - ``AnyEvent`` / ``SomeEvent`` erase the concrete event type
  - ``MultiplexHandler`` fans each event out to handlers whose groups match
  - ``DictionaryEncoder`` turns payloads into JSON-compatible structures
"""

__version__ = "0.1.0"
__description__ = "Typed analytics events routed to handlers by group"

from fireline.encoding import DictionaryEncoder, EncodingError
from fireline.events import (
    AnyEvent,
    EnumEvent,
    EventBase,
    GlobalMetadata,
    RawEvent,
    SomeEvent,
)
from fireline.handlers import AnyHandler, MultiplexAnyHandler, MultiplexHandler
from fireline.models import AnalyticsMetadata, AnyMetadata, EmptyMetadata, Group

__all__ = [
    "AnalyticsMetadata",
    "AnyEvent",
    "AnyHandler",
    "AnyMetadata",
    "DictionaryEncoder",
    "EmptyMetadata",
    "EncodingError",
    "EnumEvent",
    "EventBase",
    "GlobalMetadata",
    "Group",
    "MultiplexAnyHandler",
    "MultiplexHandler",
    "RawEvent",
    "SomeEvent",
    "__version__",
]
