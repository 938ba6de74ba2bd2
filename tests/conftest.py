"""Shared test fixtures for Fireline."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime, timezone
from typing import Any

import pytest

from fireline.events import SomeEvent
from fireline.models import EmptyMetadata, Group
from fireline.testing import (
    Expectations,
    OrderedExpectationHandler,
    RecordingHandler,
    SingleExpectationHandler,
)


@pytest.fixture
def recorder() -> RecordingHandler:
    """Provide a fresh RecordingHandler."""
    return RecordingHandler()


@pytest.fixture
def single_handler() -> SingleExpectationHandler:
    """Provide a SingleExpectationHandler for ``str`` event names."""
    return SingleExpectationHandler(name_type=str)


@pytest.fixture
def ordered_handler() -> OrderedExpectationHandler:
    """Provide an OrderedExpectationHandler for ``str`` event names."""
    return OrderedExpectationHandler(name_type=str)


@pytest.fixture
def expectations() -> Iterator[Expectations]:
    """Provide an Expectations collector that is verified at teardown."""
    collector = Expectations()
    yield collector
    collector.verify()


@pytest.fixture
def fixed_time() -> datetime:
    """A deterministic event time."""
    return datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Event factories shared across test modules
# ---------------------------------------------------------------------------


@pytest.fixture
def make_event() -> Callable[..., SomeEvent[str, Any]]:
    """Factory fixture: build a ``SomeEvent[str, EmptyMetadata]``."""

    def _factory(
        name: str = "testEvent",
        group: Group = Group.ACTION,
        **overrides: Any,
    ) -> SomeEvent[str, Any]:
        return SomeEvent[str, EmptyMetadata](name, group=group, **overrides)

    return _factory
