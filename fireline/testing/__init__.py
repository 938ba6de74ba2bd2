"""Test support — expectation handlers and a recording handler."""

from fireline.testing.expectations import (
    AnalyticsExpectation,
    ExpectationError,
    Expectations,
    FulfillmentState,
)
from fireline.testing.handlers import (
    ExpectationHandler,
    OrderedExpectationHandler,
    SingleExpectationHandler,
)
from fireline.testing.recording import RecordingHandler, TrackedCall

__all__ = [
    "AnalyticsExpectation",
    "ExpectationError",
    "ExpectationHandler",
    "Expectations",
    "FulfillmentState",
    "OrderedExpectationHandler",
    "RecordingHandler",
    "SingleExpectationHandler",
    "TrackedCall",
]
