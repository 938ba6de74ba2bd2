"""Unit tests for the expectation handlers in ``fireline.testing``."""

from __future__ import annotations

import pytest

from fireline.events import SomeEvent
from fireline.models import AnyMetadata, Group
from fireline.testing import (
    AnalyticsExpectation,
    ExpectationError,
    ExpectationHandler,
    Expectations,
    FulfillmentState,
    OrderedExpectationHandler,
    SingleExpectationHandler,
)
from sample_events import LoginEvent, LoginFailureReason, MessageDeleted, MessageSelected


def _check_failed(event, data) -> None:
    assert event.group == Group.ACTION
    assert data.reason == "failed"


# ---------------------------------------------------------------------------
# Test: AnalyticsExpectation
# ---------------------------------------------------------------------------


class TestAnalyticsExpectation:
    """Fulfillment counting and verification."""

    def test_states(self):
        expectation = AnalyticsExpectation("e", expected_fulfillment_count=2)
        assert expectation.state is FulfillmentState.UNFULFILLED
        expectation.fulfill()
        expectation.fulfill()
        assert expectation.state is FulfillmentState.FULFILLED
        expectation.fulfill()
        assert expectation.state is FulfillmentState.OVERFULFILLED
        assert expectation.current_fulfillment_count == 3

    def test_verify_unfulfilled(self):
        with pytest.raises(ExpectationError, match="fulfilled 0 of 1"):
            AnalyticsExpectation("e").verify()

    def test_verify_over_fulfilled_when_asserted(self):
        expectation = AnalyticsExpectation("e", assert_for_over_fulfill=True)
        expectation.fulfill()
        expectation.fulfill()
        with pytest.raises(ExpectationError, match="over-fulfilled"):
            expectation.verify()

    def test_over_fulfilling_allowed_when_not_asserted(self):
        expectation = AnalyticsExpectation("e", assert_for_over_fulfill=False)
        expectation.fulfill()
        expectation.fulfill()
        expectation.verify()

    def test_inverted(self):
        expectation = AnalyticsExpectation("e", is_inverted=True)
        expectation.verify()
        expectation.fulfill()
        with pytest.raises(ExpectationError, match="inverted"):
            expectation.verify()

    def test_recorded_failures_fail_verification(self):
        expectation = AnalyticsExpectation("e")
        expectation.fulfill()
        expectation.record_failure("wrong payload")
        with pytest.raises(ExpectationError, match="wrong payload"):
            expectation.verify()

    def test_expected_count_must_be_positive(self):
        with pytest.raises(ValueError):
            AnalyticsExpectation("e", expected_fulfillment_count=0)

    def test_expectation_error_is_assertion_error(self):
        assert issubclass(ExpectationError, AssertionError)


# ---------------------------------------------------------------------------
# Test: SingleExpectationHandler
# ---------------------------------------------------------------------------


class TestSingleExpectationHandler:
    """One expectation per name, fulfilled on every matching track."""

    def test_fulfill_without_callback(self, single_handler, expectations):
        expectations.expect("loginScreenViewed", on=single_handler)
        LoginEvent.LOGIN_SCREEN_VIEWED.fire(single_handler)
        LoginEvent.LOGIN_ATTEMPTED.fire(single_handler)
        LoginEvent.LOGIN_SUCCEEDED.fire(single_handler)

    def test_fulfill_with_callback(self, single_handler, expectations):
        expectations.expect(
            "loginFailed",
            on=single_handler,
            evaluate=_check_failed,
            event_type=SomeEvent,
            metadata_type=LoginFailureReason,
        )
        LoginFailureReason(reason="failed").send(to=single_handler)
        MessageSelected(index=10).send(to=single_handler)
        MessageDeleted(index=10, read=True).send(to=single_handler)

    def test_unfulfilled_fails(self, single_handler):
        expectations = Expectations()
        expectations.expect("loginScreenViewed", on=single_handler)
        with pytest.raises(ExpectationError):
            expectations.verify()

    def test_type_mismatch_fails(self, single_handler):
        expectations = Expectations()
        expectations.expect(
            "messageSelected",
            on=single_handler,
            evaluate=_check_failed,
            metadata_type=LoginFailureReason,
        )
        MessageSelected(index=10).send(to=single_handler)
        with pytest.raises(ExpectationError, match="expected metadata type LoginFailureReason"):
            expectations.verify()

    def test_callback_assertion_fails(self, single_handler):
        expectations = Expectations()
        expectations.expect("loginFailed", on=single_handler, evaluate=_check_failed)
        LoginFailureReason(reason="other").send(to=single_handler)
        with pytest.raises(ExpectationError, match="AssertionError"):
            expectations.verify()

    def test_repeated_events_fulfill_same_expectation(self, single_handler):
        expectation = Expectations().expect("loginAttempted", on=single_handler, count=3)
        for _ in range(3):
            LoginEvent.LOGIN_ATTEMPTED.fire(single_handler)
        assert expectation.state is FulfillmentState.FULFILLED

    def test_reregistration_replaces(self, single_handler):
        collector = Expectations()
        first = collector.expect("loginAttempted", on=single_handler)
        second = collector.expect("loginAttempted", on=single_handler)
        LoginEvent.LOGIN_ATTEMPTED.fire(single_handler)
        assert first.current_fulfillment_count == 0
        assert second.current_fulfillment_count == 1

    def test_erased_payload_is_unwrapped_for_evaluation(self, single_handler, expectations):
        expectations.expect(
            "loginFailed",
            on=single_handler,
            evaluate=_check_failed,
            metadata_type=LoginFailureReason,
        )
        event = SomeEvent[str, AnyMetadata]("loginFailed")
        event.fire(single_handler, AnyMetadata(LoginFailureReason(reason="failed")))

    def test_handlers_hash_by_identity(self):
        first, second = SingleExpectationHandler(), SingleExpectationHandler()
        assert first != second
        assert len({first, second, first}) == 2

    def test_base_handler_is_abstract(self):
        with pytest.raises(TypeError):
            ExpectationHandler()


# ---------------------------------------------------------------------------
# Test: OrderedExpectationHandler
# ---------------------------------------------------------------------------


class TestOrderedExpectationHandler:
    """Queued expectations are fulfilled in registration order."""

    def test_fulfill_without_callback(self, ordered_handler, expectations):
        expectations.expect("loginScreenViewed", on=ordered_handler)
        LoginEvent.LOGIN_SCREEN_VIEWED.fire(ordered_handler)
        LoginEvent.LOGIN_ATTEMPTED.fire(ordered_handler)

    def test_multi_expectation_with_callback(self, ordered_handler, expectations):
        def _check(index: int):
            def _evaluate(event, data) -> None:
                assert event.group == Group.ACTION
                assert data.reason == f"failed {index}"

            return _evaluate

        for index in range(3):
            expectations.expect(
                "loginFailed",
                on=ordered_handler,
                evaluate=_check(index),
                metadata_type=LoginFailureReason,
            )
        for index in range(3):
            LoginFailureReason(reason=f"failed {index}").send(to=ordered_handler)
        MessageSelected(index=10).send(to=ordered_handler)
        assert ordered_handler.pending("loginFailed") == 0

    def test_multi_expectation_partially_fulfilled_fails(self, ordered_handler):
        expectations = Expectations()
        for _ in range(3):
            expectations.expect("loginScreenViewed", on=ordered_handler)
        for _ in range(2):
            LoginEvent.LOGIN_SCREEN_VIEWED.fire(ordered_handler)
        assert ordered_handler.pending("loginScreenViewed") == 1
        with pytest.raises(ExpectationError):
            expectations.verify()

    def test_type_mismatch_fails(self, ordered_handler):
        expectations = Expectations()
        expectations.expect(
            "messageSelected",
            on=ordered_handler,
            evaluate=_check_failed,
            metadata_type=LoginFailureReason,
        )
        MessageSelected(index=10).send(to=ordered_handler)
        with pytest.raises(ExpectationError):
            expectations.verify()

    def test_asserting_head_stays_until_over_fulfilled(self, ordered_handler):
        expectation = AnalyticsExpectation("loginAttempted", assert_for_over_fulfill=True)
        ordered_handler.register("loginAttempted", expectation)

        LoginEvent.LOGIN_ATTEMPTED.fire(ordered_handler)
        assert ordered_handler.pending("loginAttempted") == 1

        LoginEvent.LOGIN_ATTEMPTED.fire(ordered_handler)
        assert ordered_handler.pending("loginAttempted") == 0
        assert expectation.state is FulfillmentState.OVERFULFILLED
        with pytest.raises(ExpectationError):
            expectation.verify()

    def test_unexpected_events_are_ignored(self, ordered_handler):
        LoginEvent.LOGIN_ATTEMPTED.fire(ordered_handler)
        assert ordered_handler.pending("loginAttempted") == 0
