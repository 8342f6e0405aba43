"""
Tests for EventAssertions.
"""

from uuid import uuid4

import pytest

from orderflow.events import (
    OrderStateAnnounced,
    PaymentFailed,
    PaymentSucceeded,
    ShipmentFailed,
)
from orderflow.lifecycle import OrderStatus
from orderflow.payments import PaymentMethod
from orderflow.testing import EventAssertions


@pytest.fixture
def events() -> list:
    aggregate_id = uuid4()
    return [
        OrderStateAnnounced(
            aggregate_id=aggregate_id, state=OrderStatus.NEW, next_state=OrderStatus.PROCESSING
        ),
        PaymentSucceeded(
            aggregate_id=aggregate_id,
            amount=1150.0,
            method=PaymentMethod.CREDIT_CARD,
            transaction_id="tx-1",
        ),
    ]


class TestPresence:
    def test_assert_event_published_returns_event(self, events: list) -> None:
        event = EventAssertions(events).assert_event_published(PaymentSucceeded)
        assert event is events[1]

    def test_assert_event_published_fails_with_types(self, events: list) -> None:
        with pytest.raises(AssertionError, match="OrderStateAnnounced"):
            EventAssertions(events).assert_event_published(PaymentFailed)

    def test_assert_no_event_published(self, events: list) -> None:
        EventAssertions(events).assert_no_event_published(ShipmentFailed)
        with pytest.raises(AssertionError, match="found 1"):
            EventAssertions(events).assert_no_event_published(PaymentSucceeded)

    def test_assert_no_events_published(self) -> None:
        EventAssertions([]).assert_no_events_published()

    def test_assert_no_events_published_fails(self, events: list) -> None:
        with pytest.raises(AssertionError):
            EventAssertions(events).assert_no_events_published()


class TestCounts:
    def test_total_count(self, events: list) -> None:
        EventAssertions(events).assert_event_count(2)
        with pytest.raises(AssertionError, match="expected 3 events, got 2"):
            EventAssertions(events).assert_event_count(3)

    def test_count_by_type(self, events: list) -> None:
        EventAssertions(events).assert_event_count(1, PaymentSucceeded)
        with pytest.raises(AssertionError, match="PaymentFailed events"):
            EventAssertions(events).assert_event_count(1, PaymentFailed)


class TestSequence:
    def test_matching_sequence(self, events: list) -> None:
        EventAssertions(events).assert_event_sequence([OrderStateAnnounced, PaymentSucceeded])

    def test_wrong_order(self, events: list) -> None:
        with pytest.raises(AssertionError, match="position 0"):
            EventAssertions(events).assert_event_sequence([PaymentSucceeded, OrderStateAnnounced])

    def test_wrong_length(self, events: list) -> None:
        with pytest.raises(AssertionError, match="count mismatch"):
            EventAssertions(events).assert_event_sequence([OrderStateAnnounced])

    def test_descriptions(self, events: list) -> None:
        EventAssertions(events).assert_descriptions(
            ["Order is now New.", "Paid 1150.00 using Credit Card."]
        )
        with pytest.raises(AssertionError, match="descriptions mismatch"):
            EventAssertions(events).assert_descriptions(["Order is now New."])


class TestFields:
    def test_matching_fields(self, events: list) -> None:
        event = EventAssertions(events).assert_event_with_fields(
            PaymentSucceeded, amount=1150.0, method=PaymentMethod.CREDIT_CARD
        )
        assert event.transaction_id == "tx-1"

    def test_mismatched_fields(self, events: list) -> None:
        with pytest.raises(AssertionError, match="none matched"):
            EventAssertions(events).assert_event_with_fields(PaymentSucceeded, amount=1.0)

    def test_unknown_field_never_matches(self, events: list) -> None:
        with pytest.raises(AssertionError):
            EventAssertions(events).assert_event_with_fields(PaymentSucceeded, currency="EUR")

    def test_missing_type(self, events: list) -> None:
        with pytest.raises(AssertionError, match="no events of that type"):
            EventAssertions(events).assert_event_with_fields(PaymentFailed, message="x")


class TestAccessors:
    def test_events_is_a_copy(self, events: list) -> None:
        assertions = EventAssertions(events)
        assertions.events.clear()
        assert len(assertions.events) == 2

    def test_get_events_of_type(self, events: list) -> None:
        assert EventAssertions(events).get_events_of_type(PaymentSucceeded) == [events[1]]

    def test_repr(self, events: list) -> None:
        assert repr(EventAssertions(events)) == (
            "EventAssertions(events=['OrderStateAnnounced', 'PaymentSucceeded'])"
        )
