"""
Unit tests for DomainEvent and the order events.

Tests cover:
- Default fields and event_type derivation
- Immutability
- describe() texts shown to the shell
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from orderflow.customers import Customer
from orderflow.events import (
    DomainEvent,
    OrderCreated,
    OrderEvent,
    OrderItemAdded,
    OrderStateAnnounced,
    PaymentFailed,
    PaymentSucceeded,
    ShipmentFailed,
    ShipmentSucceeded,
)
from orderflow.items import SimpleItem
from orderflow.lifecycle import OrderStatus
from orderflow.payments import PaymentMethod


class NoteAdded(DomainEvent):
    """Event without an explicit event_type."""

    aggregate_type: str = "Order"
    note: str


class TestDomainEventDefaults:
    def test_generated_fields(self) -> None:
        event = NoteAdded(aggregate_id=uuid4(), note="gift wrap")
        assert isinstance(event.event_id, UUID)
        assert isinstance(event.correlation_id, UUID)
        assert event.aggregate_version == 1
        assert event.occurred_at.tzinfo is not None
        assert event.occurred_at <= datetime.now(UTC)

    def test_event_type_defaults_to_class_name(self) -> None:
        assert NoteAdded(aggregate_id=uuid4(), note="x").event_type == "NoteAdded"

    def test_declared_event_type_kept(self) -> None:
        event = OrderStateAnnounced(
            aggregate_id=uuid4(), state=OrderStatus.NEW, next_state=OrderStatus.PROCESSING
        )
        assert event.event_type == "OrderStateAnnounced"
        assert event.aggregate_type == "Order"

    def test_aggregate_version_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            NoteAdded(aggregate_id=uuid4(), note="x", aggregate_version=0)

    def test_is_immutable(self) -> None:
        event = NoteAdded(aggregate_id=uuid4(), note="x")
        with pytest.raises(ValidationError):
            event.note = "y"

    def test_default_describe_is_event_type(self) -> None:
        assert NoteAdded(aggregate_id=uuid4(), note="x").describe() == "NoteAdded"

    def test_str_and_repr(self) -> None:
        event = NoteAdded(aggregate_id=uuid4(), note="x", aggregate_version=3)
        assert str(event).startswith("NoteAdded(")
        assert "version=3" in str(event)
        assert repr(event).startswith("NoteAdded(event_id=")


class TestDescriptions:
    @pytest.fixture
    def aggregate_id(self) -> UUID:
        return uuid4()

    def test_state_announced(self, aggregate_id: UUID) -> None:
        event = OrderStateAnnounced(
            aggregate_id=aggregate_id,
            state=OrderStatus.PROCESSING,
            next_state=OrderStatus.SHIPPED,
        )
        assert event.describe() == "Order is now Processing."

    def test_payment_succeeded(self, aggregate_id: UUID) -> None:
        event = PaymentSucceeded(
            aggregate_id=aggregate_id,
            amount=1150,
            method=PaymentMethod.PAYPAL,
            transaction_id="tx",
        )
        assert event.describe() == "Paid 1150.00 using PayPal."

    def test_payment_failed(self, aggregate_id: UUID) -> None:
        event = PaymentFailed(
            aggregate_id=aggregate_id,
            method=PaymentMethod.CREDIT_CARD,
            message="Credit Card payment failed!",
        )
        assert event.describe() == "Credit Card payment failed!"

    def test_shipment_succeeded(self, aggregate_id: UUID) -> None:
        event = ShipmentSucceeded(
            aggregate_id=aggregate_id,
            customer="Ada (ada@example.com)",
            tracking_number="TRK-1",
        )
        assert event.describe() == "Order shipped to Ada (ada@example.com)."

    def test_shipment_failed(self, aggregate_id: UUID) -> None:
        event = ShipmentFailed(aggregate_id=aggregate_id, message="Shipment failed!")
        assert event.describe() == "Shipment failed!"

    def test_informational_events(self, aggregate_id: UUID) -> None:
        created = OrderCreated(
            aggregate_id=aggregate_id, customer=Customer(name="Ada", email="ada@example.com")
        )
        added = OrderItemAdded(aggregate_id=aggregate_id, item=SimpleItem(name="Mouse", price=50))
        assert created.describe() == "Order created for Ada (ada@example.com)."
        assert added.describe() == "Added Mouse (50.00)."

    def test_all_order_events_share_base(self) -> None:
        for event_cls in (
            OrderCreated,
            OrderItemAdded,
            OrderStateAnnounced,
            PaymentSucceeded,
            PaymentFailed,
            ShipmentSucceeded,
            ShipmentFailed,
        ):
            assert issubclass(event_cls, OrderEvent)
