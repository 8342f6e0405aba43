"""Unit tests for the @handles decorator."""

from orderflow.events import OrderCreated, PaymentFailed
from orderflow.handlers import get_handled_event_type, handles, is_event_handler
from orderflow.order import Order


class TestHandles:
    def test_marks_function(self) -> None:
        @handles(PaymentFailed)
        def on_failed(self, event: PaymentFailed) -> None:
            pass

        assert get_handled_event_type(on_failed) is PaymentFailed
        assert is_event_handler(on_failed)

    def test_returns_original_function(self) -> None:
        def on_created(self, event: OrderCreated) -> None:
            pass

        assert handles(OrderCreated)(on_created) is on_created

    def test_undecorated_function(self) -> None:
        def plain() -> None:
            pass

        assert get_handled_event_type(plain) is None
        assert not is_event_handler(plain)

    def test_order_registers_every_event_it_records(self) -> None:
        assert {t.__name__ for t in Order._event_handlers} == {
            "OrderCreated",
            "OrderItemAdded",
            "OrderStateAnnounced",
            "PaymentSucceeded",
            "PaymentFailed",
            "ShipmentSucceeded",
            "ShipmentFailed",
        }
