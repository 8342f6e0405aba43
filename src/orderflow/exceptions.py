"""Library exceptions for the orderflow package."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from orderflow.lifecycle import OrderStatus
    from orderflow.payments import PaymentMethod


class OrderFlowError(Exception):
    """Base exception for orderflow library."""

    pass


class PaymentFailure(OrderFlowError):
    """
    Raised when a payment attempt is declined.

    The message is method-specific ("Credit Card payment failed!" or
    "PayPal payment failed!") and is what the shell displays verbatim.

    Attributes:
        method: The payment method that was charged
        message: The user-facing failure message
    """

    def __init__(self, method: PaymentMethod, message: str) -> None:
        self.method = method
        self.message = message
        super().__init__(message)


class ShipmentFailure(OrderFlowError):
    """Raised when a shipment attempt fails."""

    def __init__(self, message: str, order_id: UUID | None = None) -> None:
        self.message = message
        self.order_id = order_id
        super().__init__(message)


class UnknownPaymentMethodError(OrderFlowError, ValueError):
    """Raised when a payment method tag cannot be resolved."""

    def __init__(self, tag: object, available: list[str]) -> None:
        self.tag = tag
        self.available = available
        options = ", ".join(available) if available else "none"
        super().__init__(f"Unknown payment method: {tag!r}. Available methods: {options}")


class UnknownProductError(OrderFlowError, KeyError):
    """Raised when a catalog lookup misses."""

    def __init__(self, key: str, available: list[str]) -> None:
        self.key = key
        self.available = available
        options = ", ".join(available) if available else "none"
        super().__init__(f"Unknown product: {key!r}. Available products: {options}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class OrderClosedError(OrderFlowError):
    """
    Raised when an order no longer accepts the requested change.

    Item adds after the lifecycle has started only raise this when the item
    window is enforced; see ``OrderFlowConfig.enforce_item_window``. Checking
    out a Delivered order always raises it.

    Attributes:
        order_id: The order that was closed
        status: The order's status at the time
    """

    def __init__(self, order_id: UUID, status: OrderStatus, reason: str | None = None) -> None:
        self.order_id = order_id
        self.status = status
        detail = reason or "items may only be added before the lifecycle starts"
        super().__init__(f"Order {order_id} is closed ({status.label}): {detail}")


class EventVersionError(OrderFlowError):
    """
    Raised when a recorded event does not carry the next aggregate version.

    Attributes:
        expected_version: The version that was expected (current version + 1)
        actual_version: The version found in the event
        event_id: ID of the event with invalid version
        aggregate_id: ID of the aggregate being updated
    """

    def __init__(
        self,
        expected_version: int,
        actual_version: int,
        event_id: UUID,
        aggregate_id: UUID,
    ) -> None:
        self.expected_version = expected_version
        self.actual_version = actual_version
        self.event_id = event_id
        self.aggregate_id = aggregate_id
        super().__init__(
            f"Event version mismatch for aggregate {aggregate_id}: "
            f"expected version {expected_version}, got {actual_version} "
            f"(event_id: {event_id})"
        )


class UnhandledEventError(OrderFlowError):
    """
    Raised when an aggregate in strict mode receives an event it has no handler for.

    Attributes:
        event_type: The name of the event type that wasn't handled
        event_id: ID of the unhandled event
        handler_class: Name of the aggregate class
        available_handlers: List of event type names that have handlers
    """

    def __init__(
        self,
        event_type: str,
        event_id: UUID,
        handler_class: str,
        available_handlers: list[str],
    ) -> None:
        self.event_type = event_type
        self.event_id = event_id
        self.handler_class = handler_class
        self.available_handlers = available_handlers
        handlers_str = ", ".join(available_handlers) if available_handlers else "none"
        super().__init__(
            f"No handler registered for event type '{event_type}' "
            f"in {handler_class}. "
            f"Available handlers: {handlers_str}."
        )


__all__ = [
    "EventVersionError",
    "OrderClosedError",
    "OrderFlowError",
    "PaymentFailure",
    "ShipmentFailure",
    "UnhandledEventError",
    "UnknownPaymentMethodError",
    "UnknownProductError",
]
