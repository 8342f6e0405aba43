"""
Events recorded by the Order aggregate.

Every event's ``describe()`` returns the text the shell displays for it.
Failure events carry the exact failure message of the operation that failed.
"""

from orderflow.customers import Customer
from orderflow.events.base import DomainEvent
from orderflow.items import PricedItem
from orderflow.lifecycle import OrderStatus
from orderflow.payments import PaymentMethod


class OrderEvent(DomainEvent):
    """Base for all events recorded by an Order."""

    aggregate_type: str = "Order"


class OrderCreated(OrderEvent):
    """Event emitted when an order is opened for a customer."""

    event_type: str = "OrderCreated"

    customer: Customer

    def describe(self) -> str:
        return f"Order created for {self.customer.display()}."


class OrderItemAdded(OrderEvent):
    """
    Event emitted when an item is added to an order.

    ``late`` is True when the item was added after the lifecycle started.
    """

    event_type: str = "OrderItemAdded"

    item: PricedItem
    late: bool = False

    def describe(self) -> str:
        return f"Added {self.item.name} ({self.item.price():.2f})."


class OrderStateAnnounced(OrderEvent):
    """
    Event emitted on every lifecycle advance.

    ``state`` is the state being announced, which becomes the order's visible
    status. ``next_state`` is the state the following advance will announce.
    """

    event_type: str = "OrderStateAnnounced"

    state: OrderStatus
    next_state: OrderStatus

    def describe(self) -> str:
        return f"Order is now {self.state.label}."


class PaymentSucceeded(OrderEvent):
    """Event emitted when the order total has been charged."""

    event_type: str = "PaymentSucceeded"

    amount: float
    method: PaymentMethod
    transaction_id: str

    def describe(self) -> str:
        return f"Paid {self.amount:.2f} using {self.method.label}."


class PaymentFailed(OrderEvent):
    """Event emitted when charging the order total was declined."""

    event_type: str = "PaymentFailed"

    method: PaymentMethod
    message: str

    def describe(self) -> str:
        return self.message


class ShipmentSucceeded(OrderEvent):
    """Event emitted when the order has been handed to the carrier."""

    event_type: str = "ShipmentSucceeded"

    customer: str
    tracking_number: str

    def describe(self) -> str:
        return f"Order shipped to {self.customer}."


class ShipmentFailed(OrderEvent):
    """Event emitted when shipping the order failed."""

    event_type: str = "ShipmentFailed"

    message: str

    def describe(self) -> str:
        return self.message


__all__ = [
    "OrderCreated",
    "OrderEvent",
    "OrderItemAdded",
    "OrderStateAnnounced",
    "PaymentFailed",
    "PaymentSucceeded",
    "ShipmentFailed",
    "ShipmentSucceeded",
]
