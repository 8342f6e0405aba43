"""Domain events for the orderflow library."""

from orderflow.events.base import DomainEvent
from orderflow.events.order import (
    OrderCreated,
    OrderEvent,
    OrderItemAdded,
    OrderStateAnnounced,
    PaymentFailed,
    PaymentSucceeded,
    ShipmentFailed,
    ShipmentSucceeded,
)

__all__ = [
    "DomainEvent",
    "OrderCreated",
    "OrderEvent",
    "OrderItemAdded",
    "OrderStateAnnounced",
    "PaymentFailed",
    "PaymentSucceeded",
    "ShipmentFailed",
    "ShipmentSucceeded",
]
