"""
The Order aggregate.

An order belongs to one customer, holds an ordered list of priced items and
tracks its lifecycle status. Every change is recorded as an event; the order
keeps those events until the workflow publishes them.

Example:
    >>> order = Order(Customer(name="Ada", email="ada@example.com"))
    >>> order.add_item(SimpleItem(name="Mouse", price=50))
    >>> order.total()
    50.0
    >>> order.advance_lifecycle().announced
    <OrderStatus.NEW: 'new'>
    >>> order.advance_lifecycle().announced
    <OrderStatus.PROCESSING: 'processing'>
    >>> order.status
    <OrderStatus.PROCESSING: 'processing'>
"""

from __future__ import annotations

import logging
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from orderflow.aggregates.base import AggregateRoot, DeclarativeAggregate
from orderflow.customers import Customer
from orderflow.events.base import DomainEvent
from orderflow.events.order import (
    OrderCreated,
    OrderItemAdded,
    OrderStateAnnounced,
    PaymentFailed,
    PaymentSucceeded,
    ShipmentFailed,
    ShipmentSucceeded,
)
from orderflow.exceptions import OrderClosedError, PaymentFailure, ShipmentFailure
from orderflow.handlers import handles
from orderflow.items import PricedItem, is_priced_item
from orderflow.lifecycle import OrderStatus, Transition, advance
from orderflow.payments import PaymentReceipt
from orderflow.shipping import ShipmentReceipt

logger = logging.getLogger(__name__)


class OrderState(BaseModel):
    """
    Current state of an order.

    Attributes:
        order_id: The order's identifier
        customer: Who the order belongs to
        items: Items in insertion order (shared by reference, never copied)
        status: Visible lifecycle status, the state most recently announced
        machine_state: State the next lifecycle advance will announce
        amount_paid: Amount charged, once payment succeeded
        transaction_id: Payment reference, once payment succeeded
        tracking_number: Carrier reference, once shipment succeeded
        last_failure: Message of the most recent payment or shipment failure
    """

    order_id: UUID
    customer: Customer
    items: list[PricedItem] = Field(default_factory=list)
    status: OrderStatus = OrderStatus.NEW
    machine_state: OrderStatus = OrderStatus.NEW
    amount_paid: float | None = None
    transaction_id: str | None = None
    tracking_number: str | None = None
    last_failure: str | None = None


class Order(DeclarativeAggregate[OrderState]):
    """
    A single retail order.

    Args:
        customer: The customer placing the order
        order_id: Optional identifier; generated if omitted
        enforce_item_window: If True, ``add_item`` raises OrderClosedError
            once the lifecycle has started. If False (default) late items are
            accepted and logged.
    """

    aggregate_type = "Order"

    def __init__(
        self,
        customer: Customer,
        order_id: UUID | None = None,
        *,
        enforce_item_window: bool = False,
    ) -> None:
        super().__init__(order_id or uuid4())
        self._enforce_item_window = enforce_item_window
        self._raise_event(
            OrderCreated(
                aggregate_id=self.aggregate_id,
                aggregate_version=self.get_next_version(),
                correlation_id=self.aggregate_id,
                customer=customer,
            )
        )
        logger.info(
            "Order %s created for %s",
            self.aggregate_id,
            customer.display(),
            extra={"order_id": str(self.aggregate_id)},
        )

    @classmethod
    def from_history(
        cls,
        events: list[DomainEvent],
        *,
        enforce_item_window: bool = False,
    ) -> Order:
        """
        Rebuild an order from events it recorded earlier.

        The rebuilt order has no uncommitted events.

        Raises:
            ValueError: If ``events`` is empty or does not start with OrderCreated
        """
        if not events or not isinstance(events[0], OrderCreated):
            raise ValueError("Order history must start with an OrderCreated event")
        order = cls.__new__(cls)
        AggregateRoot.__init__(order, events[0].aggregate_id)
        order._enforce_item_window = enforce_item_window
        order.load_from_history(events)
        return order

    # Queries

    @property
    def order_id(self) -> UUID:
        return self.aggregate_id

    @property
    def customer(self) -> Customer:
        return self._require_state().customer

    @property
    def items(self) -> list[PricedItem]:
        """Items in insertion order (a copy of the list, same item objects)."""
        return list(self._require_state().items)

    @property
    def status(self) -> OrderStatus:
        return self._require_state().status

    @property
    def machine_state(self) -> OrderStatus:
        """The state the next ``advance_lifecycle()`` call announces."""
        return self._require_state().machine_state

    @property
    def has_started(self) -> bool:
        """True once the lifecycle has been advanced at least once."""
        return self.machine_state is not OrderStatus.NEW

    @property
    def enforce_item_window(self) -> bool:
        return self._enforce_item_window

    @property
    def is_paid(self) -> bool:
        return self._require_state().amount_paid is not None

    @property
    def is_delivered(self) -> bool:
        return self.status is OrderStatus.DELIVERED

    def current_state(self) -> OrderStatus:
        """Return the lifecycle status tag."""
        return self.status

    def total(self) -> float:
        """
        Sum of ``price()`` over all items.

        Recomputed on every call, so changes inside composite items are
        always reflected. An order without items totals 0.
        """
        return float(sum(item.price() for item in self._require_state().items))

    def describe(self) -> list[str]:
        """Summary lines for display."""
        state = self._require_state()
        lines = [
            f"Order {self.order_id}",
            f"Customer: {state.customer.display()}",
            f"Status: {state.status.label}",
            "Items:",
        ]
        if state.items:
            for item in state.items:
                lines.extend(item.describe(indent=1))
        else:
            lines.append("  (none)")
        lines.append(f"Total: {self.total():.2f}")
        return lines

    # Commands

    def add_item(self, item: PricedItem) -> None:
        """
        Add an item to the order.

        Items are meant to be added before the lifecycle is first advanced.
        Whether a later add is rejected depends on ``enforce_item_window``.

        Raises:
            TypeError: If item is not a SimpleItem or CompositeItem
            OrderClosedError: If the lifecycle has started and the item window
                              is enforced
        """
        if not is_priced_item(item):
            raise TypeError(f"Expected a priced item, got {type(item).__name__}")

        late = self.has_started
        if late:
            if self._enforce_item_window:
                raise OrderClosedError(self.order_id, self.status)
            logger.warning(
                "Item %r added to order %s after its lifecycle started (status %s)",
                item.name,
                self.order_id,
                self.status.label,
                extra={"order_id": str(self.order_id), "status": self.status.value},
            )

        self._raise_event(
            OrderItemAdded(
                aggregate_id=self.aggregate_id,
                aggregate_version=self.get_next_version(),
                correlation_id=self.aggregate_id,
                item=item,
                late=late,
            )
        )

    def advance_lifecycle(self) -> Transition:
        """
        Announce the machine's current state and move it to the next one.

        The announced state becomes the visible ``status``. A fresh order
        reads New, New, Processing, Shipped after one to three calls and
        Delivered after a fourth. Advancing once Delivered announces
        Delivered again and changes nothing.

        Returns:
            The transition that was applied
        """
        transition = advance(self.machine_state)
        self._raise_event(
            OrderStateAnnounced(
                aggregate_id=self.aggregate_id,
                aggregate_version=self.get_next_version(),
                correlation_id=self.aggregate_id,
                state=transition.announced,
                next_state=transition.next_state,
            )
        )
        logger.info(
            "Order %s is now %s",
            self.order_id,
            transition.announced.label,
            extra={
                "order_id": str(self.order_id),
                "status": transition.announced.value,
            },
        )
        return transition

    def record_payment(self, receipt: PaymentReceipt) -> None:
        """Record a successful charge of the order total."""
        self._raise_event(
            PaymentSucceeded(
                aggregate_id=self.aggregate_id,
                aggregate_version=self.get_next_version(),
                correlation_id=self.aggregate_id,
                amount=receipt.amount,
                method=receipt.method,
                transaction_id=receipt.transaction_id,
            )
        )

    def record_payment_failure(self, error: PaymentFailure) -> None:
        """Record a declined charge."""
        self._raise_event(
            PaymentFailed(
                aggregate_id=self.aggregate_id,
                aggregate_version=self.get_next_version(),
                correlation_id=self.aggregate_id,
                method=error.method,
                message=error.message,
            )
        )

    def record_shipment(self, receipt: ShipmentReceipt) -> None:
        """Record a successful shipment."""
        self._raise_event(
            ShipmentSucceeded(
                aggregate_id=self.aggregate_id,
                aggregate_version=self.get_next_version(),
                correlation_id=self.aggregate_id,
                customer=receipt.customer,
                tracking_number=receipt.tracking_number,
            )
        )

    def record_shipment_failure(self, error: ShipmentFailure) -> None:
        """Record a failed shipment."""
        self._raise_event(
            ShipmentFailed(
                aggregate_id=self.aggregate_id,
                aggregate_version=self.get_next_version(),
                correlation_id=self.aggregate_id,
                message=error.message,
            )
        )

    # Event handlers

    @handles(OrderCreated)
    def _on_created(self, event: OrderCreated) -> None:
        self._state = OrderState(order_id=self.aggregate_id, customer=event.customer)

    @handles(OrderItemAdded)
    def _on_item_added(self, event: OrderItemAdded) -> None:
        state = self._require_state()
        self._state = state.model_copy(update={"items": [*state.items, event.item]})

    @handles(OrderStateAnnounced)
    def _on_state_announced(self, event: OrderStateAnnounced) -> None:
        self._state = self._require_state().model_copy(
            update={"status": event.state, "machine_state": event.next_state}
        )

    @handles(PaymentSucceeded)
    def _on_payment_succeeded(self, event: PaymentSucceeded) -> None:
        self._state = self._require_state().model_copy(
            update={"amount_paid": event.amount, "transaction_id": event.transaction_id}
        )

    @handles(PaymentFailed)
    def _on_payment_failed(self, event: PaymentFailed) -> None:
        self._state = self._require_state().model_copy(update={"last_failure": event.message})

    @handles(ShipmentSucceeded)
    def _on_shipment_succeeded(self, event: ShipmentSucceeded) -> None:
        self._state = self._require_state().model_copy(
            update={"tracking_number": event.tracking_number}
        )

    @handles(ShipmentFailed)
    def _on_shipment_failed(self, event: ShipmentFailed) -> None:
        self._state = self._require_state().model_copy(update={"last_failure": event.message})

    def _require_state(self) -> OrderState:
        if self._state is None:
            raise RuntimeError(f"Order {self.aggregate_id} has no state")
        return self._state


__all__ = [
    "Order",
    "OrderState",
]
