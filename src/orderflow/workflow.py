"""
Order workflow: drives one order from New to Delivered.

The workflow is the only place that talks to both the order aggregate and
the event bus. Each step performs one operation on the order and then
publishes everything the order recorded, so viewers see events in the order
they happened.

A full checkout runs:

1. lifecycle advances until the order is Shipped (three from a fresh order)
2. payment of the order total
3. shipment
4. a final advance to Delivered

The first failure aborts the run. If payment fails nothing is shipped; if
shipment fails the order stays Shipped and the payment is not reversed.

Example:
    >>> bus = InMemoryEventBus()
    >>> bus.subscribe_to_all_events(lambda e: print(e.describe()))
    >>> workflow = OrderWorkflow(bus)
    >>> order = workflow.open_order(Customer(name="Ada", email="ada@example.com"))
    >>> workflow.add_item(order, default_catalog().get("computer_set"))
    >>> workflow.checkout(order, "credit_card")
"""

from __future__ import annotations

import logging

from orderflow.bus.interface import EventBus
from orderflow.config import OrderFlowConfig
from orderflow.customers import Customer
from orderflow.exceptions import OrderClosedError, PaymentFailure, ShipmentFailure
from orderflow.items import PricedItem
from orderflow.lifecycle import OrderStatus, Transition
from orderflow.order import Order
from orderflow.payments import (
    PaymentMethod,
    PaymentReceipt,
    resolve_payment_method,
    select_payment_method,
)
from orderflow.policies import FailurePolicy
from orderflow.shipping import ShipmentReceipt, Shipper

logger = logging.getLogger(__name__)


class OrderWorkflow:
    """
    Application service running orders through their lifecycle.

    Args:
        event_bus: Bus that receives every event the orders record
        config: Workflow configuration (defaults to ``OrderFlowConfig()``)
        payment_policy: Failure policy for payments. Defaults to
                        ``config.payment_policy()``.
        shipment_policy: Failure policy for shipments. Defaults to
                         ``config.shipment_policy()``. Ignored if ``shipper``
                         is given.
        shipper: Shipper to use instead of one built from the policy
    """

    def __init__(
        self,
        event_bus: EventBus,
        config: OrderFlowConfig | None = None,
        payment_policy: FailurePolicy | None = None,
        shipment_policy: FailurePolicy | None = None,
        shipper: Shipper | None = None,
    ) -> None:
        self._event_bus = event_bus
        self._config = config or OrderFlowConfig()
        if payment_policy is None:
            payment_policy = self._config.payment_policy()
        self._payment_policy = payment_policy
        if shipper is None:
            if shipment_policy is None:
                shipment_policy = self._config.shipment_policy()
            shipper = Shipper(shipment_policy)
        self._shipper = shipper

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def config(self) -> OrderFlowConfig:
        return self._config

    @property
    def shipper(self) -> Shipper:
        return self._shipper

    def open_order(self, customer: Customer) -> Order:
        """Create a New order for ``customer`` and publish its creation."""
        order = Order(customer, enforce_item_window=self._config.enforce_item_window)
        self._publish(order)
        return order

    def add_item(self, order: Order, item: PricedItem) -> None:
        """
        Add ``item`` to ``order``.

        Raises:
            OrderClosedError: If the lifecycle has started and the item window
                              is enforced
        """
        order.add_item(item)
        self._publish(order)

    def advance(self, order: Order) -> Transition:
        """Advance the order's lifecycle by one step."""
        transition = order.advance_lifecycle()
        self._publish(order)
        return transition

    def pay(self, order: Order, method: str | PaymentMethod) -> PaymentReceipt:
        """
        Charge the order total with the chosen payment method.

        Raises:
            UnknownPaymentMethodError: If ``method`` is not a supported tag
            PaymentFailure: If the charge is declined; the failure is
                            recorded and published before it propagates
        """
        processor = select_payment_method(method, policy=self._payment_policy)
        try:
            receipt = processor.pay(order.total())
        except PaymentFailure as error:
            order.record_payment_failure(error)
            self._publish(order)
            raise
        order.record_payment(receipt)
        self._publish(order)
        return receipt

    def ship(self, order: Order) -> ShipmentReceipt:
        """
        Ship the order.

        Raises:
            ShipmentFailure: If the shipment fails; the failure is recorded
                             and published before it propagates
        """
        try:
            receipt = self._shipper.ship(order)
        except ShipmentFailure as error:
            order.record_shipment_failure(error)
            self._publish(order)
            raise
        order.record_shipment(receipt)
        self._publish(order)
        return receipt

    def checkout(self, order: Order, method: str | PaymentMethod) -> Order:
        """
        Run the rest of the lifecycle: advance to Shipped, pay, ship, deliver.

        Starting from New this advances three times before paying. An order
        already further along is only advanced as far as Shipped, and an order
        that was already paid goes straight to shipment.

        Returns:
            The order, now Delivered

        Raises:
            PaymentFailure: Payment declined; nothing was shipped
            ShipmentFailure: Shipment failed; the order stays Shipped and the
                             payment is not reversed
        """
        logger.info(
            "Checking out order %s with %s, total %.2f",
            order.order_id,
            method.value if isinstance(method, PaymentMethod) else method,
            order.total(),
            extra={"order_id": str(order.order_id)},
        )
        if order.is_delivered:
            raise OrderClosedError(order.order_id, order.status, "it was already delivered")
        # An unknown tag must abort before any event is recorded
        resolve_payment_method(method)

        while order.status is not OrderStatus.SHIPPED:
            self.advance(order)
        if order.is_paid:
            logger.info(
                "Order %s already paid, resuming at shipment",
                order.order_id,
                extra={"order_id": str(order.order_id)},
            )
        else:
            self.pay(order, method)
        self.ship(order)
        self.advance(order)

        logger.info(
            "Order %s delivered",
            order.order_id,
            extra={"order_id": str(order.order_id), "status": order.status.value},
        )
        return order

    def _publish(self, order: Order) -> None:
        events = order.clear_uncommitted_events()
        if events:
            self._event_bus.publish(events)


__all__ = ["OrderWorkflow"]
