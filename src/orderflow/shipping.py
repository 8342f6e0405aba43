"""
Shipment operation.

``Shipper.ship(order)`` makes one attempt to ship an order. Like payments,
the outcome is decided by an injectable ``FailurePolicy`` and a failed
attempt is never retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from orderflow.exceptions import ShipmentFailure
from orderflow.lifecycle import OrderStatus
from orderflow.policies import FailurePolicy, RandomFailurePolicy

if TYPE_CHECKING:
    from orderflow.order import Order

logger = logging.getLogger(__name__)

SHIPMENT_FAILED_MESSAGE = "Shipment failed!"


@dataclass(frozen=True)
class ShipmentReceipt:
    """
    Outcome of a successful shipment.

    Attributes:
        order_id: The order that was shipped
        customer: Display string of the recipient
        tracking_number: Carrier reference for the parcel
    """

    order_id: UUID
    customer: str
    tracking_number: str = field(default_factory=lambda: f"TRK-{uuid4().hex[:12].upper()}")

    def describe(self) -> str:
        return f"Order shipped to {self.customer}."


class Shipper:
    """
    Ships orders, failing at random according to its policy.

    Args:
        policy: Failure policy consulted once per ``ship`` call. Defaults to a
                ``RandomFailurePolicy`` failing one attempt in twenty.
    """

    def __init__(self, policy: FailurePolicy | None = None) -> None:
        self._policy = policy if policy is not None else RandomFailurePolicy()

    @property
    def policy(self) -> FailurePolicy:
        return self._policy

    def ship(self, order: Order) -> ShipmentReceipt:
        """
        Attempt to ship ``order`` once.

        The order is expected to be in the Shipped state. Shipping from any
        other state is allowed but logged as a warning.

        Args:
            order: The order to ship

        Returns:
            ShipmentReceipt naming the order's customer

        Raises:
            ShipmentFailure: If the failure policy declines the attempt
        """
        if order.status is not OrderStatus.SHIPPED:
            logger.warning(
                "Shipping order %s while it is %s",
                order.order_id,
                order.status.label,
                extra={"order_id": str(order.order_id), "status": order.status.value},
            )

        if self._policy.should_fail():
            logger.warning(
                "Shipment of order %s failed",
                order.order_id,
                extra={"order_id": str(order.order_id)},
            )
            raise ShipmentFailure(SHIPMENT_FAILED_MESSAGE, order_id=order.order_id)

        receipt = ShipmentReceipt(order_id=order.order_id, customer=order.customer.display())
        logger.info(
            "Order %s shipped to %s",
            order.order_id,
            receipt.customer,
            extra={
                "order_id": str(order.order_id),
                "tracking_number": receipt.tracking_number,
            },
        )
        return receipt

    def __repr__(self) -> str:
        return f"Shipper(policy={self._policy!r})"


def ship(order: Order, policy: FailurePolicy | None = None) -> ShipmentReceipt:
    """
    Ship ``order`` with a one-off Shipper.

    Raises:
        ShipmentFailure: If the attempt fails
    """
    return Shipper(policy).ship(order)


__all__ = [
    "SHIPMENT_FAILED_MESSAGE",
    "ShipmentReceipt",
    "Shipper",
    "ship",
]
