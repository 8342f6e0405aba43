"""
orderflow - Order lifecycle engine for a single retail order.

This library provides:
- Composite priced items (simple products and bundles)
- An event-recording Order aggregate with a four-state lifecycle
- Payment and shipment operations with injectable failure policies
- Domain events with display texts, delivered through an in-memory event bus
- An OrderWorkflow driving an order from New to Delivered
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("orderflow")
except PackageNotFoundError:
    # Package not installed (running from source without install)
    __version__ = "0.0.0.dev0"

from orderflow.aggregates.base import AggregateRoot, DeclarativeAggregate
from orderflow.bus.interface import EventBus, EventHandlerFunc
from orderflow.bus.memory import InMemoryEventBus
from orderflow.catalog import Catalog, default_catalog
from orderflow.config import OrderFlowConfig
from orderflow.customers import Customer
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
from orderflow.exceptions import (
    EventVersionError,
    OrderClosedError,
    OrderFlowError,
    PaymentFailure,
    ShipmentFailure,
    UnhandledEventError,
    UnknownPaymentMethodError,
    UnknownProductError,
)
from orderflow.handlers import handles
from orderflow.items import CompositeItem, PricedItem, SimpleItem
from orderflow.lifecycle import OrderStatus, Transition, advance
from orderflow.order import Order, OrderState
from orderflow.payments import (
    PaymentCapability,
    PaymentMethod,
    PaymentProcessor,
    PaymentReceipt,
    resolve_payment_method,
    select_payment_method,
)
from orderflow.policies import (
    DEFAULT_FAILURE_PROBABILITY,
    AlwaysFail,
    AlwaysSucceed,
    FailurePolicy,
    RandomFailurePolicy,
    ScriptedFailurePolicy,
)
from orderflow.shipping import SHIPMENT_FAILED_MESSAGE, ShipmentReceipt, Shipper, ship
from orderflow.workflow import OrderWorkflow

__all__ = [
    "__version__",
    # Items and customers
    "CompositeItem",
    "Customer",
    "PricedItem",
    "SimpleItem",
    # Lifecycle
    "OrderStatus",
    "Transition",
    "advance",
    # Aggregates
    "AggregateRoot",
    "DeclarativeAggregate",
    "Order",
    "OrderState",
    "handles",
    # Events
    "DomainEvent",
    "OrderCreated",
    "OrderEvent",
    "OrderItemAdded",
    "OrderStateAnnounced",
    "PaymentFailed",
    "PaymentSucceeded",
    "ShipmentFailed",
    "ShipmentSucceeded",
    # Event bus
    "EventBus",
    "EventHandlerFunc",
    "InMemoryEventBus",
    # Policies
    "DEFAULT_FAILURE_PROBABILITY",
    "AlwaysFail",
    "AlwaysSucceed",
    "FailurePolicy",
    "RandomFailurePolicy",
    "ScriptedFailurePolicy",
    # Payments and shipping
    "PaymentCapability",
    "PaymentMethod",
    "PaymentProcessor",
    "PaymentReceipt",
    "SHIPMENT_FAILED_MESSAGE",
    "ShipmentReceipt",
    "Shipper",
    "resolve_payment_method",
    "select_payment_method",
    "ship",
    # Workflow, catalog and config
    "Catalog",
    "OrderFlowConfig",
    "OrderWorkflow",
    "default_catalog",
    # Exceptions
    "EventVersionError",
    "OrderClosedError",
    "OrderFlowError",
    "PaymentFailure",
    "ShipmentFailure",
    "UnhandledEventError",
    "UnknownPaymentMethodError",
    "UnknownProductError",
]
