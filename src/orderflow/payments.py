"""
Payment capability.

A ``PaymentProcessor`` charges an amount using one ``PaymentMethod``. The
set of methods is closed (credit card and PayPal); each method carries its
own display label and failure message, so a single processor class serves
every method.

Each ``pay`` call is a single attempt. Whether it fails is decided by the
processor's ``FailurePolicy``; there is no retry and no backoff.

Example:
    >>> from orderflow.payments import select_payment_method
    >>> from orderflow.policies import AlwaysSucceed
    >>>
    >>> processor = select_payment_method("paypal", policy=AlwaysSucceed())
    >>> receipt = processor.pay(1150.0)
    >>> receipt.describe()
    'Paid 1150.00 using PayPal.'
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable
from uuid import uuid4

from orderflow.exceptions import PaymentFailure, UnknownPaymentMethodError
from orderflow.policies import FailurePolicy, RandomFailurePolicy

logger = logging.getLogger(__name__)


class PaymentMethod(Enum):
    """
    Supported payment methods.

    The value is the tag the shell passes to ``select_payment_method``.
    """

    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"

    @property
    def label(self) -> str:
        """Display name ("Credit Card", "PayPal")."""
        return _LABELS[self]

    @property
    def failure_message(self) -> str:
        """The exact message shown when a charge with this method fails."""
        return f"{self.label} payment failed!"


_LABELS: dict[PaymentMethod, str] = {
    PaymentMethod.CREDIT_CARD: "Credit Card",
    PaymentMethod.PAYPAL: "PayPal",
}


@dataclass(frozen=True)
class PaymentReceipt:
    """
    Outcome of a successful charge.

    Attributes:
        amount: The amount charged
        method: The method used
        transaction_id: Identifier of the charge
    """

    amount: float
    method: PaymentMethod
    transaction_id: str = field(default_factory=lambda: uuid4().hex)

    def describe(self) -> str:
        return f"Paid {self.amount:.2f} using {self.method.label}."


@runtime_checkable
class PaymentCapability(Protocol):
    """Anything that can attempt to charge an amount."""

    @property
    def method(self) -> PaymentMethod: ...

    def pay(self, amount: float) -> PaymentReceipt:
        """
        Attempt to charge ``amount``.

        Raises:
            PaymentFailure: If the charge is declined
        """
        ...


class PaymentProcessor:
    """
    Charges amounts with a single payment method.

    Args:
        method: The payment method to charge with
        policy: Failure policy consulted once per ``pay`` call. Defaults to a
                ``RandomFailurePolicy`` failing one attempt in twenty.
    """

    def __init__(self, method: PaymentMethod, policy: FailurePolicy | None = None) -> None:
        self._method = method
        self._policy = policy if policy is not None else RandomFailurePolicy()

    @property
    def method(self) -> PaymentMethod:
        return self._method

    @property
    def policy(self) -> FailurePolicy:
        return self._policy

    def pay(self, amount: float) -> PaymentReceipt:
        """
        Attempt to charge ``amount`` once.

        An amount of 0 is charged like any other amount and follows the
        same failure policy.

        Args:
            amount: Non-negative amount to charge

        Returns:
            PaymentReceipt describing the charge

        Raises:
            ValueError: If amount is negative or not finite
            PaymentFailure: If the failure policy declines the attempt
        """
        if not math.isfinite(amount) or amount < 0:
            raise ValueError(f"Payment amount must be a finite non-negative number, got {amount}")

        if self._policy.should_fail():
            logger.warning(
                "%s payment of %.2f declined",
                self._method.label,
                amount,
                extra={"method": self._method.value, "amount": amount},
            )
            raise PaymentFailure(self._method, self._method.failure_message)

        receipt = PaymentReceipt(amount=float(amount), method=self._method)
        logger.info(
            "Charged %.2f using %s",
            amount,
            self._method.label,
            extra={
                "method": self._method.value,
                "amount": amount,
                "transaction_id": receipt.transaction_id,
            },
        )
        return receipt

    def __repr__(self) -> str:
        return f"PaymentProcessor(method={self._method.value!r}, policy={self._policy!r})"


def resolve_payment_method(tag: str | PaymentMethod) -> PaymentMethod:
    """
    Turn a shell tag ("credit_card", "paypal") into a PaymentMethod.

    Tags are matched case-insensitively with surrounding whitespace ignored.

    Raises:
        UnknownPaymentMethodError: If the tag names no supported method
    """
    if isinstance(tag, PaymentMethod):
        return tag
    if isinstance(tag, str):
        normalized = tag.strip().lower()
        for method in PaymentMethod:
            if method.value == normalized:
                return method
    raise UnknownPaymentMethodError(tag, [m.value for m in PaymentMethod])


def select_payment_method(
    tag: str | PaymentMethod,
    policy: FailurePolicy | None = None,
) -> PaymentProcessor:
    """
    Build the payment capability for a shell tag.

    Args:
        tag: "credit_card", "paypal", or a PaymentMethod
        policy: Optional failure policy (defaults to 1/20 random failure)

    Returns:
        PaymentProcessor for the selected method

    Raises:
        UnknownPaymentMethodError: If the tag names no supported method
    """
    return PaymentProcessor(resolve_payment_method(tag), policy=policy)


__all__ = [
    "PaymentCapability",
    "PaymentMethod",
    "PaymentProcessor",
    "PaymentReceipt",
    "resolve_payment_method",
    "select_payment_method",
]
