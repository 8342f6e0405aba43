"""
Configuration for order workflows.

This module provides:
- OrderFlowConfig: Failure rates, seeding and item-window enforcement
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from orderflow.policies import DEFAULT_FAILURE_PROBABILITY, RandomFailurePolicy


@dataclass(frozen=True)
class OrderFlowConfig:
    """
    Configuration for an order workflow.

    Attributes:
        payment_failure_rate: Chance in [0, 1] that a payment attempt fails
        shipment_failure_rate: Chance in [0, 1] that a shipment attempt fails
        enforce_item_window: Reject items added after the order left New
        seed: Seed for the failure policies. None uses unseeded randomness.
              With a seed, the payment and shipment policies each get their
              own generator, so one workflow run is fully reproducible.

    Example:
        >>> config = OrderFlowConfig(payment_failure_rate=0.0, seed=7)
        >>> config.payment_policy().should_fail()
        False
    """

    payment_failure_rate: float = DEFAULT_FAILURE_PROBABILITY
    shipment_failure_rate: float = DEFAULT_FAILURE_PROBABILITY
    enforce_item_window: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not 0.0 <= self.payment_failure_rate <= 1.0:
            raise ValueError(
                f"payment_failure_rate must be between 0 and 1, got {self.payment_failure_rate}"
            )
        if not 0.0 <= self.shipment_failure_rate <= 1.0:
            raise ValueError(
                f"shipment_failure_rate must be between 0 and 1, got {self.shipment_failure_rate}"
            )

    def payment_policy(self) -> RandomFailurePolicy:
        """Build the failure policy for payment attempts."""
        return RandomFailurePolicy(self.payment_failure_rate, rng=self._rng(0))

    def shipment_policy(self) -> RandomFailurePolicy:
        """Build the failure policy for shipment attempts."""
        return RandomFailurePolicy(self.shipment_failure_rate, rng=self._rng(1))

    def _rng(self, stream: int) -> random.Random:
        # Distinct streams keep payment and shipment draws independent
        if self.seed is None:
            return random.Random()
        return random.Random(f"{self.seed}:{stream}")


__all__ = ["OrderFlowConfig"]
