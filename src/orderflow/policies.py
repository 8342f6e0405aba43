"""
Failure policies for payment and shipment attempts.

Payments and shipments fail at random in production. Rather than calling
``random`` inline, both operations consult an injectable ``FailurePolicy`` so
tests can force a deterministic outcome.

Policies:
- RandomFailurePolicy: Fails independently with a fixed probability (default 1/20)
- AlwaysSucceed: Never fails
- AlwaysFail: Always fails
- ScriptedFailurePolicy: Replays a fixed sequence of outcomes

Example:
    >>> from orderflow.policies import RandomFailurePolicy, AlwaysFail
    >>>
    >>> # Reproducible production-like policy
    >>> policy = RandomFailurePolicy(probability=0.05, seed=42)
    >>>
    >>> # Forced failure for tests
    >>> AlwaysFail().should_fail()
    True
"""

import logging
import random
from collections.abc import Iterable
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# One failed attempt in twenty
DEFAULT_FAILURE_PROBABILITY = 1 / 20


@runtime_checkable
class FailurePolicy(Protocol):
    """
    Protocol for deciding whether a single attempt fails.

    Each call to ``should_fail`` corresponds to exactly one payment or
    shipment attempt. Implementations must not assume anything about the
    amount charged or the order shipped.
    """

    def should_fail(self) -> bool:
        """
        Decide the outcome of one attempt.

        Returns:
            True if the attempt fails, False if it succeeds
        """
        ...


class RandomFailurePolicy:
    """
    Fails each attempt independently with a fixed probability.

    Args:
        probability: Chance in [0, 1] that an attempt fails
        rng: Random source to draw from. Takes precedence over ``seed``.
        seed: Seed for a private ``random.Random`` when ``rng`` is not given.
              None draws from an unseeded private generator.

    Raises:
        ValueError: If probability is outside [0, 1]
    """

    def __init__(
        self,
        probability: float = DEFAULT_FAILURE_PROBABILITY,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"probability must be between 0 and 1, got {probability}")
        self._probability = probability
        self._rng = rng if rng is not None else random.Random(seed)

    @property
    def probability(self) -> float:
        """Get the configured failure probability."""
        return self._probability

    def should_fail(self) -> bool:
        roll = self._rng.random()
        failed = roll < self._probability
        logger.debug(
            "Failure roll %.4f against %.4f: %s",
            roll,
            self._probability,
            "fail" if failed else "pass",
        )
        return failed

    def __repr__(self) -> str:
        return f"RandomFailurePolicy(probability={self._probability})"


class AlwaysSucceed:
    """Policy under which no attempt ever fails."""

    def should_fail(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "AlwaysSucceed()"


class AlwaysFail:
    """Policy under which every attempt fails."""

    def should_fail(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "AlwaysFail()"


class ScriptedFailurePolicy:
    """
    Replays a fixed sequence of outcomes, one per attempt.

    Useful for tests that need e.g. "first attempt fails, second succeeds"
    across several operations sharing one policy.

    Example:
        >>> policy = ScriptedFailurePolicy([False, True])
        >>> policy.should_fail(), policy.should_fail()
        (False, True)
    """

    def __init__(self, outcomes: Iterable[bool]) -> None:
        self._outcomes = list(outcomes)
        self._position = 0

    @property
    def calls(self) -> int:
        """Number of attempts decided so far."""
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._outcomes) - self._position

    def should_fail(self) -> bool:
        """
        Return the next scripted outcome.

        Raises:
            RuntimeError: If every scripted outcome has been used
        """
        if self._position >= len(self._outcomes):
            raise RuntimeError(
                f"ScriptedFailurePolicy exhausted after {len(self._outcomes)} attempts"
            )
        outcome = self._outcomes[self._position]
        self._position += 1
        return outcome

    def __repr__(self) -> str:
        return f"ScriptedFailurePolicy(remaining={self.remaining})"


__all__ = [
    "DEFAULT_FAILURE_PROBABILITY",
    "AlwaysFail",
    "AlwaysSucceed",
    "FailurePolicy",
    "RandomFailurePolicy",
    "ScriptedFailurePolicy",
]
