"""Aggregate pattern implementations for the orderflow library."""

from orderflow.aggregates.base import (
    AggregateRoot,
    DeclarativeAggregate,
)
from orderflow.types import TState

__all__ = [
    "AggregateRoot",
    "DeclarativeAggregate",
    "TState",
]
