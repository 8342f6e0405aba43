"""
Base class for domain events.

Events are immutable records of things that have happened to an order.
The shell never inspects aggregate internals; it learns about progress only
through the events it receives from the event bus.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DomainEvent(BaseModel):
    """
    Base class for all domain events.

    ``event_type`` is filled in automatically: a subclass's declared default
    wins, otherwise the class name is used.

    Attributes:
        event_id: Unique identifier for this event instance
        event_type: Name of the event
        occurred_at: UTC timestamp of recording
        aggregate_id: ID of the aggregate this event belongs to
        aggregate_type: Aggregate name, e.g. ``"Order"``
        aggregate_version: Aggregate version after this event, starting at 1
        correlation_id: Shared by every event of one order

    Example:
        >>> class OrderNoted(DomainEvent):
        ...     aggregate_type: str = "Order"
        ...     note: str
        ...
        >>> OrderNoted(aggregate_id=uuid4(), note="gift wrap").event_type
        'OrderNoted'
    """

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    event_type: str = ""
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    aggregate_id: UUID
    aggregate_type: str
    aggregate_version: int = Field(default=1, ge=1)

    # The order stamps its own id here so one run can be traced through the bus
    correlation_id: UUID = Field(default_factory=uuid4)

    @model_validator(mode="before")
    @classmethod
    def _ensure_event_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("event_type"):
            declared = cls.model_fields["event_type"].default
            data = {**data, "event_type": declared or cls.__name__}
        return data

    def describe(self) -> str:
        """
        Human-readable text for display.

        Subclasses override this with their user-facing message.
        """
        return self.event_type

    def __str__(self) -> str:
        return f"{self.event_type}(aggregate_id={self.aggregate_id}, version={self.aggregate_version})"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"event_id={self.event_id!r}, "
            f"aggregate_id={self.aggregate_id!r}, "
            f"aggregate_version={self.aggregate_version}, "
            f"occurred_at={self.occurred_at!r})"
        )
