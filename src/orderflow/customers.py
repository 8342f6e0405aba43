"""Customer identity attached to an order."""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """
    The person an order belongs to.

    Immutable after construction. A customer carries no behavior beyond its
    display string, which shipment messages use.

    Attributes:
        customer_id: Unique identifier, generated if not supplied
        name: Customer's name
        email: Contact address (not validated beyond being non-empty)
    """

    model_config = ConfigDict(frozen=True)

    customer_id: UUID = Field(default_factory=uuid4)
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)

    def display(self) -> str:
        """Return the customer as shown to the operator: ``"Name (email)"``."""
        return f"{self.name} ({self.email})"

    def __str__(self) -> str:
        return self.display()
