"""
Priced items: the things an order is made of.

``PricedItem`` is a closed tagged union of two pydantic models:

- ``SimpleItem``: a leaf product with a fixed, non-negative price
- ``CompositeItem``: a named bundle whose price is the sum of its children

A composite's price is recomputed on every ``price()`` call, so children
added after an earlier price query are always reflected. Items are shared by
reference: adding the same ``SimpleItem`` to several orders or bundles never
copies it.

Example:
    >>> computer_set = (
    ...     CompositeItem(name="Computer Set")
    ...     .add(SimpleItem(name="Laptop", price=1000))
    ...     .add(SimpleItem(name="Mouse", price=50))
    ... )
    >>> computer_set.price()
    1050.0
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class SimpleItem(BaseModel):
    """
    A product with a fixed price.

    Constructed as ``SimpleItem(name="Mouse", price=50)``; the price is
    stored as ``fixed_price`` because ``price()`` is the pricing method
    shared with ``CompositeItem``.

    Attributes:
        kind: Discriminator, always "simple"
        name: Display name of the product
        fixed_price: Fixed price, finite and >= 0
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: Literal["simple"] = "simple"
    name: str = Field(..., min_length=1)
    fixed_price: float = Field(..., ge=0, allow_inf_nan=False, alias="price")

    def price(self) -> float:
        """Return the fixed price of this item."""
        return self.fixed_price

    def describe(self, indent: int = 0) -> list[str]:
        return [f"{'  ' * indent}{self.name}: {self.fixed_price:.2f}"]

    def __str__(self) -> str:
        return f"{self.name} ({self.fixed_price:.2f})"


class CompositeItem(BaseModel):
    """
    A named bundle of other priced items.

    Children are kept in insertion order. The composite owns its list of
    children; the children themselves may be shared with other bundles or
    orders.

    Attributes:
        kind: Discriminator, always "composite"
        name: Display name of the bundle
        children: The items inside the bundle
    """

    kind: Literal["composite"] = "composite"
    name: str = Field(..., min_length=1)
    children: list[PricedItem] = Field(default_factory=list)

    def price(self) -> float:
        """
        Return the sum of the children's prices.

        Evaluated recursively on every call; nothing is cached. An empty
        composite costs 0.
        """
        return float(sum(child.price() for child in self.children))

    def add(self, child: PricedItem) -> CompositeItem:
        """
        Append ``child`` to this bundle.

        Legal at any time, including after earlier ``price()`` calls.

        Args:
            child: The item to add

        Returns:
            This composite, so calls can be chained

        Raises:
            TypeError: If ``child`` is not a priced item
            ValueError: If adding ``child`` would make the bundle contain itself
        """
        if not is_priced_item(child):
            raise TypeError(
                f"Can only add SimpleItem or CompositeItem, got {type(child).__name__}"
            )
        if isinstance(child, CompositeItem) and (child is self or child.contains(self)):
            raise ValueError(f"Adding {child.name!r} to {self.name!r} would create a cycle")
        self.children.append(child)
        return self

    def contains(self, item: PricedItem) -> bool:
        """Check whether ``item`` appears anywhere below this bundle (by identity)."""
        for child in self.children:
            if child is item:
                return True
            if isinstance(child, CompositeItem) and child.contains(item):
                return True
        return False

    def leaves(self) -> Iterator[SimpleItem]:
        """Yield every nested SimpleItem, depth-first in insertion order."""
        for child in self.children:
            if isinstance(child, CompositeItem):
                yield from child.leaves()
            else:
                yield child

    def describe(self, indent: int = 0) -> list[str]:
        lines = [f"{'  ' * indent}{self.name}: {self.price():.2f}"]
        for child in self.children:
            lines.extend(child.describe(indent + 1))
        return lines

    def __str__(self) -> str:
        return f"{self.name} ({self.price():.2f}, {len(self.children)} items)"


PricedItem = Annotated[SimpleItem | CompositeItem, Field(discriminator="kind")]

CompositeItem.model_rebuild()


def is_priced_item(value: object) -> bool:
    """Check whether ``value`` is one of the PricedItem variants."""
    return isinstance(value, (SimpleItem, CompositeItem))


__all__ = [
    "CompositeItem",
    "PricedItem",
    "SimpleItem",
    "is_priced_item",
]
