"""
Product catalog offered to the shell.

The shell lists ``Catalog.keys()`` and turns the operator's choice into an
item with ``Catalog.get(key)``. Products are shared: choosing the same key
twice returns the same item object.
"""

from __future__ import annotations

from collections.abc import Iterator

from orderflow.exceptions import UnknownProductError
from orderflow.items import CompositeItem, PricedItem, SimpleItem


class Catalog:
    """An ordered mapping of product keys to priced items."""

    def __init__(self) -> None:
        self._products: dict[str, PricedItem] = {}

    def register(self, key: str, item: PricedItem) -> PricedItem:
        """
        Add a product under ``key``.

        Raises:
            ValueError: If ``key`` is empty or already registered
        """
        if not key:
            raise ValueError("Product key must not be empty")
        if key in self._products:
            raise ValueError(f"Product {key!r} is already registered")
        self._products[key] = item
        return item

    def get(self, key: str) -> PricedItem:
        """
        Look up a product.

        Raises:
            UnknownProductError: If no product is registered under ``key``
        """
        try:
            return self._products[key]
        except KeyError:
            raise UnknownProductError(key, self.keys()) from None

    def keys(self) -> list[str]:
        return list(self._products)

    def __contains__(self, key: object) -> bool:
        return key in self._products

    def __iter__(self) -> Iterator[tuple[str, PricedItem]]:
        return iter(list(self._products.items()))

    def __len__(self) -> int:
        return len(self._products)


def default_catalog() -> Catalog:
    """
    Build the standard catalog.

    Products:
        laptop: Laptop, 1000
        mouse: Mouse, 50
        keyboard: Keyboard, 100
        computer_set: Computer Set bundling the three above, 1150
    """
    catalog = Catalog()
    laptop = catalog.register("laptop", SimpleItem(name="Laptop", price=1000))
    mouse = catalog.register("mouse", SimpleItem(name="Mouse", price=50))
    keyboard = catalog.register("keyboard", SimpleItem(name="Keyboard", price=100))
    catalog.register(
        "computer_set",
        CompositeItem(name="Computer Set").add(laptop).add(mouse).add(keyboard),
    )
    return catalog


__all__ = [
    "Catalog",
    "default_catalog",
]
