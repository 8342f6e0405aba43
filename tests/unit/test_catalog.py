"""Unit tests for the product catalog."""

import pytest

from orderflow.catalog import Catalog, default_catalog
from orderflow.exceptions import UnknownProductError
from orderflow.items import CompositeItem, SimpleItem


class TestDefaultCatalog:
    def test_products_in_order(self, catalog: Catalog) -> None:
        assert catalog.keys() == ["laptop", "mouse", "keyboard", "computer_set"]
        assert len(catalog) == 4

    @pytest.mark.parametrize(
        ("key", "name", "price"),
        [
            ("laptop", "Laptop", 1000),
            ("mouse", "Mouse", 50),
            ("keyboard", "Keyboard", 100),
            ("computer_set", "Computer Set", 1150),
        ],
    )
    def test_prices(self, catalog: Catalog, key: str, name: str, price: float) -> None:
        item = catalog.get(key)
        assert item.name == name
        assert item.price() == price

    def test_computer_set_shares_simple_products(self, catalog: Catalog) -> None:
        computer_set = catalog.get("computer_set")
        assert isinstance(computer_set, CompositeItem)
        assert computer_set.children == [
            catalog.get("laptop"),
            catalog.get("mouse"),
            catalog.get("keyboard"),
        ]
        assert computer_set.children[0] is catalog.get("laptop")

    def test_same_key_returns_same_object(self, catalog: Catalog) -> None:
        assert catalog.get("mouse") is catalog.get("mouse")

    def test_each_call_builds_fresh_catalog(self) -> None:
        assert default_catalog().get("laptop") is not default_catalog().get("laptop")


class TestCatalog:
    def test_unknown_key(self, catalog: Catalog) -> None:
        with pytest.raises(UnknownProductError) as exc_info:
            catalog.get("monitor")
        assert exc_info.value.key == "monitor"
        assert "laptop" in str(exc_info.value)

    def test_unknown_key_is_key_error(self, catalog: Catalog) -> None:
        with pytest.raises(KeyError):
            catalog.get("monitor")

    def test_register_and_iterate(self) -> None:
        catalog = Catalog()
        cable = catalog.register("cable", SimpleItem(name="Cable", price=5))
        assert "cable" in catalog
        assert list(catalog) == [("cable", cable)]

    @pytest.mark.parametrize("key", ["", "cable"])
    def test_register_rejects_empty_or_duplicate_key(self, key: str) -> None:
        catalog = Catalog()
        catalog.register("cable", SimpleItem(name="Cable", price=5))
        with pytest.raises(ValueError):
            catalog.register(key, SimpleItem(name="Other", price=1))
