"""Unit tests for the Supplier aggregate."""

import logging
from datetime import date

import pytest

from shopsim.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from shopsim.domain.model.value_objects import Money
from shopsim.domain.model.supplier import Supplier


def _supplier() -> Supplier:
    return Supplier(
        name="Acme", address="1 Main St", founded_date=date(2020, 1, 1), id=7
    )


class TestRegisterItem:

    def test_register_appends_item(self):
        supplier = _supplier()
        item = supplier.register_item("Chips", Money.of("3000"), 1, "Fried potatoes", 7)
        assert supplier.items == [item]
        assert item.supplier_id == 7
        assert item.catalog.describe() == "Chips is Fried potatoes and costs $3000.00"
        assert item.stock is None

    def test_duplicate_ids_allowed(self):
        supplier = _supplier()
        first = supplier.register_item("Chips", Money.of("1"), 1, "", 7)
        supplier.register_item("Salsa", Money.of("2"), 1, "", 7)
        assert len(supplier.items) == 2
        assert supplier.find_item_by_id(1) is first

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _supplier().register_item("Chips", Money.of("1"), 1, "", 7, stock=-1)

    def test_register_supplier_requires_name(self):
        with pytest.raises(ValidationError, match="Supplier name is required"):
            Supplier.register(" ", "somewhere", date(2020, 1, 1))


class TestSupplierPurchase:

    def test_purchase_without_stock_tracking(self):
        supplier = _supplier()
        item = supplier.register_item("Water", Money.of("10"), 1, "drinkable", 7)

        receipt = supplier.purchase(1, 5)

        assert receipt.final_price == Money.of("50")
        assert receipt.purchased_item is item
        assert receipt.quantity == 5

    def test_purchase_decrements_tracked_stock(self):
        supplier = _supplier()
        item = supplier.register_item("Water", Money.of("10"), 1, "", 7, stock=8)
        supplier.purchase(1, 5)
        assert item.stock == 3

    def test_purchase_insufficient_stock(self):
        supplier = _supplier()
        item = supplier.register_item("Water", Money.of("10"), 1, "", 7, stock=4)
        with pytest.raises(InsufficientStockError, match="Insufficient stock"):
            supplier.purchase(1, 5)
        assert item.stock == 4

    def test_purchase_unknown_item(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            _supplier().purchase(1, 1)

    def test_find_missing_returns_none(self):
        assert _supplier().find_item_by_id(3) is None

    def test_rejections_are_logged(self, caplog):
        supplier = _supplier()
        supplier.register_item("Water", Money.of("10"), 1, "", 7, stock=1)
        caplog.set_level(logging.WARNING)

        with pytest.raises(EntityNotFoundError):
            supplier.purchase(2, 1)
        with pytest.raises(InsufficientStockError):
            supplier.purchase(1, 2)

        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert len(messages) == 2
        assert "has no item with id 2" in messages[0]
        assert "only 1 in stock" in messages[1]
