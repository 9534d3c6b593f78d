"""Supplier aggregate — a catalog of items a store can buy from."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date

from shopsim.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from shopsim.domain.model.catalog import CatalogItem
from shopsim.domain.model.value_objects import Money, Quantity

LOGGER = logging.getLogger(__name__)


@dataclass
class SupplierItem:
    """A catalog item offered by a supplier.

    ``stock`` is ``None`` when the supplier does not track availability,
    in which case any quantity can be bought.
    """

    catalog: CatalogItem
    supplier_id: int
    stock: int | None = None

    @property
    def id(self) -> int:
        return self.catalog.id

    @property
    def name(self) -> str:
        return self.catalog.name

    @property
    def price(self) -> Money:
        return self.catalog.price

    @property
    def description(self) -> str:
        return self.catalog.description

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock is None or quantity <= self.stock


@dataclass(frozen=True)
class SupplierPurchase:
    """Outcome of buying from a supplier."""

    final_price: Money
    purchased_item: SupplierItem
    quantity: int


@dataclass
class Supplier:

    name: str
    address: str
    founded_date: date
    id: int | None
    items: list[SupplierItem] = field(default_factory=list)

    @staticmethod
    def register(name: str, address: str, founded_date: date) -> Supplier:
        if not name or not name.strip():
            raise ValidationError("Supplier name is required")
        return Supplier(
            name=name.strip(),
            address=address.strip(),
            founded_date=founded_date,
            id=None,
        )

    def find_item_by_id(self, item_id: int) -> SupplierItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def register_item(
        self,
        name: str,
        price: Money,
        item_id: int,
        description: str,
        supplier_id: int,
        stock: int | None = None,
    ) -> SupplierItem:
        """Add an item to the catalog. Duplicate ids are not checked."""
        if stock is not None and stock < 0:
            raise ValidationError("Supplier stock cannot be negative")
        item = SupplierItem(
            catalog=CatalogItem(
                name=name, price=price, id=item_id, description=description
            ),
            supplier_id=supplier_id,
            stock=stock,
        )
        self.items.append(item)
        return item

    def purchase(self, item_id: int, quantity: int) -> SupplierPurchase:
        """Buy ``quantity`` units of an item, decrementing tracked stock."""
        qty = Quantity(quantity).value
        item = self.find_item_by_id(item_id)
        if item is None:
            LOGGER.warning("Supplier %r has no item with id %d", self.name, item_id)
            raise EntityNotFoundError(f"Product not found: id {item_id}")

        if not item.has_stock_for(qty):
            LOGGER.warning(
                "Supplier %r cannot sell %d x %s: only %d in stock",
                self.name, qty, item.name, item.stock,
            )
            raise InsufficientStockError(
                f"Insufficient stock for {item.name} "
                f"(need {qty}, have {item.stock})"
            )
        if item.stock is not None:
            item.stock -= qty

        return SupplierPurchase(
            final_price=item.price * qty, purchased_item=item, quantity=qty
        )
