"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopsim.domain.model.store import StockedItem, Store
from shopsim.domain.model.supplier import Supplier, SupplierItem


@dataclass(frozen=True)
class StockedItemDTO:
    id: int
    name: str
    description: str
    quantity_on_hand: int
    unit_price: str  # formatted, e.g. "$15.00"
    margin_rate: str  # formatted, e.g. "20%"


@dataclass(frozen=True)
class StoreDTO:
    id: int
    name: str
    cash_balance: str
    inventory_value: str
    items: list[StockedItemDTO]


@dataclass(frozen=True)
class SaleDTO:
    """Output: the result of a sale."""

    item_name: str
    quantity: int
    revenue: str
    cash_balance: str
    remaining_stock: int


@dataclass(frozen=True)
class SupplierItemDTO:
    id: int
    name: str
    description: str
    unit_price: str
    stock: int | None  # None means the supplier does not track stock


@dataclass(frozen=True)
class SupplierDTO:
    id: int
    name: str
    address: str
    founded_date: str
    items: list[SupplierItemDTO]


@dataclass(frozen=True)
class SupplierPurchaseDTO:
    item_name: str
    quantity: int
    final_price: str


# --- Mapping -----------------------------------------------------------------


def stocked_item_to_dto(item: StockedItem) -> StockedItemDTO:
    return StockedItemDTO(
        id=item.id,
        name=item.name,
        description=item.description,
        quantity_on_hand=item.quantity_on_hand,
        unit_price=str(item.price),
        margin_rate=str(item.margin_rate),
    )


def store_to_dto(store: Store) -> StoreDTO:
    return StoreDTO(
        id=store.id,  # type: ignore[arg-type]
        name=store.name,
        cash_balance=str(store.cash_balance),
        inventory_value=str(store.inventory_value),
        items=[stocked_item_to_dto(item) for item in store.items],
    )


def supplier_item_to_dto(item: SupplierItem) -> SupplierItemDTO:
    return SupplierItemDTO(
        id=item.id,
        name=item.name,
        description=item.description,
        unit_price=str(item.price),
        stock=item.stock,
    )


def supplier_to_dto(supplier: Supplier) -> SupplierDTO:
    return SupplierDTO(
        id=supplier.id,  # type: ignore[arg-type]
        name=supplier.name,
        address=supplier.address,
        founded_date=supplier.founded_date.isoformat(),
        items=[supplier_item_to_dto(item) for item in supplier.items],
    )
