"""Integration tests for the supplier and restock use cases."""

from datetime import date

import pytest

from shopsim.application.open_store import OpenStoreHandler
from shopsim.application.register_supplier import RegisterSupplierHandler
from shopsim.application.register_supplier_item import RegisterSupplierItemHandler
from shopsim.application.restock_from_supplier import RestockFromSupplierHandler
from shopsim.application.show_supplier import ShowSupplierHandler
from shopsim.application.supplier_purchase import SupplierPurchaseHandler
from shopsim.domain.exceptions import (
    EntityNotFoundError,
    InsufficientFundsError,
    InsufficientStockError,
)
from shopsim.domain.model.value_objects import Money
from tests.fakes import FakeStoreRepository, FakeSupplierRepository


def _setup(stock: int | None = None):
    supplier_repo = FakeSupplierRepository()
    supplier = RegisterSupplierHandler(supplier_repo).handle(
        "Acme", "1 Main St", date(2019, 5, 17)
    )
    RegisterSupplierItemHandler(supplier_repo).handle(
        supplier_id=supplier.id,
        name="Water",
        price="10",
        item_id=1,
        description="drinkable",
        stock=stock,
    )
    return supplier_repo, supplier.id


class TestRegisterSupplier:

    def test_register_and_show(self):
        supplier_repo, supplier_id = _setup(stock=12)
        dto = ShowSupplierHandler(supplier_repo).handle(supplier_id)

        assert dto.name == "Acme"
        assert dto.founded_date == "2019-05-17"
        assert [i.name for i in dto.items] == ["Water"]
        assert dto.items[0].stock == 12

    def test_item_tagged_with_supplier_id(self):
        supplier_repo, supplier_id = _setup()
        item = supplier_repo.get_by_id(supplier_id).find_item_by_id(1)
        assert item.supplier_id == supplier_id

    def test_register_item_for_missing_supplier(self):
        with pytest.raises(EntityNotFoundError, match="Supplier #4 not found"):
            RegisterSupplierItemHandler(FakeSupplierRepository()).handle(4, "X", "1", 1)


class TestSupplierPurchase:

    def test_purchase_prices_quantity(self):
        supplier_repo, supplier_id = _setup()
        dto = SupplierPurchaseHandler(supplier_repo).handle(supplier_id, 1, 5)
        assert dto.final_price == "$50.00"
        assert dto.quantity == 5

    def test_purchase_short_of_stock(self):
        supplier_repo, supplier_id = _setup(stock=2)
        with pytest.raises(InsufficientStockError):
            SupplierPurchaseHandler(supplier_repo).handle(supplier_id, 1, 5)


class TestRestockFromSupplier:

    def test_restock(self):
        supplier_repo, supplier_id = _setup(stock=100)
        store_repo = FakeStoreRepository()
        store = OpenStoreHandler(store_repo).handle("Pepe's", "1000")

        dto = RestockFromSupplierHandler(store_repo, supplier_repo).handle(
            store.id, supplier_id, item_id=1, quantity=40, margin_rate="0.3"
        )

        assert dto.quantity_on_hand == 40
        assert store_repo.get_by_id(store.id).cash_balance == Money.of("600")
        assert supplier_repo.get_by_id(supplier_id).find_item_by_id(1).stock == 60

    def test_restock_unaffordable(self):
        supplier_repo, supplier_id = _setup(stock=100)
        store_repo = FakeStoreRepository()
        store = OpenStoreHandler(store_repo).handle("Pepe's", "100")

        with pytest.raises(InsufficientFundsError):
            RestockFromSupplierHandler(store_repo, supplier_repo).handle(
                store.id, supplier_id, item_id=1, quantity=40, margin_rate="0.3"
            )

        assert supplier_repo.get_by_id(supplier_id).find_item_by_id(1).stock == 100

    def test_restock_missing_store(self):
        supplier_repo, supplier_id = _setup()
        with pytest.raises(EntityNotFoundError, match="Store #1 not found"):
            RestockFromSupplierHandler(FakeStoreRepository(), supplier_repo).handle(
                1, supplier_id, item_id=1, quantity=1, margin_rate="0.1"
            )


class _BrokenStoreRepository(FakeStoreRepository):
    """Accepts seeding, then fails every write once ``broken`` is set."""

    broken = False

    def save(self, store) -> None:
        if self.broken:
            raise OSError("disk full")
        super().save(store)


class _CountingSupplierRepository(FakeSupplierRepository):

    def __init__(self) -> None:
        super().__init__()
        self.saves = 0

    def save(self, supplier) -> None:
        self.saves += 1
        super().save(supplier)


class TestRestockPersistenceOrder:

    def test_failed_store_write_skips_supplier_write(self):
        supplier_repo = _CountingSupplierRepository()
        supplier = RegisterSupplierHandler(supplier_repo).handle(
            "Acme", "1 Main St", date(2019, 5, 17)
        )
        RegisterSupplierItemHandler(supplier_repo).handle(
            supplier_id=supplier.id, name="Water", price="10", item_id=1, stock=100
        )
        store_repo = _BrokenStoreRepository()
        store = OpenStoreHandler(store_repo).handle("Pepe's", "1000")
        saves_before = supplier_repo.saves
        store_repo.broken = True

        with pytest.raises(OSError):
            RestockFromSupplierHandler(store_repo, supplier_repo).handle(
                store.id, supplier.id, item_id=1, quantity=10, margin_rate="0.2"
            )

        assert supplier_repo.saves == saves_before
