"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from shopsim.domain.model.store import Store
from shopsim.domain.model.supplier import Supplier
from shopsim.domain.repository.store_repository import StoreRepository
from shopsim.domain.repository.supplier_repository import SupplierRepository


class FakeStoreRepository(StoreRepository):

    def __init__(self, stores: list[Store] | None = None) -> None:
        self._store: dict[int, Store] = {}
        self._next_id = 1
        for s in stores or []:
            self.save(s)

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, store_id: int) -> Store | None:
        return self._store.get(store_id)

    def list_all(self) -> list[Store]:
        return list(self._store.values())

    def save(self, store: Store) -> None:
        if store.id is None:
            store.id = self._next_id
        self._next_id = max(self._next_id, store.id + 1)
        self._store[store.id] = store


class FakeSupplierRepository(SupplierRepository):

    def __init__(self, suppliers: list[Supplier] | None = None) -> None:
        self._store: dict[int, Supplier] = {}
        self._next_id = 1
        for s in suppliers or []:
            self.save(s)

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, supplier_id: int) -> Supplier | None:
        return self._store.get(supplier_id)

    def list_all(self) -> list[Supplier]:
        return list(self._store.values())

    def save(self, supplier: Supplier) -> None:
        if supplier.id is None:
            supplier.id = self._next_id
        self._next_id = max(self._next_id, supplier.id + 1)
        self._store[supplier.id] = supplier
