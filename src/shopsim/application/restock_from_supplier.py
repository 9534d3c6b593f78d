"""Application service: Restock From Supplier use case.

Orchestrates the procurement domain service across the Store and
Supplier aggregates, persisting both only when the restock succeeds.
"""

from __future__ import annotations

from shopsim.application.dto import StockedItemDTO, stocked_item_to_dto
from shopsim.domain.exceptions import EntityNotFoundError
from shopsim.domain.model.value_objects import MarginRate
from shopsim.domain.repository.store_repository import StoreRepository
from shopsim.domain.repository.supplier_repository import SupplierRepository
from shopsim.domain.service.procurement_service import ProcurementService


class RestockFromSupplierHandler:

    def __init__(
        self,
        store_repo: StoreRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._store_repo = store_repo
        self._supplier_repo = supplier_repo

    def handle(
        self,
        store_id: int,
        supplier_id: int,
        item_id: int,
        quantity: int,
        margin_rate: str,
    ) -> StockedItemDTO:
        store = self._store_repo.get_by_id(store_id)
        if store is None:
            raise EntityNotFoundError(f"Store #{store_id} not found")
        supplier = self._supplier_repo.get_by_id(supplier_id)
        if supplier is None:
            raise EntityNotFoundError(f"Supplier #{supplier_id} not found")

        svc = ProcurementService()
        stocked = svc.restock(
            store, supplier, item_id, quantity, MarginRate.of(margin_rate)
        )

        # Store is saved first so a failed write never consumes supplier stock.
        self._store_repo.save(store)
        self._supplier_repo.save(supplier)
        return stocked_item_to_dto(stocked)
