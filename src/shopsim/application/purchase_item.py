"""Application service: Purchase Item use case.

The store takes a catalog item into inventory, paying for it out of
its cash balance.
"""

from __future__ import annotations

from shopsim.application.dto import StockedItemDTO, stocked_item_to_dto
from shopsim.domain.exceptions import EntityNotFoundError
from shopsim.domain.model.catalog import CatalogItem
from shopsim.domain.model.value_objects import MarginRate, Money
from shopsim.domain.repository.store_repository import StoreRepository


class PurchaseItemHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(
        self,
        store_id: int,
        name: str,
        price: str,
        item_id: int,
        quantity: int,
        margin_rate: str,
        description: str = "",
    ) -> StockedItemDTO:
        store = self._store_repo.get_by_id(store_id)
        if store is None:
            raise EntityNotFoundError(f"Store #{store_id} not found")

        item = CatalogItem(
            name=name.strip(), price=Money.of(price), id=item_id, description=description
        )
        stocked = store.purchase(item, quantity, MarginRate.of(margin_rate))
        self._store_repo.save(store)
        return stocked_item_to_dto(stocked)
