"""Application service: Sell Item use case."""

from __future__ import annotations

from shopsim.application.dto import SaleDTO
from shopsim.domain.exceptions import EntityNotFoundError
from shopsim.domain.repository.store_repository import StoreRepository


class SellItemHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, store_id: int, item_id: int, quantity: int) -> SaleDTO:
        """Sell units of a stocked item and persist the new balance.

        Nothing is saved when the sale is rejected.
        """
        store = self._store_repo.get_by_id(store_id)
        if store is None:
            raise EntityNotFoundError(f"Store #{store_id} not found")

        revenue = store.sell(item_id, quantity)
        self._store_repo.save(store)

        item = store.find_item_by_id(item_id)
        return SaleDTO(
            item_name=item.name,  # type: ignore[union-attr]
            quantity=quantity,
            revenue=str(revenue),
            cash_balance=str(store.cash_balance),
            remaining_stock=item.quantity_on_hand,  # type: ignore[union-attr]
        )
