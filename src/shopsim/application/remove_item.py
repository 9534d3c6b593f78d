"""Application service: Remove Item use case."""

from __future__ import annotations

from shopsim.domain.exceptions import EntityNotFoundError
from shopsim.domain.repository.store_repository import StoreRepository


class RemoveItemHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, store_id: int, item_id: int) -> None:
        store = self._store_repo.get_by_id(store_id)
        if store is None:
            raise EntityNotFoundError(f"Store #{store_id} not found")

        if not store.remove_by_id(item_id):
            raise EntityNotFoundError(
                f"Item {item_id} not found in store #{store_id}"
            )
        self._store_repo.save(store)
