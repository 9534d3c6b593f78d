"""Application service: Show Store use case (query)."""

from __future__ import annotations

from shopsim.application.dto import StoreDTO, store_to_dto
from shopsim.domain.exceptions import EntityNotFoundError
from shopsim.domain.repository.store_repository import StoreRepository


class ShowStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, store_id: int) -> StoreDTO:
        store = self._store_repo.get_by_id(store_id)
        if store is None:
            raise EntityNotFoundError(f"Store #{store_id} not found")
        return store_to_dto(store)
