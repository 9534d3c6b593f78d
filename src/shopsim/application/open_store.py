"""Application service: Open Store use case."""

from __future__ import annotations

from shopsim.application.dto import StoreDTO, store_to_dto
from shopsim.domain.model.store import Store
from shopsim.domain.model.value_objects import Money
from shopsim.domain.repository.store_repository import StoreRepository


class OpenStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(self, name: str, initial_cash: str) -> StoreDTO:
        """Open a new store with an opening cash balance."""
        store = Store.open(name=name, initial_cash=Money.of(initial_cash))
        self._store_repo.save(store)
        return store_to_dto(store)
