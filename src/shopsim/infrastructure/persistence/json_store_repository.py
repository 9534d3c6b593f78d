"""JSON-file-backed implementation of StoreRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from shopsim.domain.model.catalog import CatalogItem
from shopsim.domain.model.store import StockedItem, Store
from shopsim.domain.model.value_objects import MarginRate, Money
from shopsim.domain.repository.store_repository import StoreRepository


class JsonStoreRepository(StoreRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- StoreRepository interface --------------------------------------------

    def next_id(self) -> int:
        stores = self._load_raw()
        if not stores:
            return 1
        return max(s["id"] for s in stores) + 1

    def get_by_id(self, store_id: int) -> Store | None:
        for raw in self._load_raw():
            if raw["id"] == store_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Store]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, store: Store) -> None:
        stores = self._load_raw()

        if store.id is None:
            store.id = self.next_id()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(stores):
            if raw["id"] == store.id:
                stores[i] = self._to_raw(store)
                replaced = True
                break
        if not replaced:
            stores.append(self._to_raw(store))

        self._persist_raw(stores)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(store: Store) -> dict:
        return {
            "id": store.id,
            "name": store.name,
            "cash_balance": str(store.cash_balance.amount),
            "currency": store.cash_balance.currency,
            "items": [
                {
                    "id": item.id,
                    "name": item.name,
                    "description": item.description,
                    "price": str(item.price.amount),
                    "quantity_on_hand": item.quantity_on_hand,
                    "margin_rate": str(item.margin_rate.value),
                }
                for item in store.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Store:
        currency = raw.get("currency", "USD")
        items = [
            StockedItem(
                catalog=CatalogItem(
                    name=i["name"],
                    price=Money(Decimal(i["price"]), currency),
                    id=i["id"],
                    description=i.get("description", ""),
                ),
                quantity_on_hand=i["quantity_on_hand"],
                margin_rate=MarginRate(Decimal(i["margin_rate"])),
            )
            for i in raw["items"]
        ]
        return Store(
            id=raw["id"],
            name=raw["name"],
            cash_balance=Money(Decimal(raw["cash_balance"]), currency),
            items=items,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, stores: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(stores, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
