"""JSON-file-backed implementation of SupplierRepository."""

from __future__ import annotations

import json
from datetime import date
from decimal import Decimal
from pathlib import Path

from shopsim.domain.model.catalog import CatalogItem
from shopsim.domain.model.supplier import Supplier, SupplierItem
from shopsim.domain.model.value_objects import Money
from shopsim.domain.repository.supplier_repository import SupplierRepository


class JsonSupplierRepository(SupplierRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- SupplierRepository interface -----------------------------------------

    def next_id(self) -> int:
        suppliers = self._load_raw()
        if not suppliers:
            return 1
        return max(s["id"] for s in suppliers) + 1

    def get_by_id(self, supplier_id: int) -> Supplier | None:
        for raw in self._load_raw():
            if raw["id"] == supplier_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Supplier]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, supplier: Supplier) -> None:
        suppliers = self._load_raw()

        if supplier.id is None:
            supplier.id = self.next_id()

        replaced = False
        for i, raw in enumerate(suppliers):
            if raw["id"] == supplier.id:
                suppliers[i] = self._to_raw(supplier)
                replaced = True
                break
        if not replaced:
            suppliers.append(self._to_raw(supplier))

        self._persist_raw(suppliers)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(supplier: Supplier) -> dict:
        return {
            "id": supplier.id,
            "name": supplier.name,
            "address": supplier.address,
            "founded_date": supplier.founded_date.isoformat(),
            "items": [
                {
                    "id": item.id,
                    "name": item.name,
                    "description": item.description,
                    "price": str(item.price.amount),
                    "currency": item.price.currency,
                    "supplier_id": item.supplier_id,
                    "stock": item.stock,
                }
                for item in supplier.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Supplier:
        items = [
            SupplierItem(
                catalog=CatalogItem(
                    name=i["name"],
                    price=Money(Decimal(i["price"]), i.get("currency", "USD")),
                    id=i["id"],
                    description=i.get("description", ""),
                ),
                supplier_id=i["supplier_id"],
                stock=i.get("stock"),
            )
            for i in raw["items"]
        ]
        return Supplier(
            id=raw["id"],
            name=raw["name"],
            address=raw["address"],
            founded_date=date.fromisoformat(raw["founded_date"]),
            items=items,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, suppliers: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(suppliers, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
