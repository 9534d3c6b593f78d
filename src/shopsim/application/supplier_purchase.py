"""Application service: Supplier Purchase use case.

Prices a purchase from a supplier and decrements its tracked stock.
"""

from __future__ import annotations

from shopsim.application.dto import SupplierPurchaseDTO
from shopsim.domain.exceptions import EntityNotFoundError
from shopsim.domain.repository.supplier_repository import SupplierRepository


class SupplierPurchaseHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self, supplier_id: int, item_id: int, quantity: int) -> SupplierPurchaseDTO:
        supplier = self._supplier_repo.get_by_id(supplier_id)
        if supplier is None:
            raise EntityNotFoundError(f"Supplier #{supplier_id} not found")

        receipt = supplier.purchase(item_id, quantity)
        self._supplier_repo.save(supplier)
        return SupplierPurchaseDTO(
            item_name=receipt.purchased_item.name,
            quantity=receipt.quantity,
            final_price=str(receipt.final_price),
        )
