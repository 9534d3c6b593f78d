"""Application service: Register Supplier Item use case."""

from __future__ import annotations

from shopsim.application.dto import SupplierItemDTO, supplier_item_to_dto
from shopsim.domain.exceptions import EntityNotFoundError
from shopsim.domain.model.value_objects import Money
from shopsim.domain.repository.supplier_repository import SupplierRepository


class RegisterSupplierItemHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(
        self,
        supplier_id: int,
        name: str,
        price: str,
        item_id: int,
        description: str = "",
        stock: int | None = None,
    ) -> SupplierItemDTO:
        """Add an item to a supplier's catalog.

        The item is tagged with the owning supplier's ID.
        """
        supplier = self._supplier_repo.get_by_id(supplier_id)
        if supplier is None:
            raise EntityNotFoundError(f"Supplier #{supplier_id} not found")

        item = supplier.register_item(
            name=name,
            price=Money.of(price),
            item_id=item_id,
            description=description,
            supplier_id=supplier_id,
            stock=stock,
        )
        self._supplier_repo.save(supplier)
        return supplier_item_to_dto(item)
