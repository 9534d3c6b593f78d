"""Application service: Show Supplier use case (query)."""

from __future__ import annotations

from shopsim.application.dto import SupplierDTO, supplier_to_dto
from shopsim.domain.exceptions import EntityNotFoundError
from shopsim.domain.repository.supplier_repository import SupplierRepository


class ShowSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self, supplier_id: int) -> SupplierDTO:
        supplier = self._supplier_repo.get_by_id(supplier_id)
        if supplier is None:
            raise EntityNotFoundError(f"Supplier #{supplier_id} not found")
        return supplier_to_dto(supplier)
