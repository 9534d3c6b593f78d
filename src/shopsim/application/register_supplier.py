"""Application service: Register Supplier use case."""

from __future__ import annotations

from datetime import date

from shopsim.application.dto import SupplierDTO, supplier_to_dto
from shopsim.domain.model.supplier import Supplier
from shopsim.domain.repository.supplier_repository import SupplierRepository


class RegisterSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self, name: str, address: str, founded_date: date) -> SupplierDTO:
        supplier = Supplier.register(
            name=name, address=address, founded_date=founded_date
        )
        self._supplier_repo.save(supplier)
        return supplier_to_dto(supplier)
