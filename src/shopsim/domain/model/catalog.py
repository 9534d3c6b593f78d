"""CatalogItem value object.

A product definition independent of any store's inventory or supplier.
Stocked and supplier items embed one by value instead of inheriting from it.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopsim.domain.exceptions import ValidationError
from shopsim.domain.model.value_objects import Money


@dataclass(frozen=True)
class CatalogItem:

    name: str
    price: Money
    id: int
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Item name is required")

    def describe(self) -> str:
        return f"{self.name} is {self.description} and costs {self.price}"
