"""Unit tests for the CatalogItem value object."""

import dataclasses

import pytest

from shopsim.domain.exceptions import ValidationError
from shopsim.domain.model.catalog import CatalogItem
from shopsim.domain.model.value_objects import Money


def test_describe():
    item = CatalogItem(name="Water", price=Money.of("10"), id=1, description="drinkable")
    assert item.describe() == "Water is drinkable and costs $10.00"


def test_blank_name_rejected():
    with pytest.raises(ValidationError, match="name is required"):
        CatalogItem(name="  ", price=Money.of("1"), id=1)


def test_is_immutable():
    item = CatalogItem(name="Water", price=Money.of("10"), id=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.price = Money.of("20")  # type: ignore[misc]

