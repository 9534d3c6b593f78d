"""Store aggregate — cash balance plus the stocked items it owns.

Every balance-affecting operation checks sufficiency first and only
mutates once the check has passed, so a rejected call leaves the
store exactly as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from shopsim.domain.exceptions import (
    EntityNotFoundError,
    InsufficientFundsError,
    InsufficientStockError,
    ValidationError,
)
from shopsim.domain.model.catalog import CatalogItem
from shopsim.domain.model.value_objects import MarginRate, Money, Quantity

LOGGER = logging.getLogger(__name__)


@dataclass
class StockedItem:
    """A catalog item as held by one store, with quantity and margin.

    Built by ``Store.add_item``; repositories may also reconstitute one
    directly from persisted data.
    """

    catalog: CatalogItem
    quantity_on_hand: int
    margin_rate: MarginRate

    def __post_init__(self) -> None:
        if self.quantity_on_hand < 0:
            raise ValidationError("Quantity on hand cannot be negative")

    @property
    def id(self) -> int:
        return self.catalog.id

    @property
    def name(self) -> str:
        return self.catalog.name

    @property
    def price(self) -> Money:
        return self.catalog.price

    @property
    def description(self) -> str:
        return self.catalog.description

    @property
    def unit_profit(self) -> Money:
        return self.price * self.margin_rate.value

    def set_stock(self, new_stock: int) -> None:
        if new_stock < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {new_stock}"
            )
        self.quantity_on_hand = new_stock


@dataclass(frozen=True)
class PurchaseQuote:
    """Result of asking whether the store can afford an intake."""

    total: Money
    can_purchase: bool


@dataclass
class Store:
    """Aggregate root for a shop's inventory and cash.

    ``items`` keeps insertion order; ids are not forced to be unique and
    lookups return the first match.
    """

    name: str
    id: int | None
    cash_balance: Money
    items: list[StockedItem] = field(default_factory=list)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def open(name: str, initial_cash: Money) -> Store:
        """Create a new store with an opening balance."""
        if not name or not name.strip():
            raise ValidationError("Store name is required")
        return Store(id=None, name=name.strip(), cash_balance=initial_cash)

    # --- Queries --------------------------------------------------------------

    def find_item_by_id(self, item_id: int) -> StockedItem | None:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def quote_purchase(self, item: CatalogItem, quantity: int) -> PurchaseQuote:
        total = item.price * Quantity(quantity).value
        return PurchaseQuote(total=total, can_purchase=total <= self.cash_balance)

    @property
    def inventory_value(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.price * item.quantity_on_hand
        return result

    # --- Commands -------------------------------------------------------------

    def purchase(
        self, item: CatalogItem, quantity: int, margin_rate: MarginRate
    ) -> StockedItem:
        """Buy ``quantity`` units of a catalog item into inventory.

        Raises InsufficientFundsError, without touching items or cash,
        when the cost exceeds the cash balance.
        """
        quote = self.quote_purchase(item, quantity)
        if not quote.can_purchase:
            LOGGER.warning(
                "Store %r cannot buy %d x %s: cost %s exceeds balance %s",
                self.name, quantity, item.name, quote.total, self.cash_balance,
            )
            raise InsufficientFundsError(
                f"Cannot purchase {quantity} x {item.name}: "
                f"cost {quote.total} exceeds balance {self.cash_balance}"
            )
        stocked = self.add_item(item, quantity, margin_rate)
        self.spend(quote.total)
        LOGGER.info(
            "Store %r bought %d x %s for %s", self.name, quantity, item.name, quote.total
        )
        return stocked

    def add_item(
        self, item: CatalogItem, quantity: int, margin_rate: MarginRate
    ) -> StockedItem:
        """Append a stocked copy of ``item`` without touching cash."""
        stocked = StockedItem(
            catalog=item, quantity_on_hand=quantity, margin_rate=margin_rate
        )
        self.items.append(stocked)
        return stocked

    def spend(self, amount: Money) -> None:
        if amount > self.cash_balance:
            LOGGER.warning(
                "Store %r cannot spend %s: balance is %s",
                self.name, amount, self.cash_balance,
            )
            raise InsufficientFundsError(
                f"Cannot spend {amount}: balance is {self.cash_balance}"
            )
        self.cash_balance = self.cash_balance - amount

    def adjust_stock(self, item: StockedItem, quantity: int) -> bool:
        """Decrement stock if enough is on hand; report whether it happened."""
        if quantity < 0:
            raise ValidationError(
                f"Cannot decrement {item.name} by a negative quantity ({quantity})"
            )
        if quantity <= item.quantity_on_hand:
            item.set_stock(item.quantity_on_hand - quantity)
            return True
        LOGGER.warning(
            "Cannot decrement %s by %d: only %d on hand",
            item.name, quantity, item.quantity_on_hand,
        )
        return False

    def remove_by_id(self, item_id: int) -> bool:
        for index, item in enumerate(self.items):
            if item.id == item_id:
                del self.items[index]
                return True
        return False

    def sell(self, item_id: int, quantity: int) -> Money:
        """Sell units to a customer and return the revenue credited.

        Stock is checked and decremented before any cash is credited;
        there is no partial fulfillment.
        """
        qty = Quantity(quantity).value
        item = self.find_item_by_id(item_id)
        if item is None:
            LOGGER.warning("Store %r has no item with id %d", self.name, item_id)
            raise EntityNotFoundError(f"Product not found: id {item_id}")

        if not self.adjust_stock(item, qty):
            if item.quantity_on_hand == 0:
                raise InsufficientStockError(f"{item.name} is out of stock")
            raise InsufficientStockError(
                f"Insufficient stock for {item.name} "
                f"(need {qty}, have {item.quantity_on_hand})"
            )

        revenue = item.unit_profit * qty
        self.cash_balance = self.cash_balance + revenue
        LOGGER.info("Store %r sold %d x %s for %s", self.name, qty, item.name, revenue)
        return revenue
