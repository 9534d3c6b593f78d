"""Domain service: Procurement.

Restocking a store from a supplier touches two aggregates. The
validate-then-mutate approach guarantees that a rejected restock leaves
both the supplier's stock and the store's cash untouched.
"""

from __future__ import annotations

import logging

from shopsim.domain.exceptions import (
    EntityNotFoundError,
    InsufficientFundsError,
    InsufficientStockError,
)
from shopsim.domain.model.store import StockedItem, Store
from shopsim.domain.model.supplier import Supplier
from shopsim.domain.model.value_objects import MarginRate, Quantity

LOGGER = logging.getLogger(__name__)


class ProcurementService:

    def restock(
        self,
        store: Store,
        supplier: Supplier,
        item_id: int,
        quantity: int,
        margin_rate: MarginRate,
    ) -> StockedItem:
        """Buy from the supplier and take the goods into the store.

        Phase 1 — validate: the item exists, the supplier has the stock,
                  and the store can pay for it.
        Phase 2 — mutate: supplier purchase, then store intake.
        """
        qty = Quantity(quantity).value

        # Phase 1: validate
        item = supplier.find_item_by_id(item_id)
        if item is None:
            LOGGER.warning(
                "Supplier %r has no item with id %d to restock %r",
                supplier.name, item_id, store.name,
            )
            raise EntityNotFoundError(
                f"Supplier '{supplier.name}' has no item with id {item_id}"
            )
        if not item.has_stock_for(qty):
            LOGGER.warning(
                "Supplier %r cannot restock %d x %s: only %d in stock",
                supplier.name, qty, item.name, item.stock,
            )
            raise InsufficientStockError(
                f"Supplier '{supplier.name}' has only {item.stock} of {item.name}"
            )
        quote = store.quote_purchase(item.catalog, qty)
        if not quote.can_purchase:
            LOGGER.warning(
                "Store %r cannot afford restock of %d x %s: cost %s exceeds balance %s",
                store.name, qty, item.name, quote.total, store.cash_balance,
            )
            raise InsufficientFundsError(
                f"Store '{store.name}' cannot afford {qty} x {item.name} "
                f"({quote.total} > {store.cash_balance})"
            )

        # Phase 2: mutate
        receipt = supplier.purchase(item_id, qty)
        stocked = store.purchase(receipt.purchased_item.catalog, qty, margin_rate)
        LOGGER.info(
            "Restocked %r with %d x %s from %r",
            store.name, qty, item.name, supplier.name,
        )
        return stocked
