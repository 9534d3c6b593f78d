"""CLI commands for the Store aggregate."""

from __future__ import annotations

from pathlib import Path

import click

from shopsim.application.dto import StoreDTO
from shopsim.application.open_store import OpenStoreHandler
from shopsim.application.purchase_item import PurchaseItemHandler
from shopsim.application.remove_item import RemoveItemHandler
from shopsim.application.restock_from_supplier import RestockFromSupplierHandler
from shopsim.application.sell_item import SellItemHandler
from shopsim.application.show_store import ShowStoreHandler
from shopsim.domain.exceptions import DomainException
from shopsim.infrastructure.bootstrap import store_repository, supplier_repository


def _display_store(dto: StoreDTO) -> None:
    click.echo(f"Store #{dto.id}  {dto.name}")
    click.echo(f"Cash:      {dto.cash_balance}")
    click.echo(f"Inventory: {dto.inventory_value}")
    click.echo()

    if not dto.items:
        click.echo("  No items in stock.")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'On hand':>8} {'Price':>10} {'Margin':>7}")
    click.echo(f"  {'-'*55}")
    for item in dto.items:
        click.echo(
            f"  {item.id:<6} {item.name:<20} {item.quantity_on_hand:>8} "
            f"{item.unit_price:>10} {item.margin_rate:>7}"
        )


@click.command("open")
@click.option("--name", required=True, help="Store name.")
@click.option("--cash", required=True, help="Opening cash balance (e.g. 1000.00).")
@click.pass_obj
def store_open(data_dir: Path | None, name: str, cash: str) -> None:
    """Open a new store."""
    handler = OpenStoreHandler(store_repo=store_repository(data_dir))

    try:
        dto = handler.handle(name=name, initial_cash=cash)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{dto.id} '{dto.name}' opened with {dto.cash_balance}")


@click.command("show")
@click.option("--id", "store_id", required=True, type=int, help="Store ID to display.")
@click.pass_obj
def store_show(data_dir: Path | None, store_id: int) -> None:
    """Show a store's cash and inventory."""
    handler = ShowStoreHandler(store_repo=store_repository(data_dir))

    try:
        dto = handler.handle(store_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_store(dto)


@click.command("buy")
@click.option("--store", "store_id", required=True, type=int, help="Store ID.")
@click.option("--item-id", required=True, type=int, help="Catalog item ID.")
@click.option("--name", required=True, help="Item name.")
@click.option("--price", required=True, help="Unit price (e.g. 10.00).")
@click.option("--quantity", required=True, type=int, help="Units to buy.")
@click.option("--margin", required=True, help="Margin rate (e.g. 0.2).")
@click.option("--description", default="", help="Item description.")
@click.pass_obj
def store_buy(
    data_dir: Path | None,
    store_id: int,
    item_id: int,
    name: str,
    price: str,
    quantity: int,
    margin: str,
    description: str,
) -> None:
    """Buy a catalog item into a store's inventory."""
    handler = PurchaseItemHandler(store_repo=store_repository(data_dir))

    try:
        dto = handler.handle(
            store_id=store_id,
            name=name,
            price=price,
            item_id=item_id,
            quantity=quantity,
            margin_rate=margin,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Bought {dto.quantity_on_hand} x {dto.name} at {dto.unit_price}")


@click.command("sell")
@click.option("--store", "store_id", required=True, type=int, help="Store ID.")
@click.option("--item-id", required=True, type=int, help="Stocked item ID.")
@click.option("--quantity", required=True, type=int, help="Units to sell.")
@click.pass_obj
def store_sell(data_dir: Path | None, store_id: int, item_id: int, quantity: int) -> None:
    """Sell units of a stocked item."""
    handler = SellItemHandler(store_repo=store_repository(data_dir))

    try:
        dto = handler.handle(store_id=store_id, item_id=item_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Sold {dto.quantity} x {dto.item_name} for {dto.revenue} "
        f"(balance {dto.cash_balance}, {dto.remaining_stock} left)"
    )


@click.command("remove")
@click.option("--store", "store_id", required=True, type=int, help="Store ID.")
@click.option("--item-id", required=True, type=int, help="Stocked item ID.")
@click.pass_obj
def store_remove(data_dir: Path | None, store_id: int, item_id: int) -> None:
    """Remove an item from a store's inventory."""
    handler = RemoveItemHandler(store_repo=store_repository(data_dir))

    try:
        handler.handle(store_id=store_id, item_id=item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item_id} removed from store #{store_id}.")


@click.command("restock")
@click.option("--store", "store_id", required=True, type=int, help="Store ID.")
@click.option("--supplier", "supplier_id", required=True, type=int, help="Supplier ID.")
@click.option("--item-id", required=True, type=int, help="Supplier item ID.")
@click.option("--quantity", required=True, type=int, help="Units to buy.")
@click.option("--margin", required=True, help="Margin rate (e.g. 0.2).")
@click.pass_obj
def store_restock(
    data_dir: Path | None,
    store_id: int,
    supplier_id: int,
    item_id: int,
    quantity: int,
    margin: str,
) -> None:
    """Buy from a supplier straight into a store's inventory."""
    handler = RestockFromSupplierHandler(
        store_repo=store_repository(data_dir),
        supplier_repo=supplier_repository(data_dir),
    )

    try:
        dto = handler.handle(
            store_id=store_id,
            supplier_id=supplier_id,
            item_id=item_id,
            quantity=quantity,
            margin_rate=margin,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Store #{store_id} restocked with {dto.quantity_on_hand} x {dto.name}")
