"""CLI commands for the Supplier aggregate."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click

from shopsim.application.register_supplier import RegisterSupplierHandler
from shopsim.application.register_supplier_item import RegisterSupplierItemHandler
from shopsim.application.show_supplier import ShowSupplierHandler
from shopsim.application.supplier_purchase import SupplierPurchaseHandler
from shopsim.domain.exceptions import DomainException
from shopsim.infrastructure.bootstrap import supplier_repository


@click.command("register")
@click.option("--name", required=True, help="Supplier name.")
@click.option("--address", required=True, help="Supplier address.")
@click.option(
    "--founded",
    required=True,
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Founding date (YYYY-MM-DD).",
)
@click.pass_obj
def supplier_register(
    data_dir: Path | None, name: str, address: str, founded: datetime
) -> None:
    """Register a new supplier."""
    handler = RegisterSupplierHandler(supplier_repo=supplier_repository(data_dir))

    try:
        dto = handler.handle(name=name, address=address, founded_date=founded.date())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier #{dto.id} '{dto.name}' registered")


@click.command("add-item")
@click.option("--supplier", "supplier_id", required=True, type=int, help="Supplier ID.")
@click.option("--item-id", required=True, type=int, help="Item ID.")
@click.option("--name", required=True, help="Item name.")
@click.option("--price", required=True, help="Unit price (e.g. 10.00).")
@click.option("--description", default="", help="Item description.")
@click.option("--stock", type=int, default=None, help="Units available (omit for unlimited).")
@click.pass_obj
def supplier_add_item(
    data_dir: Path | None,
    supplier_id: int,
    item_id: int,
    name: str,
    price: str,
    description: str,
    stock: int | None,
) -> None:
    """Add an item to a supplier's catalog."""
    handler = RegisterSupplierItemHandler(supplier_repo=supplier_repository(data_dir))

    try:
        dto = handler.handle(
            supplier_id=supplier_id,
            name=name,
            price=price,
            item_id=item_id,
            description=description,
            stock=stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {dto.id} '{dto.name}' added to supplier #{supplier_id} at {dto.unit_price}")


@click.command("show")
@click.option("--id", "supplier_id", required=True, type=int, help="Supplier ID to display.")
@click.pass_obj
def supplier_show(data_dir: Path | None, supplier_id: int) -> None:
    """Show a supplier's catalog."""
    handler = ShowSupplierHandler(supplier_repo=supplier_repository(data_dir))

    try:
        dto = handler.handle(supplier_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier #{dto.id}  {dto.name}")
    click.echo(f"Address: {dto.address}")
    click.echo(f"Founded: {dto.founded_date}")
    click.echo()

    if not dto.items:
        click.echo("  No items registered.")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'Price':>10} {'Stock':>8}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        stock = "-" if item.stock is None else str(item.stock)
        click.echo(f"  {item.id:<6} {item.name:<20} {item.unit_price:>10} {stock:>8}")


@click.command("buy")
@click.option("--supplier", "supplier_id", required=True, type=int, help="Supplier ID.")
@click.option("--item-id", required=True, type=int, help="Item ID.")
@click.option("--quantity", required=True, type=int, help="Units to buy.")
@click.pass_obj
def supplier_buy(data_dir: Path | None, supplier_id: int, item_id: int, quantity: int) -> None:
    """Price a purchase from a supplier (decrements tracked stock)."""
    handler = SupplierPurchaseHandler(supplier_repo=supplier_repository(data_dir))

    try:
        dto = handler.handle(supplier_id=supplier_id, item_id=item_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Bought {dto.quantity} x {dto.item_name} for {dto.final_price}")
