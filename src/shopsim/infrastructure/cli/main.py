import logging
from pathlib import Path

import click

from shopsim.infrastructure.bootstrap import DATA_DIR_ENV
from shopsim.infrastructure.cli.store_commands import (
    store_buy,
    store_open,
    store_remove,
    store_restock,
    store_sell,
    store_show,
)
from shopsim.infrastructure.cli.supplier_commands import (
    supplier_add_item,
    supplier_buy,
    supplier_register,
    supplier_show,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help="Directory holding stores.json and suppliers.json.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """shopsim — Store and supplier inventory simulation"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = data_dir


@cli.group()
def store() -> None:
    """Manage stores and their inventory."""


@cli.group()
def supplier() -> None:
    """Manage suppliers and their catalogs."""


# Register subcommands
store.add_command(store_buy)
store.add_command(store_open)
store.add_command(store_remove)
store.add_command(store_restock)
store.add_command(store_sell)
store.add_command(store_show)
supplier.add_command(supplier_add_item)
supplier.add_command(supplier_buy)
supplier.add_command(supplier_register)
supplier.add_command(supplier_show)
