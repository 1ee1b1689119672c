import logging
from pathlib import Path

import click

from procurement.infrastructure import bootstrap
from procurement.infrastructure.cli.order_commands import (
    order_add_item,
    order_approve,
    order_cancel,
    order_complete,
    order_create,
    order_list,
    order_ship,
    order_show,
    order_submit,
)
from procurement.infrastructure.cli.supplier_commands import supplier_add, supplier_list

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=bootstrap.DATA_DIR_ENV,
    default=None,
    help="Directory holding the JSON data files.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(data_dir: Path | None, verbose: bool) -> None:
    """Procurement: purchase orders and suppliers"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    bootstrap.configure(data_dir)


@cli.group()
def order() -> None:
    """Manage purchase orders."""


@cli.group()
def supplier() -> None:
    """Manage suppliers."""


# Register subcommands
order.add_command(order_add_item)
order.add_command(order_approve)
order.add_command(order_cancel)
order.add_command(order_complete)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_ship)
order.add_command(order_show)
order.add_command(order_submit)
supplier.add_command(supplier_add)
supplier.add_command(supplier_list)
