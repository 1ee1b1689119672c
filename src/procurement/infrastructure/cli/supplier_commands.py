"""CLI commands for the Supplier entity."""

from __future__ import annotations

import click

from procurement.application.dto import supplier_to_dto
from procurement.application.register_supplier import RegisterSupplierHandler
from procurement.domain.exceptions import DomainException
from procurement.infrastructure.bootstrap import supplier_repository


@click.command("add")
@click.option("--name", required=True, help="Supplier name.")
@click.option("--email", default=None, help="Contact email address.")
def supplier_add(name: str, email: str | None) -> None:
    """Register a new supplier."""
    handler = RegisterSupplierHandler(supplier_repo=supplier_repository())

    try:
        dto = handler.handle(name=name, contact_email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier '{dto.name}' registered with ID {dto.id}")


@click.command("list")
def supplier_list() -> None:
    """List all registered suppliers."""
    suppliers = [supplier_to_dto(s) for s in supplier_repository().list_all()]

    if not suppliers:
        click.echo("No suppliers found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'Last order':>16}")
    click.echo("-" * 78)
    for s in suppliers:
        click.echo(f"{s.id:<36}  {s.name:<24} {s.last_order_total or '-':>16}")
