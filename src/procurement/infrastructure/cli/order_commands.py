"""CLI commands for the PurchaseOrder aggregate."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from procurement.application.add_item import AddItemHandler
from procurement.application.approve_order import ApproveOrderHandler
from procurement.application.cancel_order import CancelOrderHandler
from procurement.application.complete_order import CompleteOrderHandler
from procurement.application.create_order import CreatePurchaseOrderHandler
from procurement.application.dto import PurchaseOrderDTO
from procurement.application.list_orders import ListOrdersHandler
from procurement.application.ship_order import ShipOrderHandler
from procurement.application.show_order import ShowOrderHandler
from procurement.application.submit_order import SubmitOrderHandler
from procurement.domain.exceptions import DomainException
from procurement.infrastructure.bootstrap import order_repository, supplier_repository


def _parse_price(raw: str) -> Decimal:
    try:
        return Decimal(raw.strip())
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price '{raw}'.", param_hint="--price")


def _display_order(dto: PurchaseOrderDTO) -> None:
    """Shared formatting for displaying a purchase order."""
    click.echo(f"Purchase order {dto.id}  (status={dto.status})")
    click.echo(f"Supplier: {dto.supplier_id}")
    click.echo(f"Currency: {dto.currency}")
    click.echo(f"Ordered:  {dto.order_date}")
    click.echo()

    if not dto.items:
        click.echo("  (no items)")
        return

    click.echo(f"  {'Product':<36} {'Qty':>5} {'Price':>14} {'Subtotal':>14}")
    click.echo(f"  {'-'*72}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<36} {item.quantity:>5} "
            f"{item.unit_price:>14} {item.subtotal:>14}"
        )
    click.echo(f"  {'-'*72}")
    click.echo(f"  {'Order Total':<42} {dto.total:>30}")


@click.command("create")
@click.option("--supplier", "supplier_id", required=True, help="Supplier ID.")
@click.option("--currency", required=True, help="Currency code (USD, EUR, GBP, JPY).")
@click.option("--date", "order_date", default=None, help="Order date as ISO-8601 (default: now).")
def order_create(supplier_id: str, currency: str, order_date: str | None) -> None:
    """Open a new draft purchase order."""
    handler = CreatePurchaseOrderHandler(
        order_repo=order_repository(),
        supplier_repo=supplier_repository(),
    )

    try:
        dto = handler.handle(
            supplier_id=supplier_id,
            currency=currency.upper(),
            order_date=order_date,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase order {dto.id} created  (status={dto.status})")


@click.command("add-item")
@click.option("--id", "order_id", required=True, help="Purchase order ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="Quantity (1-1000).")
@click.option("--price", required=True, help="Unit price (e.g. 10.00).")
def order_add_item(order_id: str, product_id: str, quantity: int, price: str) -> None:
    """Add a line item to a draft purchase order."""
    unit_price = _parse_price(price)
    handler = AddItemHandler(order_repo=order_repository())

    try:
        dto = handler.handle(
            order_id=order_id,
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item added. Order now has {len(dto.items)} item(s), total {dto.total}")


@click.command("submit")
@click.option("--id", "order_id", required=True, help="Purchase order ID.")
def order_submit(order_id: str) -> None:
    """Submit a draft purchase order for approval."""
    handler = SubmitOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase order {order_id} submitted.")


@click.command("approve")
@click.option("--id", "order_id", required=True, help="Purchase order ID.")
def order_approve(order_id: str) -> None:
    """Approve a submitted purchase order."""
    handler = ApproveOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase order {order_id} approved.")


@click.command("ship")
@click.option("--id", "order_id", required=True, help="Purchase order ID.")
def order_ship(order_id: str) -> None:
    """Mark an approved purchase order as shipped."""
    handler = ShipOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase order {order_id} shipped.")


@click.command("complete")
@click.option("--id", "order_id", required=True, help="Purchase order ID.")
def order_complete(order_id: str) -> None:
    """Complete a shipped purchase order (records the supplier's last total)."""
    handler = CompleteOrderHandler(
        order_repo=order_repository(),
        supplier_repo=supplier_repository(),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase order {order_id} completed.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, help="Purchase order ID.")
def order_cancel(order_id: str) -> None:
    """Cancel a purchase order that has not been completed."""
    handler = CancelOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase order {order_id} cancelled.")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Purchase order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing purchase order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--status", default=None, help="Only show orders in this state (e.g. Draft).")
def order_list(status: str | None) -> None:
    """List purchase orders."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No purchase orders found.")
        return

    click.echo(f"{'ID':<36}  {'Status':<10} {'Items':>5} {'Total':>16}")
    click.echo("-" * 72)
    for dto in orders:
        click.echo(
            f"{dto.id:<36}  {dto.status:<10} {len(dto.items):>5} {dto.total or '-':>16}"
        )
