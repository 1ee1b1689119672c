"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from procurement.domain.model.purchase_order import PurchaseOrder
from procurement.domain.model.supplier import Supplier


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    quantity: int
    unit_price: str  # formatted, e.g. "10.00 USD"
    subtotal: str


@dataclass(frozen=True)
class PurchaseOrderDTO:
    """Output: a complete purchase order as displayed to the user."""

    id: str
    supplier_id: str
    currency: str
    status: str
    order_date: str  # ISO-8601
    items: list[OrderItemDTO]
    total: str | None  # None while the order has no items


@dataclass(frozen=True)
class SupplierDTO:
    """Output: a supplier as displayed to the user."""

    id: str
    name: str
    contact_email: str | None
    last_order_total: str | None


# --- Mapping ------------------------------------------------------------------


def order_to_dto(order: PurchaseOrder) -> PurchaseOrderDTO:
    items = order.items
    return PurchaseOrderDTO(
        id=order.id,
        supplier_id=order.supplier_id.value,
        currency=order.currency.code,
        status=order.state.value,
        order_date=order.order_date.isoformat(),
        items=[
            OrderItemDTO(
                product_id=item.product_id.value,
                quantity=item.quantity,
                unit_price=str(item.unit_price),
                subtotal=str(item.calculate_subtotal()),
            )
            for item in items
        ],
        total=str(order.calculate_total_price()) if items else None,
    )


def supplier_to_dto(supplier: Supplier) -> SupplierDTO:
    last_total = supplier.last_order_total_price
    return SupplierDTO(
        id=supplier.id.value,
        name=supplier.name,
        contact_email=supplier.contact_email,
        last_order_total=str(last_total) if last_total is not None else None,
    )
