"""PurchaseOrder aggregate, the core of the procurement domain.

The PurchaseOrder is an aggregate root that owns its line items and its
lifecycle state. All business invariants are enforced here:

- every line item is priced in the order's currency
- an order holds at most ``MAX_ITEMS`` line items
- line items can only be added while the order is a draft
- an order without items has no total price
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from procurement.domain.exceptions import ValidationError
from procurement.domain.model.identifiers import (
    ProductId,
    SupplierId,
    generate_identifier,
)
from procurement.domain.model.order_state import OrderState, OrderStatus
from procurement.domain.model.value_objects import Currency, Money

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_ITEMS = 50
MIN_ITEM_QUANTITY = 1
MAX_ITEM_QUANTITY = 1000


@dataclass(frozen=True)
class OrderItem:
    """A single product line on a purchase order.

    Bound to the order that created it and never reassigned. The unit
    price is locked at the moment the item is added.
    """

    order_id: str
    product_id: ProductId
    quantity: int
    unit_price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.order_id, str) or not self.order_id.strip():
            raise ValidationError("Order ID must be a non-empty string")
        if not isinstance(self.product_id, ProductId):
            raise ValidationError("Product ID must be a ProductId")
        if (
            isinstance(self.quantity, bool)
            or not isinstance(self.quantity, int)
            or not MIN_ITEM_QUANTITY <= self.quantity <= MAX_ITEM_QUANTITY
        ):
            raise ValidationError(
                f"Quantity must be an integer between {MIN_ITEM_QUANTITY} "
                f"and {MAX_ITEM_QUANTITY}, got {self.quantity!r}"
            )
        if not isinstance(self.unit_price, Money):
            raise ValidationError("Unit price must be a Money value")

    def calculate_subtotal(self) -> Money:
        return self.unit_price.multiply(self.quantity)


class PurchaseOrder:
    """Aggregate root for purchase orders placed with a supplier.

    Use the ``PurchaseOrder.create()`` factory for new orders; it
    validates the arguments and assigns a fresh identifier. The
    ``__init__`` is intentionally simple so the repository can
    reconstitute persisted orders without replaying their history.
    """

    def __init__(
        self,
        id: str,
        supplier_id: SupplierId,
        currency: Currency,
        order_date: datetime,
        items: list[OrderItem] | None = None,
        state: OrderState | None = None,
    ) -> None:
        self._id = id
        self._supplier_id = supplier_id
        self._currency = currency
        self._order_date = order_date
        self._items: list[OrderItem] = list(items or [])
        self._state = state if state is not None else OrderState()

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        supplier_id: SupplierId | str | None,
        currency: Currency | str | None,
        order_date: datetime | str | None = None,
    ) -> PurchaseOrder:
        """Open a new draft purchase order for a supplier."""
        if not supplier_id:
            raise ValidationError("Supplier ID is required")
        if isinstance(supplier_id, str):
            supplier_id = SupplierId(supplier_id)
        elif not isinstance(supplier_id, SupplierId):
            raise ValidationError("Supplier ID must be a SupplierId")

        if isinstance(currency, str):
            currency = Currency(currency)
        elif not isinstance(currency, Currency):
            raise ValidationError("Currency must be a Currency")

        return PurchaseOrder(
            id=generate_identifier(),
            supplier_id=supplier_id,
            currency=currency,
            order_date=_parse_order_date(order_date),
        )

    # --- Line items -----------------------------------------------------------

    def add_item(
        self,
        product_id: ProductId | str,
        quantity: int,
        unit_price: int | float | Decimal,
    ) -> OrderItem:
        """Append a line item priced in this order's currency.

        Everything is validated before the item list is touched, so a
        rejected item leaves the order exactly as it was.
        """
        if not self._state.is_draft:
            raise ValidationError(
                f"Cannot add items to a purchase order in "
                f"{self._state.value.value} state"
            )
        if len(self._items) >= MAX_ITEMS:
            raise ValidationError(
                f"Cannot add more than {MAX_ITEMS} items to a purchase order"
            )
        try:
            price = Money(unit_price, self._currency)
        except ValidationError as exc:
            raise ValidationError(
                f"Unit price must be a non-negative finite number, got {unit_price!r}"
            ) from exc
        if isinstance(product_id, str):
            product_id = ProductId(product_id)

        item = OrderItem(
            order_id=self._id,
            product_id=product_id,
            quantity=quantity,
            unit_price=price,
        )
        self._items.append(item)
        return item

    def calculate_total_price(self) -> Money:
        if not self._items:
            raise ValidationError(
                "Cannot calculate total price of a purchase order with no items"
            )
        total = Money.zero(self._currency)
        for item in self._items:
            total = total.add(item.calculate_subtotal())
        return total

    # --- State transitions ----------------------------------------------------

    def submit(self) -> None:
        """Transition DRAFT -> SUBMITTED."""
        self._state = self._state.to_submitted()

    def approve(self) -> None:
        """Transition SUBMITTED -> APPROVED."""
        self._state = self._state.to_approved()

    def ship(self) -> None:
        """Transition APPROVED -> SHIPPED."""
        self._state = self._state.to_shipped()

    def complete(self) -> None:
        """Transition SHIPPED -> COMPLETED."""
        self._state = self._state.to_completed()

    def cancel(self) -> None:
        """Transition DRAFT|SUBMITTED|APPROVED|SHIPPED -> CANCELLED."""
        self._state = self._state.to_cancelled()

    # --- Accessors ------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def supplier_id(self) -> SupplierId:
        return self._supplier_id

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def order_date(self) -> datetime:
        return self._order_date

    @property
    def items(self) -> list[OrderItem]:
        # A fresh list each time; callers cannot reach the internal one.
        return list(self._items)

    @property
    def state(self) -> OrderStatus:
        return self._state.value

    @property
    def is_draft(self) -> bool:
        return self._state.is_draft

    def __repr__(self) -> str:
        return (
            f"PurchaseOrder(id={self._id!r}, supplier_id={self._supplier_id.value!r}, "
            f"state={self._state.value.value!r}, items={len(self._items)})"
        )


def _parse_order_date(value: datetime | str | None) -> datetime:
    """Resolve an order date; dates without an offset are taken as UTC."""
    if value is None:
        return datetime.now(timezone.utc)
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as exc:
            raise ValidationError(f"Invalid order date: {value!r}") from exc
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value
    raise ValidationError(
        f"Order date must be a datetime or ISO-8601 string, got {type(value).__name__}"
    )
