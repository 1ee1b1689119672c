"""Purchase order lifecycle.

The lifecycle is a small finite-state machine::

    DRAFT -> SUBMITTED -> APPROVED -> SHIPPED -> COMPLETED

    DRAFT | SUBMITTED | APPROVED | SHIPPED -> CANCELLED

COMPLETED and CANCELLED are terminal. Every legal move is listed in
``TRANSITIONS``; anything not in the table is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from procurement.domain.exceptions import ValidationError


class OrderStatus(Enum):
    DRAFT = "Draft"
    SUBMITTED = "Submitted"
    APPROVED = "Approved"
    SHIPPED = "Shipped"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class OrderEvent(Enum):
    SUBMIT = "submit"
    APPROVE = "approve"
    SHIP = "ship"
    COMPLETE = "complete"
    CANCEL = "cancel"


# (source status, event) -> target status
TRANSITIONS: dict[tuple[OrderStatus, OrderEvent], OrderStatus] = {
    (OrderStatus.DRAFT, OrderEvent.SUBMIT): OrderStatus.SUBMITTED,
    (OrderStatus.SUBMITTED, OrderEvent.APPROVE): OrderStatus.APPROVED,
    (OrderStatus.APPROVED, OrderEvent.SHIP): OrderStatus.SHIPPED,
    (OrderStatus.SHIPPED, OrderEvent.COMPLETE): OrderStatus.COMPLETED,
    (OrderStatus.DRAFT, OrderEvent.CANCEL): OrderStatus.CANCELLED,
    (OrderStatus.SUBMITTED, OrderEvent.CANCEL): OrderStatus.CANCELLED,
    (OrderStatus.APPROVED, OrderEvent.CANCEL): OrderStatus.CANCELLED,
    (OrderStatus.SHIPPED, OrderEvent.CANCEL): OrderStatus.CANCELLED,
}

_EVENT_TARGETS: dict[OrderEvent, OrderStatus] = {
    OrderEvent.SUBMIT: OrderStatus.SUBMITTED,
    OrderEvent.APPROVE: OrderStatus.APPROVED,
    OrderEvent.SHIP: OrderStatus.SHIPPED,
    OrderEvent.COMPLETE: OrderStatus.COMPLETED,
    OrderEvent.CANCEL: OrderStatus.CANCELLED,
}

TERMINAL_STATUSES = frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED})


@dataclass(frozen=True)
class OrderState:
    """Immutable snapshot of where a purchase order is in its lifecycle.

    Transitions never mutate; they return a new ``OrderState`` which the
    aggregate root swaps in for its own.
    """

    value: OrderStatus = OrderStatus.DRAFT

    def __post_init__(self) -> None:
        if isinstance(self.value, OrderStatus):
            return
        try:
            status = OrderStatus(self.value)
        except ValueError:
            valid = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Invalid purchase order state: {self.value!r}. "
                f"Valid states are: {valid}"
            ) from None
        object.__setattr__(self, "value", status)

    # --- Transitions ----------------------------------------------------------

    def transition(self, event: OrderEvent) -> OrderState:
        target = TRANSITIONS.get((self.value, event))
        if target is None:
            raise ValidationError(
                f"Cannot transition from {self.value.value} "
                f"to {_EVENT_TARGETS[event].value}"
            )
        return OrderState(target)

    def to_submitted(self) -> OrderState:
        return self.transition(OrderEvent.SUBMIT)

    def to_approved(self) -> OrderState:
        return self.transition(OrderEvent.APPROVE)

    def to_shipped(self) -> OrderState:
        return self.transition(OrderEvent.SHIP)

    def to_completed(self) -> OrderState:
        return self.transition(OrderEvent.COMPLETE)

    def to_cancelled(self) -> OrderState:
        return self.transition(OrderEvent.CANCEL)

    def allowed_events(self) -> list[OrderEvent]:
        return [event for (source, event) in TRANSITIONS if source is self.value]

    # --- Queries --------------------------------------------------------------

    @property
    def is_draft(self) -> bool:
        return self.value is OrderStatus.DRAFT

    @property
    def is_terminal(self) -> bool:
        return self.value in TERMINAL_STATUSES

    def __str__(self) -> str:
        return self.value.value
