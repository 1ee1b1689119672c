"""Supplier entity.

Suppliers live independently of purchase orders. A purchase order only
holds a ``SupplierId`` reference; the supplier itself remembers the total
of the last order completed with it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from procurement.domain.exceptions import ValidationError
from procurement.domain.model.identifiers import SupplierId
from procurement.domain.model.value_objects import Money

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass
class Supplier:
    """A supplier that purchase orders are placed with.

    Kept as a mutable dataclass because recording the latest completed
    order total is a legitimate mutation on the entity.
    """

    id: SupplierId
    name: str
    contact_email: str | None = None
    last_order_total_price: Money | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, SupplierId):
            raise ValidationError("Supplier ID must be a SupplierId")
        if (
            not isinstance(self.name, str)
            or not MIN_NAME_LENGTH <= len(self.name) <= MAX_NAME_LENGTH
        ):
            raise ValidationError(
                f"Supplier name must be a string between {MIN_NAME_LENGTH} "
                f"and {MAX_NAME_LENGTH} characters"
            )
        if self.contact_email is not None and not _is_valid_email(self.contact_email):
            raise ValidationError(
                f"Contact email must be a valid email address, got {self.contact_email!r}"
            )
        if self.last_order_total_price is not None and not isinstance(
            self.last_order_total_price, Money
        ):
            raise ValidationError("Last order total price must be a Money value")

    @staticmethod
    def register(name: str, contact_email: str | None = None) -> Supplier:
        """Create a brand-new supplier with a generated ID."""
        return Supplier(id=SupplierId.generate(), name=name, contact_email=contact_email)

    def record_order_total(self, total: Money) -> None:
        """Remember the total of the most recently completed order."""
        if not isinstance(total, Money):
            raise ValidationError("Order total must be a Money value")
        self.last_order_total_price = total


def _is_valid_email(email: object) -> bool:
    return isinstance(email, str) and _EMAIL_RE.match(email) is not None
