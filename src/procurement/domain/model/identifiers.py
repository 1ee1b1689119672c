"""Identifier Value Objects.

Suppliers, products and purchase orders are all identified by UUID
strings in the canonical hyphenated 8-4-4-4-12 form. The helpers here
are the only place that knows about the ``uuid`` module; everything
else deals in validated value objects.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass

from procurement.domain.exceptions import ValidationError

_CANONICAL_UUID = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def generate_identifier() -> str:
    """Return a new random (version 4) UUID string."""
    return str(uuid.uuid4())


def is_valid_identifier(value: object) -> bool:
    """True if *value* is a UUID string in canonical hyphenated form.

    Braces, ``urn:uuid:`` prefixes and bare hex digits are rejected.
    """
    return isinstance(value, str) and _CANONICAL_UUID.fullmatch(value) is not None


@dataclass(frozen=True)
class ProductId:
    """Reference to a product in the catalog."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_identifier(self.value):
            raise ValidationError(f"Invalid product ID: {self.value!r}")
        object.__setattr__(self, "value", self.value.lower())

    @staticmethod
    def generate() -> ProductId:
        return ProductId(generate_identifier())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SupplierId:
    """Reference to a supplier."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_identifier(self.value):
            raise ValidationError(
                f"Invalid supplier ID: {self.value!r} is not a valid UUID"
            )
        object.__setattr__(self, "value", self.value.lower())

    @staticmethod
    def generate() -> SupplierId:
        return SupplierId(generate_identifier())

    def __str__(self) -> str:
        return self.value
