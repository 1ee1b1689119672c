"""Abstract repository for the PurchaseOrder aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from procurement.domain.model.purchase_order import PurchaseOrder


class PurchaseOrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> PurchaseOrder | None:
        """Return a purchase order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[PurchaseOrder]:
        """Return every purchase order, oldest first."""

    @abstractmethod
    def save(self, order: PurchaseOrder) -> None:
        """Persist a new or updated purchase order."""
