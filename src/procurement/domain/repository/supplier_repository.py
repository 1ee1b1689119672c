"""Abstract repository for the Supplier entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from procurement.domain.model.identifiers import SupplierId
from procurement.domain.model.supplier import Supplier


class SupplierRepository(ABC):

    @abstractmethod
    def get_by_id(self, supplier_id: SupplierId) -> Supplier | None:
        """Return a supplier by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Supplier | None:
        """Return a supplier by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Supplier]:
        """Return every registered supplier."""

    @abstractmethod
    def save(self, supplier: Supplier) -> None:
        """Persist a new or updated supplier."""
