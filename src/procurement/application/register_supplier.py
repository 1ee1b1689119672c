"""Application service: Register Supplier use case."""

from __future__ import annotations

import logging

from procurement.application.dto import SupplierDTO, supplier_to_dto
from procurement.domain.exceptions import ValidationError
from procurement.domain.model.supplier import Supplier
from procurement.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class RegisterSupplierHandler:

    def __init__(self, supplier_repo: SupplierRepository) -> None:
        self._supplier_repo = supplier_repo

    def handle(self, name: str, contact_email: str | None = None) -> SupplierDTO:
        """Register a new supplier; names must be unique (case-insensitive)."""
        if not name or not name.strip():
            raise ValidationError("Supplier name is required")
        name = name.strip()

        if self._supplier_repo.get_by_name(name) is not None:
            raise ValidationError(f"Supplier '{name}' already exists")

        supplier = Supplier.register(name=name, contact_email=contact_email)
        self._supplier_repo.save(supplier)
        logger.info("Registered supplier %s (%s)", supplier.id, supplier.name)
        return supplier_to_dto(supplier)
