"""JSON-file-backed implementation of SupplierRepository."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from procurement.domain.model.identifiers import SupplierId
from procurement.domain.model.supplier import Supplier
from procurement.domain.model.value_objects import Currency, Money
from procurement.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class JsonSupplierRepository(SupplierRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- SupplierRepository interface -----------------------------------------

    def get_by_id(self, supplier_id: SupplierId) -> Supplier | None:
        return self._load().get(supplier_id.value)

    def get_by_name(self, name: str) -> Supplier | None:
        for supplier in self._load().values():
            if supplier.name.lower() == name.lower():
                return supplier
        return None

    def list_all(self) -> list[Supplier]:
        return list(self._load().values())

    def save(self, supplier: Supplier) -> None:
        suppliers = self._load()
        suppliers[supplier.id.value] = supplier
        self._persist(suppliers)
        logger.debug("Saved supplier %s to %s", supplier.id, self._file_path)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Supplier]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        suppliers = (self._to_domain(item) for item in raw)
        return {supplier.id.value: supplier for supplier in suppliers}

    @staticmethod
    def _to_domain(item: dict) -> Supplier:
        last_total = item.get("last_order_total")
        return Supplier(
            id=SupplierId(item["id"]),
            name=item["name"],
            contact_email=item.get("contact_email"),
            last_order_total_price=(
                Money(Decimal(last_total["amount"]), Currency(last_total["currency"]))
                if last_total
                else None
            ),
        )

    def _persist(self, suppliers: dict[str, Supplier]) -> None:
        raw = [
            {
                "id": s.id.value,
                "name": s.name,
                "contact_email": s.contact_email,
                "last_order_total": (
                    {
                        "amount": str(s.last_order_total_price.amount),
                        "currency": s.last_order_total_price.currency.code,
                    }
                    if s.last_order_total_price is not None
                    else None
                ),
            }
            for s in suppliers.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
