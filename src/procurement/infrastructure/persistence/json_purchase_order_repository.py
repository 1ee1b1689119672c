"""JSON-file-backed implementation of PurchaseOrderRepository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from procurement.domain.model.identifiers import ProductId, SupplierId
from procurement.domain.model.order_state import OrderState
from procurement.domain.model.purchase_order import OrderItem, PurchaseOrder
from procurement.domain.model.value_objects import Currency, Money
from procurement.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)

logger = logging.getLogger(__name__)


class JsonPurchaseOrderRepository(PurchaseOrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- PurchaseOrderRepository interface ------------------------------------

    def get_by_id(self, order_id: str) -> PurchaseOrder | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[PurchaseOrder]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def save(self, order: PurchaseOrder) -> None:
        orders = self._load_raw()

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)
        logger.debug("Saved purchase order %s to %s", order.id, self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: PurchaseOrder) -> dict:
        return {
            "id": order.id,
            "supplier_id": order.supplier_id.value,
            "currency": order.currency.code,
            "order_date": order.order_date.isoformat(),
            "state": order.state.value,
            "items": [
                {
                    "product_id": item.product_id.value,
                    "quantity": item.quantity,
                    "unit_price": str(item.unit_price.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> PurchaseOrder:
        currency = Currency(raw["currency"])
        items = [
            OrderItem(
                order_id=raw["id"],
                product_id=ProductId(i["product_id"]),
                quantity=i["quantity"],
                unit_price=Money(Decimal(i["unit_price"]), currency),
            )
            for i in raw["items"]
        ]
        return PurchaseOrder(
            id=raw["id"],
            supplier_id=SupplierId(raw["supplier_id"]),
            currency=currency,
            order_date=datetime.fromisoformat(raw["order_date"]),
            items=items,
            state=OrderState(raw["state"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        logger.debug("Loading purchase orders from %s", self._file_path)
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
