"""Application service: Complete Purchase Order use case.

Coordinates two aggregates: the PurchaseOrder transitions SHIPPED ->
COMPLETED, and its supplier records the order total as its
``last_order_total_price``.
"""

from __future__ import annotations

import logging

from procurement.domain.exceptions import EntityNotFoundError
from procurement.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)
from procurement.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class CompleteOrderHandler:

    def __init__(
        self,
        order_repo: PurchaseOrderRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._order_repo = order_repo
        self._supplier_repo = supplier_repo

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Purchase order '{order_id}' not found")

        supplier = self._supplier_repo.get_by_id(order.supplier_id)
        if supplier is None:
            raise EntityNotFoundError(f"Supplier '{order.supplier_id}' not found")

        # Validate everything before mutating either aggregate.
        total = order.calculate_total_price() if order.items else None

        order.complete()
        self._order_repo.save(order)

        if total is not None:
            supplier.record_order_total(total)
            self._supplier_repo.save(supplier)

        logger.info("Purchase order %s completed (total=%s)", order_id, total)
