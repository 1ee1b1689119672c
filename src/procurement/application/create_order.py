"""Application service: Create Purchase Order use case.

Orchestrates the flow between repositories and the domain model. The
aggregate itself accepts any well-formed supplier reference; checking
that the supplier actually exists is this handler's job.
"""

from __future__ import annotations

import logging
from datetime import datetime

from procurement.application.dto import PurchaseOrderDTO, order_to_dto
from procurement.domain.exceptions import EntityNotFoundError
from procurement.domain.model.identifiers import SupplierId
from procurement.domain.model.purchase_order import PurchaseOrder
from procurement.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)
from procurement.domain.repository.supplier_repository import SupplierRepository

logger = logging.getLogger(__name__)


class CreatePurchaseOrderHandler:

    def __init__(
        self,
        order_repo: PurchaseOrderRepository,
        supplier_repo: SupplierRepository,
    ) -> None:
        self._order_repo = order_repo
        self._supplier_repo = supplier_repo

    def handle(
        self,
        supplier_id: str,
        currency: str,
        order_date: datetime | str | None = None,
    ) -> PurchaseOrderDTO:
        """Open a new draft purchase order.

        Steps:
        1. Validate the supplier reference and make sure it exists.
        2. Let the PurchaseOrder factory validate currency and date.
        3. Persist and return a DTO.
        """
        supplier_ref = SupplierId(supplier_id)
        if self._supplier_repo.get_by_id(supplier_ref) is None:
            raise EntityNotFoundError(f"Supplier '{supplier_id}' not found")

        order = PurchaseOrder.create(
            supplier_id=supplier_ref,
            currency=currency,
            order_date=order_date,
        )
        self._order_repo.save(order)
        logger.info(
            "Created purchase order %s for supplier %s in %s",
            order.id, supplier_ref, order.currency,
        )
        return order_to_dto(order)
