"""Application service: Submit Purchase Order use case (DRAFT -> SUBMITTED)."""

from __future__ import annotations

import logging

from procurement.domain.exceptions import EntityNotFoundError
from procurement.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)

logger = logging.getLogger(__name__)


class SubmitOrderHandler:

    def __init__(self, order_repo: PurchaseOrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Purchase order '{order_id}' not found")

        order.submit()
        self._order_repo.save(order)
        logger.info("Purchase order %s submitted", order_id)
