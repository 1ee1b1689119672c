"""Application service: Add Line Item use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from procurement.application.dto import PurchaseOrderDTO, order_to_dto
from procurement.domain.exceptions import EntityNotFoundError
from procurement.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)

logger = logging.getLogger(__name__)


class AddItemHandler:

    def __init__(self, order_repo: PurchaseOrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        order_id: str,
        product_id: str,
        quantity: int,
        unit_price: int | float | Decimal,
    ) -> PurchaseOrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Purchase order '{order_id}' not found")

        item = order.add_item(
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
        )
        self._order_repo.save(order)
        logger.info(
            "Added %d x %s at %s to purchase order %s",
            item.quantity, item.product_id, item.unit_price, order_id,
        )
        return order_to_dto(order)
