"""Application service: Show Purchase Order use case (query)."""

from __future__ import annotations

from procurement.application.dto import PurchaseOrderDTO, order_to_dto
from procurement.domain.exceptions import EntityNotFoundError
from procurement.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)


class ShowOrderHandler:

    def __init__(self, order_repo: PurchaseOrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> PurchaseOrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Purchase order '{order_id}' not found")
        return order_to_dto(order)
