"""Application service: List Purchase Orders use case (query)."""

from __future__ import annotations

from procurement.application.dto import PurchaseOrderDTO, order_to_dto
from procurement.domain.model.order_state import OrderState
from procurement.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)


class ListOrdersHandler:

    def __init__(self, order_repo: PurchaseOrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, status: str | None = None) -> list[PurchaseOrderDTO]:
        """Return every purchase order, optionally only those in *status*.

        An unknown status name raises ValidationError.
        """
        orders = self._order_repo.list_all()
        if status is not None:
            wanted = OrderState(status.strip().capitalize()).value
            orders = [o for o in orders if o.state is wanted]
        return [order_to_dto(o) for o in orders]
