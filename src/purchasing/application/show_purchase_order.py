"""Application service: Show Purchase Order use case (query)."""

from __future__ import annotations

from purchasing.application.dto import PurchaseOrderDTO
from purchasing.application.mapping import load_purchase_order, to_dto
from purchasing.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)


class ShowPurchaseOrderHandler:

    def __init__(self, order_repo: PurchaseOrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, purchase_order_id: str) -> PurchaseOrderDTO:
        return to_dto(load_purchase_order(self._order_repo, purchase_order_id))
