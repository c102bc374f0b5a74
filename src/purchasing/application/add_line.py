"""Application service: Add Line use case."""

from __future__ import annotations

import logging

from purchasing.application.dto import PurchaseOrderDTO
from purchasing.application.mapping import load_purchase_order, to_dto
from purchasing.domain.model.identifiers import ProductId
from purchasing.domain.model.value_objects import OrderedQuantity
from purchasing.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)

logger = logging.getLogger(__name__)


class AddLineHandler:

    def __init__(self, order_repo: PurchaseOrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, purchase_order_id: str, product_id: str, quantity: str) -> PurchaseOrderDTO:
        order = load_purchase_order(self._order_repo, purchase_order_id)
        product = ProductId.from_string(product_id)

        order.add_line(product, OrderedQuantity(quantity))
        self._order_repo.save(order)

        line = order.line_for_product(product)
        logger.info(
            "Added line %d (%s x %s) to purchase order %s",
            line.line_number, product, line.ordered_quantity, order.id,
        )
        return to_dto(order)
