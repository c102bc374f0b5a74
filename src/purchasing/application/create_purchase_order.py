"""Application service: Create Purchase Order use case.

Builds a draft purchase order for a supplier with an optional initial
set of lines.  The draft is not placed; that is a separate use case.
"""

from __future__ import annotations

import logging

from purchasing.application.dto import LineSpec, PurchaseOrderDTO
from purchasing.application.mapping import to_dto
from purchasing.domain.model.identifiers import ProductId, SupplierId
from purchasing.domain.model.purchase_order import PurchaseOrder
from purchasing.domain.model.value_objects import OrderedQuantity
from purchasing.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)

logger = logging.getLogger(__name__)


class CreatePurchaseOrderHandler:

    def __init__(self, order_repo: PurchaseOrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, supplier_id: str, line_specs: list[LineSpec] | None = None) -> PurchaseOrderDTO:
        """Create a new draft purchase order.

        Steps:
        1. Parse the supplier and every line up front (fail before building anything).
        2. Let the PurchaseOrder aggregate enforce one line per product.
        3. Persist and return a DTO.
        """
        supplier = SupplierId.from_string(supplier_id)
        lines = [
            (ProductId.from_string(spec.product_id), OrderedQuantity(spec.quantity))
            for spec in line_specs or []
        ]

        order = PurchaseOrder.create(self._order_repo.next_id(), supplier)
        for product_id, quantity in lines:
            order.add_line(product_id, quantity)

        self._order_repo.save(order)
        logger.info(
            "Created purchase order %s for supplier %s with %d line(s)",
            order.id, supplier, len(order.lines),
        )
        return to_dto(order)
