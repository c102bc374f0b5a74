"""Application service: Undo Receipt use case.

Reverses goods previously booked against a purchase order, e.g. after
a receipt note was corrected.  Mirrors ProcessReceiptHandler.
"""

from __future__ import annotations

import logging

from purchasing.application.event_publisher import EventPublisher
from purchasing.application.mapping import load_purchase_order
from purchasing.domain.model.identifiers import ProductId
from purchasing.domain.model.value_objects import ReceiptQuantity
from purchasing.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)

logger = logging.getLogger(__name__)


class UndoReceiptHandler:

    def __init__(
        self,
        order_repo: PurchaseOrderRepository,
        publisher: EventPublisher,
    ) -> None:
        self._order_repo = order_repo
        self._publisher = publisher

    def handle(self, purchase_order_id: str, product_id: str, quantity: str) -> None:
        order = load_purchase_order(self._order_repo, purchase_order_id)
        product = ProductId.from_string(product_id)
        receipt = ReceiptQuantity(quantity)

        if not any(line.product_id == product for line in order.lines):
            logger.warning(
                "Receipt reversal for product %s ignored: not on purchase order %s",
                product, order.id,
            )

        order.undo_receipt(product, receipt)
        self._order_repo.save(order)
        logger.info("Undid receipt of %s x %s on purchase order %s", product, receipt, order.id)

        self._publisher.publish(order.recorded_events())
