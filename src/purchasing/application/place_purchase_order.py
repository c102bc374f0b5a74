"""Application service: Place Purchase Order use case.

Commits a draft order and publishes the resulting PurchaseOrderPlaced
event once the order has been saved.
"""

from __future__ import annotations

import logging

from purchasing.application.event_publisher import EventPublisher
from purchasing.application.mapping import load_purchase_order
from purchasing.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)

logger = logging.getLogger(__name__)


class PlacePurchaseOrderHandler:

    def __init__(
        self,
        order_repo: PurchaseOrderRepository,
        publisher: EventPublisher,
    ) -> None:
        self._order_repo = order_repo
        self._publisher = publisher

    def handle(self, purchase_order_id: str) -> None:
        order = load_purchase_order(self._order_repo, purchase_order_id)

        order.place()
        self._order_repo.save(order)
        logger.info("Placed purchase order %s", order.id)

        self._publisher.publish(order.recorded_events())
