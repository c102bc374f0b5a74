"""In-memory fakes for testing.

These implement the same abstract interfaces as the infrastructure
adapters but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from purchasing.application.event_publisher import EventPublisher
from purchasing.domain.model.events import DomainEvent
from purchasing.domain.model.identifiers import PurchaseOrderId
from purchasing.domain.model.purchase_order import PurchaseOrder
from purchasing.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)


class FakePurchaseOrderRepository(PurchaseOrderRepository):

    def __init__(self, orders: list[PurchaseOrder] | None = None) -> None:
        self._store: dict[PurchaseOrderId, PurchaseOrder] = {}
        for order in orders or []:
            self._store[order.id] = order
        self.saved = 0

    def next_id(self) -> PurchaseOrderId:
        return PurchaseOrderId.generate()

    def get_by_id(self, purchase_order_id: PurchaseOrderId) -> PurchaseOrder | None:
        return self._store.get(purchase_order_id)

    def save(self, purchase_order: PurchaseOrder) -> None:
        self._store[purchase_order.id] = purchase_order
        self.saved += 1


class FakeEventPublisher(EventPublisher):

    def __init__(self) -> None:
        self.published: list[DomainEvent] = []

    def publish(self, events: list[DomainEvent]) -> None:
        self.published.extend(events)
