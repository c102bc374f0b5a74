"""Abstract repository for the PurchaseOrder aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from purchasing.domain.model.identifiers import PurchaseOrderId
from purchasing.domain.model.purchase_order import PurchaseOrder


class PurchaseOrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> PurchaseOrderId:
        """Generate a new unique purchase order ID."""

    @abstractmethod
    def get_by_id(self, purchase_order_id: PurchaseOrderId) -> PurchaseOrder | None:
        """Return a purchase order by its ID, or None if not found."""

    @abstractmethod
    def save(self, purchase_order: PurchaseOrder) -> None:
        """Persist a new or updated purchase order."""
