"""Domain events raised by the PurchaseOrder aggregate.

Events are facts that already happened: immutable, named in the past
tense, and compared structurally (same type, same purchase order).
"""

from __future__ import annotations

from dataclasses import dataclass

from purchasing.domain.model.identifiers import PurchaseOrderId


@dataclass(frozen=True)
class DomainEvent:
    """Base class for all domain events."""

    purchase_order_id: PurchaseOrderId

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class PurchaseOrderPlaced(DomainEvent):
    """The order was committed to the supplier."""


@dataclass(frozen=True)
class PurchaseOrderCompleted(DomainEvent):
    """A receipt brought every line up to its ordered quantity."""


@dataclass(frozen=True)
class PurchaseOrderReopened(DomainEvent):
    """An undone receipt took a fully delivered order back below its ordered quantities."""
