"""Shared helpers for the purchase order use cases."""

from __future__ import annotations

from purchasing.application.dto import LineDTO, PurchaseOrderDTO
from purchasing.domain.exceptions import EntityNotFoundError
from purchasing.domain.model.identifiers import PurchaseOrderId
from purchasing.domain.model.purchase_order import PurchaseOrder
from purchasing.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)


def load_purchase_order(
    order_repo: PurchaseOrderRepository, purchase_order_id: str
) -> PurchaseOrder:
    order = order_repo.get_by_id(PurchaseOrderId.from_string(purchase_order_id))
    if order is None:
        raise EntityNotFoundError(f"Purchase order '{purchase_order_id}' not found")
    return order


def status_of(order: PurchaseOrder) -> str:
    if not order.placed:
        return "DRAFT"
    if order.is_fully_delivered:
        return "FULLY_DELIVERED"
    return "PLACED"


def to_dto(order: PurchaseOrder) -> PurchaseOrderDTO:
    return PurchaseOrderDTO(
        id=str(order.purchase_order_id),
        supplier_id=str(order.supplier_id),
        status=status_of(order),
        fully_delivered=order.is_fully_delivered,
        lines=[
            LineDTO(
                line_number=line.line_number,
                product_id=str(line.product_id),
                ordered_quantity=str(line.ordered_quantity),
                received_quantity=str(line.received_quantity),
                remaining_quantity=str(line.remaining_quantity),
                fully_delivered=line.is_fully_delivered,
            )
            for line in order.lines
        ],
    )
