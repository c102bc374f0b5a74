"""PurchaseOrder aggregate, the core of the domain.

A purchase order is placed with one supplier and owns one line per
ordered product.  After placement it is reconciled against goods
receipts until every line is delivered.  All business invariants are
enforced here; the supplier and receipt notes are only referenced by
their identifiers and quantities.
"""

from __future__ import annotations

import copy
from decimal import Decimal

from purchasing.domain.exceptions import (
    AlreadyPlacedError,
    DuplicateProductError,
    EmptyOrderError,
    LineNotFoundError,
)
from purchasing.domain.model.aggregate import Aggregate
from purchasing.domain.model.events import (
    PurchaseOrderCompleted,
    PurchaseOrderPlaced,
    PurchaseOrderReopened,
)
from purchasing.domain.model.identifiers import ProductId, PurchaseOrderId, SupplierId
from purchasing.domain.model.value_objects import OrderedQuantity, ReceiptQuantity


class Line:
    """One product's ordered quantity and what has been received so far.

    Only ``received_quantity`` changes after creation, and only through
    ``process_receipt`` / ``undo_receipt``.  It is a running total and is
    not clamped: receiving more than was ordered, or undoing more than was
    received, is recorded as-is.
    """

    def __init__(
        self,
        line_number: int,
        product_id: ProductId,
        ordered_quantity: OrderedQuantity,
        received_quantity: Decimal = Decimal("0"),
    ) -> None:
        self._line_number = line_number
        self._product_id = product_id
        self._ordered_quantity = ordered_quantity
        self._received_quantity = received_quantity

    @property
    def line_number(self) -> int:
        return self._line_number

    @property
    def product_id(self) -> ProductId:
        return self._product_id

    @property
    def ordered_quantity(self) -> OrderedQuantity:
        return self._ordered_quantity

    @property
    def received_quantity(self) -> Decimal:
        return self._received_quantity

    @property
    def remaining_quantity(self) -> Decimal:
        return self._ordered_quantity.value - self._received_quantity

    @property
    def is_fully_delivered(self) -> bool:
        return self._received_quantity >= self._ordered_quantity.value

    def process_receipt(self, quantity: ReceiptQuantity) -> None:
        self._received_quantity += quantity.value

    def undo_receipt(self, quantity: ReceiptQuantity) -> None:
        self._received_quantity -= quantity.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return (
            self._line_number == other._line_number
            and self._product_id == other._product_id
            and self._ordered_quantity == other._ordered_quantity
            and self._received_quantity == other._received_quantity
        )

    def __repr__(self) -> str:
        return (
            f"Line(line_number={self._line_number!r}, product_id={self._product_id!r}, "
            f"ordered_quantity={self._ordered_quantity!r}, "
            f"received_quantity={self._received_quantity!r})"
        )


class PurchaseOrder(Aggregate):
    """Aggregate root for purchase orders.

    Use ``PurchaseOrder.create()`` for new orders.  Repositories rebuild
    persisted orders with ``reconstitute()``, which restores state without
    recording events.
    """

    def __init__(
        self,
        purchase_order_id: PurchaseOrderId,
        supplier_id: SupplierId,
        lines: list[Line] | None = None,
        placed: bool = False,
    ) -> None:
        super().__init__()
        self._purchase_order_id = purchase_order_id
        self._supplier_id = supplier_id
        self._lines: list[Line] = list(lines or [])
        self._placed = placed

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(purchase_order_id: PurchaseOrderId, supplier_id: SupplierId) -> PurchaseOrder:
        """Start a new draft order with no lines."""
        return PurchaseOrder(purchase_order_id, supplier_id)

    @staticmethod
    def reconstitute(
        purchase_order_id: PurchaseOrderId,
        supplier_id: SupplierId,
        lines: list[Line],
        placed: bool,
    ) -> PurchaseOrder:
        return PurchaseOrder(purchase_order_id, supplier_id, lines=lines, placed=placed)

    # --- Accessors ------------------------------------------------------------

    @property
    def id(self) -> PurchaseOrderId:
        return self._purchase_order_id

    @property
    def purchase_order_id(self) -> PurchaseOrderId:
        return self._purchase_order_id

    @property
    def supplier_id(self) -> SupplierId:
        return self._supplier_id

    @property
    def lines(self) -> tuple[Line, ...]:
        """Copies of the lines; receipts go through the order, not through these."""
        return tuple(copy.copy(line) for line in self._lines)

    @property
    def placed(self) -> bool:
        return self._placed

    @property
    def is_fully_delivered(self) -> bool:
        """True when every line is delivered.  Vacuously true without lines."""
        return all(line.is_fully_delivered for line in self._lines)

    # --- Ordering -------------------------------------------------------------

    def add_line(self, product_id: ProductId, quantity: OrderedQuantity) -> None:
        """Order *quantity* of a product.

        Lines are numbered from 1 in the order they are added.  Adding a
        line after placement is not prevented.
        """
        for line in self._lines:
            if line.product_id == product_id:
                raise DuplicateProductError(
                    f"Product '{product_id}' is already on purchase order "
                    f"'{self._purchase_order_id}'; you cannot add the same product twice"
                )

        self._lines.append(Line(len(self._lines) + 1, product_id, quantity))

    def place(self) -> None:
        """Commit the order.  Allowed once, and only with at least one line."""
        if self._placed:
            raise AlreadyPlacedError(
                f"Purchase order '{self._purchase_order_id}' has already been placed"
            )
        if not self._lines:
            raise EmptyOrderError(
                "To place a purchase order, it has to have at least one line"
            )

        self._placed = True
        self._record_that(PurchaseOrderPlaced(self._purchase_order_id))

    # --- Receipts -------------------------------------------------------------

    def process_receipt(self, product_id: ProductId, quantity: ReceiptQuantity) -> None:
        """Book received goods against the product's line.

        Records ``PurchaseOrderCompleted`` when this receipt is the one that
        makes the order fully delivered.  A product that is not on the
        order is ignored.
        """
        was_fully_delivered = self.is_fully_delivered

        for line in self._lines:
            if line.product_id == product_id:
                line.process_receipt(quantity)

        if not was_fully_delivered and self.is_fully_delivered:
            self._record_that(PurchaseOrderCompleted(self._purchase_order_id))

    def undo_receipt(self, product_id: ProductId, quantity: ReceiptQuantity) -> None:
        """Reverse previously booked goods for the product's line.

        Records ``PurchaseOrderReopened`` when this correction takes a
        fully delivered order back to not fully delivered.  A product that
        is not on the order is ignored.
        """
        was_fully_delivered = self.is_fully_delivered

        for line in self._lines:
            if line.product_id == product_id:
                line.undo_receipt(quantity)

        if was_fully_delivered and not self.is_fully_delivered:
            self._record_that(PurchaseOrderReopened(self._purchase_order_id))

    # --- Lookup ---------------------------------------------------------------

    def line_for_product(self, product_id: ProductId) -> Line:
        for line in self._lines:
            if line.product_id == product_id:
                return line
        raise LineNotFoundError(
            f"Purchase order '{self._purchase_order_id}' has no line for product '{product_id}'"
        )
