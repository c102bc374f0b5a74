"""JSON-file-backed implementation of PurchaseOrderRepository.

Single-process only: the whole file is read and rewritten on each save.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from purchasing.domain.model.identifiers import ProductId, PurchaseOrderId, SupplierId
from purchasing.domain.model.purchase_order import Line, PurchaseOrder
from purchasing.domain.model.value_objects import OrderedQuantity
from purchasing.domain.repository.purchase_order_repository import (
    PurchaseOrderRepository,
)


class JsonPurchaseOrderRepository(PurchaseOrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- PurchaseOrderRepository interface ------------------------------------

    def next_id(self) -> PurchaseOrderId:
        return PurchaseOrderId.generate()

    def get_by_id(self, purchase_order_id: PurchaseOrderId) -> PurchaseOrder | None:
        for raw in self._load_raw():
            if raw["id"] == str(purchase_order_id):
                return self._to_domain(raw)
        return None

    def save(self, purchase_order: PurchaseOrder) -> None:
        orders = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == str(purchase_order.id):
                orders[i] = self._to_raw(purchase_order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(purchase_order))

        self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: PurchaseOrder) -> dict:
        return {
            "id": str(order.purchase_order_id),
            "supplier_id": str(order.supplier_id),
            "placed": order.placed,
            "lines": [
                {
                    "line_number": line.line_number,
                    "product_id": str(line.product_id),
                    "ordered_quantity": str(line.ordered_quantity.value),
                    "received_quantity": str(line.received_quantity),
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> PurchaseOrder:
        lines = [
            Line(
                line_number=raw_line["line_number"],
                product_id=ProductId(raw_line["product_id"]),
                ordered_quantity=OrderedQuantity(Decimal(raw_line["ordered_quantity"])),
                received_quantity=Decimal(raw_line.get("received_quantity", "0")),
            )
            for raw_line in raw["lines"]
        ]
        return PurchaseOrder.reconstitute(
            purchase_order_id=PurchaseOrderId(raw["id"]),
            supplier_id=SupplierId(raw["supplier_id"]),
            lines=lines,
            placed=raw.get("placed", False),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
