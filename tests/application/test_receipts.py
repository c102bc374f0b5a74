"""Integration tests for the ProcessReceipt and UndoReceipt use cases."""

import logging

import pytest

from purchasing.application.create_purchase_order import CreatePurchaseOrderHandler
from purchasing.application.dto import LineSpec
from purchasing.application.place_purchase_order import PlacePurchaseOrderHandler
from purchasing.application.process_receipt import ProcessReceiptHandler
from purchasing.application.show_purchase_order import ShowPurchaseOrderHandler
from purchasing.application.undo_receipt import UndoReceiptHandler
from purchasing.domain.exceptions import EntityNotFoundError, ValidationError
from purchasing.domain.model.events import PurchaseOrderCompleted, PurchaseOrderReopened
from purchasing.domain.model.identifiers import PurchaseOrderId
from tests.fakes import FakeEventPublisher, FakePurchaseOrderRepository

SUPPLIER = "1900091c-7bb6-4e43-ac4e-308a4853686b"
WIDGET = "a5aa7b51-7aa9-4344-82ea-8cd9ba8b3655"
GADGET = "0b4f2c63-3d6c-4b0e-9a53-1f2d9c7e5a10"
UNKNOWN = "e3c1d8a2-5f47-4c1b-8e2a-6b9d0f3a7c44"


def _setup():
    """Helper: a placed order for 10 widgets and 5 gadgets."""
    order_repo = FakePurchaseOrderRepository()
    dto = CreatePurchaseOrderHandler(order_repo).handle(
        SUPPLIER, [LineSpec(WIDGET, "10"), LineSpec(GADGET, "5")]
    )
    PlacePurchaseOrderHandler(order_repo, FakeEventPublisher()).handle(dto.id)
    return order_repo, FakeEventPublisher(), dto.id


class TestProcessReceipt:

    def test_partial_receipt_updates_line(self):
        order_repo, publisher, oid = _setup()

        ProcessReceiptHandler(order_repo, publisher).handle(oid, WIDGET, "4")

        dto = ShowPurchaseOrderHandler(order_repo).handle(oid)
        assert dto.lines[0].received_quantity == "4"
        assert dto.lines[0].remaining_quantity == "6"
        assert dto.status == "PLACED"
        assert publisher.published == []

    def test_final_receipt_publishes_completed(self):
        order_repo, publisher, oid = _setup()
        handler = ProcessReceiptHandler(order_repo, publisher)

        handler.handle(oid, WIDGET, "10")
        handler.handle(oid, GADGET, "5")

        assert publisher.published == [PurchaseOrderCompleted(PurchaseOrderId(oid))]
        dto = ShowPurchaseOrderHandler(order_repo).handle(oid)
        assert dto.status == "FULLY_DELIVERED"
        assert dto.fully_delivered

    def test_unknown_product_is_logged_and_ignored(self, caplog):
        order_repo, publisher, oid = _setup()

        with caplog.at_level(logging.WARNING):
            ProcessReceiptHandler(order_repo, publisher).handle(oid, UNKNOWN, "3")

        assert "not on purchase order" in caplog.text
        assert publisher.published == []
        dto = ShowPurchaseOrderHandler(order_repo).handle(oid)
        assert [line.received_quantity for line in dto.lines] == ["0", "0"]

    def test_invalid_quantity_rejected(self):
        order_repo, publisher, oid = _setup()
        with pytest.raises(ValidationError, match="larger than 0"):
            ProcessReceiptHandler(order_repo, publisher).handle(oid, WIDGET, "-1")

    def test_unknown_order_rejected(self):
        order_repo, publisher, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            ProcessReceiptHandler(order_repo, publisher).handle(
                str(PurchaseOrderId.generate()), WIDGET, "1"
            )


class TestUndoReceipt:

    def test_undo_after_completion_publishes_reopened(self):
        order_repo, publisher, oid = _setup()
        receive = ProcessReceiptHandler(order_repo, publisher)
        receive.handle(oid, WIDGET, "10")
        receive.handle(oid, GADGET, "5")

        undo = UndoReceiptHandler(order_repo, publisher)
        undo.handle(oid, GADGET, "1")
        undo.handle(oid, GADGET, "1")

        assert publisher.published == [
            PurchaseOrderCompleted(PurchaseOrderId(oid)),
            PurchaseOrderReopened(PurchaseOrderId(oid)),
        ]
        dto = ShowPurchaseOrderHandler(order_repo).handle(oid)
        assert dto.lines[1].received_quantity == "3"
        assert dto.status == "PLACED"

    def test_undo_on_open_order_publishes_nothing(self):
        order_repo, publisher, oid = _setup()
        ProcessReceiptHandler(order_repo, publisher).handle(oid, WIDGET, "4")

        UndoReceiptHandler(order_repo, publisher).handle(oid, WIDGET, "4")

        assert publisher.published == []
        dto = ShowPurchaseOrderHandler(order_repo).handle(oid)
        assert dto.lines[0].received_quantity == "0"
