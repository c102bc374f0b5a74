"""Integration tests for the PlacePurchaseOrder use case."""

import pytest

from purchasing.application.create_purchase_order import CreatePurchaseOrderHandler
from purchasing.application.dto import LineSpec
from purchasing.application.place_purchase_order import PlacePurchaseOrderHandler
from purchasing.application.show_purchase_order import ShowPurchaseOrderHandler
from purchasing.domain.exceptions import (
    AlreadyPlacedError,
    EmptyOrderError,
    EntityNotFoundError,
)
from purchasing.domain.model.events import PurchaseOrderPlaced
from purchasing.domain.model.identifiers import PurchaseOrderId
from tests.fakes import FakeEventPublisher, FakePurchaseOrderRepository

SUPPLIER = "1900091c-7bb6-4e43-ac4e-308a4853686b"
WIDGET = "a5aa7b51-7aa9-4344-82ea-8cd9ba8b3655"


def _setup():
    return FakePurchaseOrderRepository(), FakeEventPublisher()


class TestPlacePurchaseOrder:

    def test_place_publishes_event(self):
        order_repo, publisher = _setup()
        dto = CreatePurchaseOrderHandler(order_repo).handle(SUPPLIER, [LineSpec(WIDGET, "10")])

        PlacePurchaseOrderHandler(order_repo, publisher).handle(dto.id)

        assert publisher.published == [PurchaseOrderPlaced(PurchaseOrderId(dto.id))]
        assert ShowPurchaseOrderHandler(order_repo).handle(dto.id).status == "PLACED"

    def test_events_are_drained_after_publishing(self):
        order_repo, publisher = _setup()
        dto = CreatePurchaseOrderHandler(order_repo).handle(SUPPLIER, [LineSpec(WIDGET, "10")])
        PlacePurchaseOrderHandler(order_repo, publisher).handle(dto.id)

        order = order_repo.get_by_id(PurchaseOrderId(dto.id))
        assert order.recorded_events() == []

    def test_empty_order_rejected(self):
        order_repo, publisher = _setup()
        dto = CreatePurchaseOrderHandler(order_repo).handle(SUPPLIER)

        with pytest.raises(EmptyOrderError):
            PlacePurchaseOrderHandler(order_repo, publisher).handle(dto.id)

        assert publisher.published == []
        assert ShowPurchaseOrderHandler(order_repo).handle(dto.id).status == "DRAFT"

    def test_place_twice_rejected(self):
        order_repo, publisher = _setup()
        dto = CreatePurchaseOrderHandler(order_repo).handle(SUPPLIER, [LineSpec(WIDGET, "10")])
        handler = PlacePurchaseOrderHandler(order_repo, publisher)
        handler.handle(dto.id)

        with pytest.raises(AlreadyPlacedError):
            handler.handle(dto.id)

        assert len(publisher.published) == 1

    def test_unknown_order_rejected(self):
        order_repo, publisher = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            PlacePurchaseOrderHandler(order_repo, publisher).handle(
                str(PurchaseOrderId.generate())
            )
