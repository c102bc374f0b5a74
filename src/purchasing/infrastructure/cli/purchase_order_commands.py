"""CLI commands for the PurchaseOrder aggregate."""

from __future__ import annotations

import click

from purchasing.application.add_line import AddLineHandler
from purchasing.application.create_purchase_order import CreatePurchaseOrderHandler
from purchasing.application.dto import LineSpec, PurchaseOrderDTO
from purchasing.application.place_purchase_order import PlacePurchaseOrderHandler
from purchasing.application.process_receipt import ProcessReceiptHandler
from purchasing.application.show_purchase_order import ShowPurchaseOrderHandler
from purchasing.application.undo_receipt import UndoReceiptHandler
from purchasing.domain.exceptions import DomainException
from purchasing.infrastructure.bootstrap import (
    event_publisher,
    purchase_order_repository,
)


def _parse_lines(raw: str) -> list[LineSpec]:
    """Parse '<product-id>:10,<product-id>:2.5' into a LineSpec list."""
    specs: list[LineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid line format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty = pair.rsplit(":", 1)
        specs.append(LineSpec(product_id=product_id.strip(), quantity=qty.strip()))
    return specs


def _display_order(dto: PurchaseOrderDTO) -> None:
    """Shared formatting for displaying a purchase order."""
    click.echo(f"Purchase order {dto.id}  (status={dto.status})")
    click.echo(f"Supplier: {dto.supplier_id}")
    click.echo()
    click.echo(
        f"  {'#':>3} {'Product':<36} {'Ordered':>10} {'Received':>10} {'Remaining':>10}"
    )
    click.echo(f"  {'-'*73}")
    for line in dto.lines:
        click.echo(
            f"  {line.line_number:>3} {line.product_id:<36} {line.ordered_quantity:>10} "
            f"{line.received_quantity:>10} {line.remaining_quantity:>10}"
        )
    click.echo(f"  {'-'*73}")
    click.echo(f"  Fully delivered: {'yes' if dto.fully_delivered else 'no'}")


@click.command("create")
@click.option("--supplier", "supplier_id", required=True, help="Supplier ID (UUID).")
@click.option("--lines", "lines_str", default=None, help="Lines as 'ProductId:Qty,ProductId:Qty'.")
def po_create(supplier_id: str, lines_str: str | None) -> None:
    """Create a new draft purchase order."""
    specs = _parse_lines(lines_str) if lines_str else []

    handler = CreatePurchaseOrderHandler(order_repo=purchase_order_repository())

    try:
        dto = handler.handle(supplier_id=supplier_id, line_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("add-line")
@click.option("--id", "purchase_order_id", required=True, help="Purchase order ID.")
@click.option("--product", "product_id", required=True, help="Product ID (UUID).")
@click.option("--quantity", required=True, help="Quantity to order.")
def po_add_line(purchase_order_id: str, product_id: str, quantity: str) -> None:
    """Add a product line to a purchase order."""
    handler = AddLineHandler(order_repo=purchase_order_repository())

    try:
        dto = handler.handle(purchase_order_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("place")
@click.option("--id", "purchase_order_id", required=True, help="Purchase order ID to place.")
def po_place(purchase_order_id: str) -> None:
    """Place a draft purchase order with its supplier."""
    handler = PlacePurchaseOrderHandler(
        order_repo=purchase_order_repository(),
        publisher=event_publisher(),
    )

    try:
        handler.handle(purchase_order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase order {purchase_order_id} placed.")


@click.command("receive")
@click.option("--id", "purchase_order_id", required=True, help="Purchase order ID.")
@click.option("--product", "product_id", required=True, help="Product ID (UUID).")
@click.option("--quantity", required=True, help="Quantity received.")
def po_receive(purchase_order_id: str, product_id: str, quantity: str) -> None:
    """Book goods received against a purchase order."""
    handler = ProcessReceiptHandler(
        order_repo=purchase_order_repository(),
        publisher=event_publisher(),
    )

    try:
        handler.handle(purchase_order_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Receipt of {quantity} booked on purchase order {purchase_order_id}.")


@click.command("undo-receipt")
@click.option("--id", "purchase_order_id", required=True, help="Purchase order ID.")
@click.option("--product", "product_id", required=True, help="Product ID (UUID).")
@click.option("--quantity", required=True, help="Quantity to reverse.")
def po_undo_receipt(purchase_order_id: str, product_id: str, quantity: str) -> None:
    """Reverse goods previously booked against a purchase order."""
    handler = UndoReceiptHandler(
        order_repo=purchase_order_repository(),
        publisher=event_publisher(),
    )

    try:
        handler.handle(purchase_order_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Receipt of {quantity} reversed on purchase order {purchase_order_id}.")


@click.command("show")
@click.option("--id", "purchase_order_id", required=True, help="Purchase order ID to display.")
def po_show(purchase_order_id: str) -> None:
    """Show details of an existing purchase order."""
    handler = ShowPurchaseOrderHandler(order_repo=purchase_order_repository())

    try:
        dto = handler.handle(purchase_order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
