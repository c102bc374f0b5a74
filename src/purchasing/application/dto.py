"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LineSpec:
    """Input: a product to order and how much of it."""

    product_id: str
    quantity: str


@dataclass(frozen=True)
class LineDTO:
    """Output: a single line as displayed to the user."""

    line_number: int
    product_id: str
    ordered_quantity: str
    received_quantity: str
    remaining_quantity: str
    fully_delivered: bool


@dataclass(frozen=True)
class PurchaseOrderDTO:
    """Output: a complete purchase order as displayed to the user."""

    id: str
    supplier_id: str
    status: str
    fully_delivered: bool
    lines: list[LineDTO]
