"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from purchasing.infrastructure.logging_event_publisher import LoggingEventPublisher
from purchasing.infrastructure.persistence.json_purchase_order_repository import (
    JsonPurchaseOrderRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DATA_DIR_ENV = "PURCHASING_DATA_DIR"
LOG_LEVEL_ENV = "PURCHASING_LOG_LEVEL"


def data_dir() -> Path:
    """Read at call time so tests and wrappers can point at another directory."""
    override = os.getenv(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def purchase_order_repository() -> JsonPurchaseOrderRepository:
    return JsonPurchaseOrderRepository(data_dir() / "purchase_orders.json")


def event_publisher() -> LoggingEventPublisher:
    return LoggingEventPublisher()
