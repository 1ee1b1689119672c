"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

The data directory is resolved in this order:
1. an explicit ``configure(data_dir)`` call (the CLI's ``--data-dir``)
2. the ``PROCUREMENT_DATA_DIR`` environment variable
3. ``data/`` under the project root
"""

from __future__ import annotations

import os
from pathlib import Path

from procurement.infrastructure.persistence.json_purchase_order_repository import (
    JsonPurchaseOrderRepository,
)
from procurement.infrastructure.persistence.json_supplier_repository import (
    JsonSupplierRepository,
)

DATA_DIR_ENV = "PROCUREMENT_DATA_DIR"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_configured_data_dir: Path | None = None


def configure(data_dir: Path | str | None) -> None:
    global _configured_data_dir
    _configured_data_dir = Path(data_dir) if data_dir is not None else None


def data_dir() -> Path:
    if _configured_data_dir is not None:
        return _configured_data_dir
    from_env = os.environ.get(DATA_DIR_ENV)
    return Path(from_env) if from_env else _DEFAULT_DATA_DIR


def order_repository() -> JsonPurchaseOrderRepository:
    return JsonPurchaseOrderRepository(data_dir() / "purchase_orders.json")


def supplier_repository() -> JsonSupplierRepository:
    return JsonSupplierRepository(data_dir() / "suppliers.json")
