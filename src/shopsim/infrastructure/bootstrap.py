"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from shopsim.infrastructure.persistence.json_store_repository import (
    JsonStoreRepository,
)
from shopsim.infrastructure.persistence.json_supplier_repository import (
    JsonSupplierRepository,
)

DATA_DIR_ENV = "SHOPSIM_DATA_DIR"

# Resolve the default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    """Return the configured data directory (env var wins over the default)."""
    configured = os.environ.get(DATA_DIR_ENV)
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def store_repository(base: Path | None = None) -> JsonStoreRepository:
    return JsonStoreRepository((base or data_dir()) / "stores.json")


def supplier_repository(base: Path | None = None) -> JsonSupplierRepository:
    return JsonSupplierRepository((base or data_dir()) / "suppliers.json")
