"""Domain port definitions for adapters."""

from __future__ import annotations

from .catalog import ChildProductResolver, CompositeProductSource
from .inventory import StockQuantityLookup, StockStatusRegistry, StockStatusRepository
from .unit_of_work import CatalogProducts, CatalogRepositories, CatalogUnitOfWork, InventoryStock

__all__ = [
    "CatalogProducts",
    "CatalogRepositories",
    "CatalogUnitOfWork",
    "ChildProductResolver",
    "CompositeProductSource",
    "InventoryStock",
    "StockQuantityLookup",
    "StockStatusRegistry",
    "StockStatusRepository",
]
