"""SQLAlchemy adapter package for the catalog and inventory stores."""

from __future__ import annotations

from .repositories import (
    ProductNotFoundError,
    SqlAlchemyCatalogRepository,
    SqlAlchemyStockRepository,
)
from .tables import (
    create_all_tables,
    metadata,
    product_relation_table,
    product_table,
    stock_status_table,
)
from .unit_of_work import SqlAlchemyCatalogUnitOfWork, shutdown, startup

__all__ = [
    "ProductNotFoundError",
    "SqlAlchemyCatalogRepository",
    "SqlAlchemyCatalogUnitOfWork",
    "SqlAlchemyStockRepository",
    "create_all_tables",
    "metadata",
    "product_relation_table",
    "product_table",
    "shutdown",
    "startup",
    "stock_status_table",
]
