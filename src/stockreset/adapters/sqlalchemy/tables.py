"""SQLAlchemy table metadata for the catalog and inventory stores."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    Float,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData()

product_table = Table(
    "catalog_product",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("sku", String(64), nullable=False, unique=True),
    Column("name", String(255), nullable=False, default=""),
    Column("type_id", String(32), nullable=False, index=True),
)

product_relation_table = Table(
    "catalog_product_relation",
    metadata,
    Column("parent_id", Integer, ForeignKey("catalog_product.id"), primary_key=True),
    Column("child_id", Integer, ForeignKey("catalog_product.id"), primary_key=True),
)

stock_status_table = Table(
    "inventory_stock_status",
    metadata,
    Column("product_id", Integer, ForeignKey("catalog_product.id"), primary_key=True),
    Column("scope_id", Integer, primary_key=True, default=0),
    Column("qty", Float, nullable=True),
    Column("stock_status", Integer, nullable=False, default=0),
)


def create_all_tables(engine: Engine) -> None:
    metadata.create_all(engine, checkfirst=True)
