"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import insert, select, update

from stockreset.adapters.sqlalchemy.tables import (
    product_relation_table,
    product_table,
    stock_status_table,
)
from stockreset.domain.model import (
    ChildProduct,
    CompositeProduct,
    ProductType,
    ScopeId,
    StockStatus,
    StockStatusRecord,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class ProductNotFoundError(LookupError):
    """Raised when a SKU does not exist in the catalog."""

    def __init__(self, sku: str) -> None:
        super().__init__(f"Product with SKU {sku!r} does not exist")
        self.sku = sku


def _product_id(session: Session, sku: str) -> int:
    stmt = select(product_table.c.id).where(product_table.c.sku == sku)
    product_id = session.execute(stmt).scalar_one_or_none()
    if product_id is None:
        raise ProductNotFoundError(sku)
    return product_id


class SqlAlchemyCatalogRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_composites(
        self, type_id: ProductType = ProductType.CONFIGURABLE
    ) -> list[CompositeProduct]:
        stmt = (
            select(product_table.c.id, product_table.c.sku, product_table.c.name)
            .where(product_table.c.type_id == type_id.value)
            .order_by(product_table.c.id)
        )
        return [
            CompositeProduct(sku=row.sku, name=row.name, id=row.id)
            for row in self.session.execute(stmt)
        ]

    def get_children(self, sku: str) -> list[ChildProduct]:
        parent_id = _product_id(self.session, sku)
        stmt = (
            select(product_table.c.id, product_table.c.sku)
            .join(product_relation_table, product_relation_table.c.child_id == product_table.c.id)
            .where(product_relation_table.c.parent_id == parent_id)
            .order_by(product_table.c.id)
        )
        return [ChildProduct(id=row.id, sku=row.sku) for row in self.session.execute(stmt)]


class SqlAlchemyStockRepository:
    """Reads quantities and statuses and stages status corrections in the session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_stock_status(self, sku: str, scope_id: ScopeId) -> StockStatusRecord:
        product_id = _product_id(self.session, sku)
        stmt = (
            select(stock_status_table.c.stock_status)
            .where(stock_status_table.c.product_id == product_id)
            .where(stock_status_table.c.scope_id == scope_id)
        )
        stored = self.session.execute(stmt).scalar_one_or_none()
        status = StockStatus(stored) if stored is not None else StockStatus.OUT_OF_STOCK
        return StockStatusRecord(product_id=product_id, sku=sku, scope_id=scope_id, status=status)

    def get_stock_qty(self, product_id: int, scope_id: ScopeId) -> float | None:
        stmt = (
            select(stock_status_table.c.qty)
            .where(stock_status_table.c.product_id == product_id)
            .where(stock_status_table.c.scope_id == scope_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def save_stock_status(self, record: StockStatusRecord) -> None:
        stmt = (
            update(stock_status_table)
            .where(stock_status_table.c.product_id == record.product_id)
            .where(stock_status_table.c.scope_id == record.scope_id)
            .values(stock_status=int(record.status))
        )
        result = self.session.execute(stmt)
        if result.rowcount == 0:
            self.session.execute(
                insert(stock_status_table).values(
                    product_id=record.product_id,
                    scope_id=record.scope_id,
                    qty=None,
                    stock_status=int(record.status),
                )
            )
