"""Ports for reading and persisting stock information."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from stockreset.domain.model import ScopeId, StockStatusRecord


@runtime_checkable
class StockStatusRegistry(Protocol):
    def get_stock_status(self, sku: str, scope_id: ScopeId) -> StockStatusRecord: ...


@runtime_checkable
class StockQuantityLookup(Protocol):
    """Available quantity of a single product; ``None`` when nothing is stored."""

    def get_stock_qty(self, product_id: int, scope_id: ScopeId) -> float | None: ...


@runtime_checkable
class StockStatusRepository(Protocol):
    def save_stock_status(self, record: StockStatusRecord) -> None: ...
