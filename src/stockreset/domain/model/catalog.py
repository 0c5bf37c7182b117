"""Catalog and inventory value objects read from the external stores."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeAlias

from .enums import StockStatus

ScopeId: TypeAlias = int

DEFAULT_SCOPE_ID: ScopeId = 0


@dataclass(frozen=True, slots=True)
class CompositeProduct:
    """A product whose availability derives from its child products."""

    sku: str
    name: str
    id: int | None = None


@dataclass(frozen=True, slots=True)
class ChildProduct:
    id: int
    sku: str


@dataclass(frozen=True, slots=True)
class StockStatusRecord:
    """Stored aggregate status of one product at one scope."""

    product_id: int
    sku: str
    scope_id: ScopeId
    status: StockStatus

    @property
    def is_in_stock(self) -> bool:
        return self.status is StockStatus.IN_STOCK

    def with_status(self, status: StockStatus) -> StockStatusRecord:
        return replace(self, status=status)
