"""Unit-of-work abstraction around the catalog and inventory stores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .catalog import ChildProductResolver, CompositeProductSource
from .inventory import StockQuantityLookup, StockStatusRegistry, StockStatusRepository

if TYPE_CHECKING:
    from types import TracebackType


@runtime_checkable
class CatalogProducts(CompositeProductSource, ChildProductResolver, Protocol):
    """Catalog store offering both listing and relationship lookups."""


@runtime_checkable
class InventoryStock(StockStatusRegistry, StockQuantityLookup, StockStatusRepository, Protocol):
    """Inventory store offering status, quantity and persistence."""


@dataclass(slots=True)
class CatalogRepositories:
    """Repositories required to reconcile stock statuses."""

    catalog: CatalogProducts
    stock: InventoryStock


@runtime_checkable
class CatalogUnitOfWork(Protocol):
    """Session boundary around the catalog repositories."""

    @property
    def repositories(self) -> CatalogRepositories: ...

    def __enter__(self) -> CatalogUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
