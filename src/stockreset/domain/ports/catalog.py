"""Ports for reading composite products and their children."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from stockreset.domain.model import ProductType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stockreset.domain.model import ChildProduct, CompositeProduct


@runtime_checkable
class CompositeProductSource(Protocol):
    """Lists the products whose type marks them as composite."""

    def list_composites(
        self, type_id: ProductType = ProductType.CONFIGURABLE
    ) -> Sequence[CompositeProduct]: ...


@runtime_checkable
class ChildProductResolver(Protocol):
    """Resolves the child products linked to a parent SKU."""

    def get_children(self, sku: str) -> Sequence[ChildProduct]: ...
