"""Decide whether a composite product's stock status must be reset.

A product needs a reset when it is stored as out of stock although at least
one of its children has a positive available quantity. The reconciler never
demotes a product to out of stock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from stockreset.domain.model import StockDecision, StockStatus

from .errors import StockLookupError, StockStatusSaveError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stockreset.domain.model import (
        ChildProduct,
        CompositeProduct,
        RunMode,
        ScopeId,
        StockStatusRecord,
    )
    from stockreset.domain.ports import (
        ChildProductResolver,
        StockQuantityLookup,
        StockStatusRegistry,
        StockStatusRepository,
    )

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StockEvaluation:
    decision: StockDecision
    status: StockStatusRecord


def has_available_child(quantities: Sequence[float | None]) -> bool:
    """True when any quantity is strictly positive; ``None`` counts as zero."""

    return any((quantity or 0) > 0 for quantity in quantities)


@dataclass(slots=True)
class StockStatusReconciler:
    """Evaluate and, when the mode allows it, correct one product at a time."""

    children: ChildProductResolver
    statuses: StockStatusRegistry
    quantities: StockQuantityLookup
    persistence: StockStatusRepository

    def evaluate(self, product: CompositeProduct, scope_id: ScopeId) -> StockEvaluation:
        children = self._children_of(product)
        status = self._status_of(product, scope_id)

        if not children or status.is_in_stock:
            needs_reset = False
        else:
            needs_reset = has_available_child(self._quantities_of(product, children, scope_id))

        decision = StockDecision(sku=product.sku, name=product.name, needs_reset=needs_reset)
        return StockEvaluation(decision=decision, status=status)

    def apply(self, evaluation: StockEvaluation, mode: RunMode) -> bool:
        """Persist IN_STOCK for a product that needs it; return whether it was saved."""

        if not evaluation.decision.needs_reset or not mode.persists_changes:
            return False
        corrected = evaluation.status.with_status(StockStatus.IN_STOCK)
        try:
            self.persistence.save_stock_status(corrected)
        except Exception as exc:
            raise StockStatusSaveError(
                evaluation.decision.sku, f"failed to save stock status: {exc}"
            ) from exc
        return True

    def reconcile(
        self, product: CompositeProduct, scope_id: ScopeId, mode: RunMode
    ) -> StockDecision:
        evaluation = self.evaluate(product, scope_id)
        if not self.apply(evaluation, mode):
            return evaluation.decision
        return replace(evaluation.decision, updated=True)

    def _children_of(self, product: CompositeProduct) -> Sequence[ChildProduct]:
        try:
            return self.children.get_children(product.sku)
        except Exception as exc:
            raise StockLookupError(product.sku, f"failed to resolve children: {exc}") from exc

    def _status_of(self, product: CompositeProduct, scope_id: ScopeId) -> StockStatusRecord:
        try:
            return self.statuses.get_stock_status(product.sku, scope_id)
        except Exception as exc:
            raise StockLookupError(product.sku, f"failed to read stock status: {exc}") from exc

    def _quantities_of(
        self,
        product: CompositeProduct,
        children: Sequence[ChildProduct],
        scope_id: ScopeId,
    ) -> list[float | None]:
        quantities: list[float | None] = []
        for child in children:
            try:
                quantities.append(self.quantities.get_stock_qty(child.id, scope_id))
            except Exception as exc:
                raise StockLookupError(
                    product.sku, f"failed to read quantity of child {child.sku}: {exc}"
                ) from exc
        log.debug("Quantities for %s: %s", product.sku, quantities)
        return quantities
