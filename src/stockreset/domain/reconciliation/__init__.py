"""Stock status reconciliation: per-product decisions and the scan driving them."""

from __future__ import annotations

from .engine import StockEvaluation, StockStatusReconciler, has_available_child
from .errors import ReconciliationError, StockLookupError, StockStatusSaveError
from .orchestrator import DEFAULT_PAUSE_SECONDS, StockStatusResetRun

__all__ = [
    "DEFAULT_PAUSE_SECONDS",
    "ReconciliationError",
    "StockEvaluation",
    "StockLookupError",
    "StockStatusReconciler",
    "StockStatusResetRun",
    "StockStatusSaveError",
    "has_available_child",
]
