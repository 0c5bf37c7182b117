"""Errors raised while reconciling a single composite product."""

from __future__ import annotations


class ReconciliationError(RuntimeError):
    """Base error for a product that could not be reconciled."""

    def __init__(self, sku: str, message: str) -> None:
        super().__init__(f"{sku}: {message}")
        self.sku = sku


class StockLookupError(ReconciliationError):
    """Raised when children, status or quantities cannot be read."""


class StockStatusSaveError(ReconciliationError):
    """Raised when a corrected stock status cannot be persisted."""
