"""Domain model for stock status reconciliation."""

from __future__ import annotations

from .catalog import (
    DEFAULT_SCOPE_ID,
    ChildProduct,
    CompositeProduct,
    ScopeId,
    StockStatusRecord,
)
from .decisions import REPORT_HEADER, Report, StockDecision
from .enums import ProductType, RunMode, StockStatus

__all__ = [
    "DEFAULT_SCOPE_ID",
    "REPORT_HEADER",
    "ChildProduct",
    "CompositeProduct",
    "ProductType",
    "Report",
    "RunMode",
    "ScopeId",
    "StockDecision",
    "StockStatus",
    "StockStatusRecord",
]
