"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class StockStatus(IntEnum):
    """Aggregate availability flag as persisted by the inventory store."""

    OUT_OF_STOCK = 0
    IN_STOCK = 1


class ProductType(StrEnum):
    SIMPLE = "simple"
    CONFIGURABLE = "configurable"


class RunMode(StrEnum):
    """Execution mode of a reset run; decided once at start."""

    APPLY = "apply"
    DRY_RUN = "dry-run"
    REPORT = "report"

    @property
    def persists_changes(self) -> bool:
        return self is RunMode.APPLY

    @property
    def writes_report(self) -> bool:
        return self is RunMode.REPORT
