"""Per-product decisions and the report that collects them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

REPORT_HEADER: Final[tuple[str, str, str]] = ("Parent SKU", "Parent Name", "Needs Reset")


@dataclass(frozen=True, slots=True)
class StockDecision:
    """Outcome of checking one composite product.

    ``needs_reset`` records what would happen, or did happen, independent of the
    run mode. ``error`` is only set when a failing product was skipped instead
    of aborting the run.
    """

    sku: str
    name: str
    needs_reset: bool
    updated: bool = False
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def as_row(self) -> list[str]:
        if self.failed:
            flag = "Error"
        else:
            flag = "Yes" if self.needs_reset else "No"
        return [self.sku, self.name, flag]


@dataclass(slots=True)
class Report:
    """Ordered decisions of one run, in scan order."""

    decisions: list[StockDecision] = field(default_factory=list)

    def append(self, decision: StockDecision) -> None:
        self.decisions.append(decision)

    def __iter__(self) -> Iterator[StockDecision]:
        return iter(self.decisions)

    def __len__(self) -> int:
        return len(self.decisions)

    @property
    def header(self) -> list[str]:
        return list(REPORT_HEADER)

    def rows(self) -> list[list[str]]:
        return [decision.as_row() for decision in self.decisions]

    @property
    def needs_reset_count(self) -> int:
        return sum(1 for decision in self.decisions if decision.needs_reset)

    @property
    def updated_count(self) -> int:
        return sum(1 for decision in self.decisions if decision.updated)

    @property
    def error_count(self) -> int:
        return sum(1 for decision in self.decisions if decision.failed)
