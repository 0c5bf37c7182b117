"""Drive a full stock status reset scan over all composite products."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from stockreset.domain.model import RunMode, StockDecision
from stockreset.domain.report import ReportSink

from .errors import ReconciliationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from stockreset.domain.model import CompositeProduct, Report, ScopeId
    from stockreset.domain.ports import CompositeProductSource

    from .engine import StockStatusReconciler

DEFAULT_PAUSE_SECONDS: Final[float] = 3.0

_BANNERS: Final[dict[RunMode, str]] = {
    RunMode.DRY_RUN: "--DRY RUN-- no changes will be applied",
    RunMode.REPORT: "--REPORT MODE-- no changes will be applied",
}

log = logging.getLogger(__name__)


@dataclass(slots=True)
class StockStatusResetRun:
    """Scan every composite product once, strictly in catalog order.

    Non-APPLY modes announce themselves and pause for ``pause_seconds`` so an
    operator can still abort before the scan starts. With ``continue_on_error``
    a product that fails to reconcile is logged and reported as an error row
    instead of aborting the run. Each persisted correction is committed through
    ``commit`` straight away, so an abort later in the scan keeps earlier ones.
    """

    catalog: CompositeProductSource
    reconciler: StockStatusReconciler
    sink: ReportSink = field(default_factory=ReportSink)
    pause_seconds: float = DEFAULT_PAUSE_SECONDS
    continue_on_error: bool = False
    sleep: Callable[[float], None] = time.sleep
    commit: Callable[[], None] | None = None

    def run(self, mode: RunMode, scope_id: ScopeId) -> Report:
        banner = _BANNERS.get(mode)
        if banner is not None:
            log.info(banner)
            if self.pause_seconds > 0:
                self.sleep(self.pause_seconds)

        products = self.catalog.list_composites()
        log.info("Scanning %d configurables", len(products))

        for product in products:
            log.info("Checking %s", product.sku)
            decision = self._check(product, scope_id, mode)
            self.sink.record(decision)
            if decision.updated:
                if self.commit is not None:
                    self.commit()
                log.info("Updated stock status")
            elif decision.needs_reset:
                log.info("Stock status needs reset (not applied)")

        if mode.writes_report:
            path = self.sink.flush()
            if path is not None:
                log.info("Created report: %s", path)

        report = self.sink.report
        log.info(
            "Checked %d configurables: %d need reset, %d updated, %d failed",
            len(report),
            report.needs_reset_count,
            report.updated_count,
            report.error_count,
        )
        log.info("Done")
        return report

    def _check(self, product: CompositeProduct, scope_id: ScopeId, mode: RunMode) -> StockDecision:
        try:
            return self.reconciler.reconcile(product, scope_id, mode)
        except ReconciliationError as exc:
            if not self.continue_on_error:
                raise
            log.error("Skipping %s: %s", product.sku, exc.__cause__ or exc)  # noqa: TRY400
            return StockDecision(
                sku=product.sku,
                name=product.name,
                needs_reset=False,
                error=str(exc),
            )
