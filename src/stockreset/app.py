"""Application orchestration entry points."""

from __future__ import annotations

import time
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from stockreset.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    is_started,
    startup,
)
from stockreset.config import get_reset_config
from stockreset.domain.ports.unit_of_work import CatalogUnitOfWork
from stockreset.domain.reconciliation import StockStatusReconciler, StockStatusResetRun
from stockreset.domain.report import ReportSink

if TYPE_CHECKING:
    from stockreset.config import ResetConfig
    from stockreset.domain.model import Report, RunMode

UnitOfWorkFactory = Callable[[], CatalogUnitOfWork]


log = getLogger(__name__)


def reset_configurable_stock_status(
    *,
    mode: RunMode,
    config: ResetConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    database_uri: str | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Report:
    """Reset configurable products to in stock where a child has stock available."""

    effective_config = config or get_reset_config()
    if unit_of_work_factory is None:
        if not is_started():
            startup(database_uri=database_uri)
        unit_of_work_factory = SqlAlchemyCatalogUnitOfWork

    log.debug(
        "Starting stock status reset: mode=%s, scope_id=%s, continue_on_error=%s",
        mode,
        effective_config.scope_id,
        effective_config.continue_on_error,
    )

    with unit_of_work_factory() as uow:
        repositories = uow.repositories
        reconciler = StockStatusReconciler(
            children=repositories.catalog,
            statuses=repositories.stock,
            quantities=repositories.stock,
            persistence=repositories.stock,
        )
        run = StockStatusResetRun(
            catalog=repositories.catalog,
            reconciler=reconciler,
            sink=ReportSink(directory=effective_config.report_dir),
            pause_seconds=effective_config.pause_seconds,
            continue_on_error=effective_config.continue_on_error,
            sleep=sleep,
            commit=uow.commit,
        )
        return run.run(mode, scope_id=effective_config.scope_id)
