"""Accumulate decisions and write them as a CSV report."""

from __future__ import annotations

import csv
import logging
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Final

from stockreset.domain.model import Report

if TYPE_CHECKING:
    from stockreset.domain.model import StockDecision

REPORT_FILE_PREFIX: Final[str] = "reset-configurable-stock-status-"
REPORT_FILE_SUFFIX: Final[str] = ".csv"

log = logging.getLogger(__name__)


class ReportSink:
    """Collects one row per checked product and flushes them to a CSV file."""

    def __init__(self, directory: Path | None = None) -> None:
        self.directory = directory
        self.report = Report()

    def record(self, decision: StockDecision) -> None:
        self.report.append(decision)

    def flush(self) -> Path | None:
        """Write header and rows to a new file; ``None`` if it cannot be written."""

        directory = self.directory or Path(tempfile.gettempdir())
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                newline="",
                prefix=REPORT_FILE_PREFIX,
                suffix=REPORT_FILE_SUFFIX,
                dir=directory,
                delete=False,
            ) as handle:
                writer = csv.writer(handle)
                writer.writerow(self.report.header)
                writer.writerows(self.report.rows())
        except OSError as exc:
            log.error("ERROR: failed to write to report. (%s)", exc)  # noqa: TRY400
            return None
        return Path(handle.name)


def read_report(path: Path) -> list[list[str]]:
    """Parse a written report back into rows, header first."""

    with path.open(encoding="utf-8", newline="") as handle:
        return [list(row) for row in csv.reader(handle)]
