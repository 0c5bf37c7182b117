from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003

import pytest

from stockreset.domain.model import RunMode, StockStatus
from stockreset.domain.reconciliation import (
    StockLookupError,
    StockStatusReconciler,
    StockStatusResetRun,
)
from stockreset.domain.report import ReportSink, read_report
from tests.support.catalog import FakeCatalog, make_scenario_catalog

EXPECTED_ROWS = [
    ["CFG-1", "Widget", "Yes"],
    ["CFG-2", "Gadget", "No"],
    ["CFG-3", "Gizmo", "No"],
    ["CFG-4", "Empty", "No"],
]


def _run(
    catalog: FakeCatalog,
    *,
    tmp_path: Path,
    pauses: list[float] | None = None,
    continue_on_error: bool = False,
    commits: list[str] | None = None,
) -> StockStatusResetRun:
    recorded = pauses if pauses is not None else []
    return StockStatusResetRun(
        catalog=catalog,
        reconciler=StockStatusReconciler(
            children=catalog,
            statuses=catalog,
            quantities=catalog,
            persistence=catalog,
        ),
        sink=ReportSink(directory=tmp_path),
        pause_seconds=3,
        continue_on_error=continue_on_error,
        sleep=recorded.append,
        commit=(lambda: commits.append("commit")) if commits is not None else None,
    )


def _messages(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [record.getMessage() for record in caplog.records]


@pytest.mark.parametrize("mode", list(RunMode))
def test_report_has_one_row_per_product_in_scan_order(mode: RunMode, tmp_path: Path) -> None:
    catalog = make_scenario_catalog()

    report = _run(catalog, tmp_path=tmp_path).run(mode, scope_id=0)

    assert report.rows() == EXPECTED_ROWS


def test_apply_mode_updates_only_products_needing_reset(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO)
    catalog = make_scenario_catalog()
    pauses: list[float] = []

    report = _run(catalog, tmp_path=tmp_path, pauses=pauses).run(RunMode.APPLY, scope_id=0)

    assert [record.sku for record in catalog.saved] == ["CFG-1"]
    assert catalog.status_of("CFG-1") is StockStatus.IN_STOCK
    assert catalog.status_of("CFG-2") is StockStatus.OUT_OF_STOCK
    assert report.updated_count == 1
    assert pauses == []
    assert list(tmp_path.iterdir()) == []
    messages = _messages(caplog)
    assert messages[0] == "Scanning 4 configurables"
    assert messages[1:4] == ["Checking CFG-1", "Updated stock status", "Checking CFG-2"]
    assert messages[-1] == "Done"


@pytest.mark.parametrize(
    ("mode", "banner"),
    [
        (RunMode.DRY_RUN, "--DRY RUN-- no changes will be applied"),
        (RunMode.REPORT, "--REPORT MODE-- no changes will be applied"),
    ],
)
def test_non_apply_modes_announce_pause_and_leave_statuses(
    mode: RunMode,
    banner: str,
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.INFO)
    catalog = make_scenario_catalog()
    pauses: list[float] = []

    report = _run(catalog, tmp_path=tmp_path, pauses=pauses).run(mode, scope_id=0)

    assert catalog.saved == []
    assert catalog.status_of("CFG-1") is StockStatus.OUT_OF_STOCK
    assert report.needs_reset_count == 1
    assert report.updated_count == 0
    assert pauses == [3]
    messages = _messages(caplog)
    assert messages[0] == banner
    assert "Updated stock status" not in messages
    assert "Stock status needs reset (not applied)" in messages
    assert messages[-1] == "Done"


def test_zero_pause_skips_sleep(tmp_path: Path) -> None:
    catalog = make_scenario_catalog()
    pauses: list[float] = []
    run = _run(catalog, tmp_path=tmp_path, pauses=pauses)
    run.pause_seconds = 0

    run.run(RunMode.DRY_RUN, scope_id=0)

    assert pauses == []


def test_report_mode_writes_csv(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)
    catalog = make_scenario_catalog()

    _run(catalog, tmp_path=tmp_path).run(RunMode.REPORT, scope_id=0)

    files = list(tmp_path.iterdir())
    assert len(files) == 1
    assert files[0].name.startswith("reset-configurable-stock-status-")
    assert files[0].suffix == ".csv"
    assert read_report(files[0]) == [["Parent SKU", "Parent Name", "Needs Reset"], *EXPECTED_ROWS]
    assert f"Created report: {files[0]}" in _messages(caplog)


def test_dry_run_writes_no_report(tmp_path: Path) -> None:
    _run(make_scenario_catalog(), tmp_path=tmp_path).run(RunMode.DRY_RUN, scope_id=0)

    assert list(tmp_path.iterdir()) == []


def test_report_write_failure_still_completes(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO)
    run = _run(make_scenario_catalog(), tmp_path=tmp_path)
    run.sink.directory = tmp_path / "missing"

    report = run.run(RunMode.REPORT, scope_id=0)

    assert len(report) == 4
    messages = _messages(caplog)
    assert any(message.startswith("ERROR: failed to write to report.") for message in messages)
    assert messages[-1] == "Done"


def test_lookup_failure_aborts_the_run_by_default(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO)
    catalog = make_scenario_catalog()
    catalog.fail_children_for.add("CFG-2")

    with pytest.raises(StockLookupError):
        _run(catalog, tmp_path=tmp_path).run(RunMode.APPLY, scope_id=0)

    assert [record.sku for record in catalog.saved] == ["CFG-1"]
    assert "Done" not in _messages(caplog)


def test_each_correction_is_committed_before_the_scan_continues(tmp_path: Path) -> None:
    catalog = make_scenario_catalog()
    catalog.fail_children_for.add("CFG-2")
    commits: list[str] = []

    with pytest.raises(StockLookupError):
        _run(catalog, tmp_path=tmp_path, commits=commits).run(RunMode.APPLY, scope_id=0)

    assert commits == ["commit"]


@pytest.mark.parametrize("mode", [RunMode.DRY_RUN, RunMode.REPORT])
def test_non_apply_modes_never_commit(mode: RunMode, tmp_path: Path) -> None:
    commits: list[str] = []

    _run(make_scenario_catalog(), tmp_path=tmp_path, commits=commits).run(mode, scope_id=0)

    assert commits == []


def test_continue_on_error_records_failed_row(tmp_path: Path) -> None:
    catalog = make_scenario_catalog()
    catalog.fail_children_for.add("CFG-2")

    report = _run(catalog, tmp_path=tmp_path, continue_on_error=True).run(
        RunMode.APPLY, scope_id=0
    )

    assert report.rows()[1] == ["CFG-2", "Gadget", "Error"]
    assert report.error_count == 1
    assert len(report) == 4
    assert catalog.status_of("CFG-1") is StockStatus.IN_STOCK


def test_empty_catalog_completes(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    report = _run(FakeCatalog(), tmp_path=tmp_path).run(RunMode.APPLY, scope_id=0)

    assert len(report) == 0
    assert _messages(caplog)[0] == "Scanning 0 configurables"
