from __future__ import annotations

import pytest

from stockreset.domain.model import RunMode
from stockreset.domain.run_mode import is_unrecognised_flag, resolve_run_mode


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        ([], RunMode.APPLY),
        (["--dry-run"], RunMode.DRY_RUN),
        (["--DRY-RUN"], RunMode.DRY_RUN),
        (["--report-mode"], RunMode.REPORT),
        (["--Report-Mode"], RunMode.REPORT),
        (["--dry-run", "--report-mode"], RunMode.REPORT),
        (["--report-mode", "--dry-run"], RunMode.DRY_RUN),
        (["--dry-run", "extra"], RunMode.APPLY),
        (["--verbose"], RunMode.APPLY),
    ],
)
def test_resolve_run_mode_uses_last_argument(argv: list[str], expected: RunMode) -> None:
    assert resolve_run_mode(argv) is expected


def test_report_mode_implies_no_persistence() -> None:
    assert RunMode.REPORT.persists_changes is False
    assert RunMode.REPORT.writes_report is True
    assert RunMode.DRY_RUN.persists_changes is False
    assert RunMode.DRY_RUN.writes_report is False
    assert RunMode.APPLY.persists_changes is True


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        ([], False),
        (["--dry-run"], False),
        (["--REPORT-MODE"], False),
        (["--dryrun"], True),
        (["-n"], True),
        (["positional"], False),
    ],
)
def test_is_unrecognised_flag(argv: list[str], *, expected: bool) -> None:
    assert is_unrecognised_flag(argv) is expected
