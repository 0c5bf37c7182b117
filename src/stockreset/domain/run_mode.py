"""Derive the run mode from invocation arguments."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from stockreset.domain.model import RunMode

if TYPE_CHECKING:
    from collections.abc import Sequence

DRY_RUN_FLAG: Final[str] = "--dry-run"
REPORT_MODE_FLAG: Final[str] = "--report-mode"


def _trailing_argument(argv: Sequence[str]) -> str | None:
    if not argv:
        return None
    return argv[-1].casefold()


def resolve_run_mode(argv: Sequence[str]) -> RunMode:
    """Return the mode selected by the last argument.

    Only the final argument is inspected. Anything other than ``--report-mode``
    or ``--dry-run`` (case-insensitive) selects APPLY.
    """

    trailing = _trailing_argument(argv)
    if trailing == REPORT_MODE_FLAG:
        return RunMode.REPORT
    if trailing == DRY_RUN_FLAG:
        return RunMode.DRY_RUN
    return RunMode.APPLY


def is_unrecognised_flag(argv: Sequence[str]) -> bool:
    """Whether the last argument looks like an option but selects no mode."""

    trailing = _trailing_argument(argv)
    if trailing is None or not trailing.startswith("-"):
        return False
    return trailing not in (DRY_RUN_FLAG, REPORT_MODE_FLAG)
