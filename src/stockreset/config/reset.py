"""Settings for a stock status reset run."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from stockreset.domain.model import DEFAULT_SCOPE_ID
from stockreset.domain.reconciliation import DEFAULT_PAUSE_SECONDS

from .env import env_bool, env_float, env_int
from .errors import ConfigurationError


def _default_report_dir() -> Path:
    return Path(tempfile.gettempdir())


@dataclass(frozen=True, slots=True)
class ResetConfig:
    """Holds the knobs of a reset run.

    ``scope_id`` is the store/website scope inspected for the whole run (0 is
    the global scope). ``pause_seconds`` is the safety pause before a
    non-applying scan and may be 0 for unattended runs.
    """

    scope_id: int = DEFAULT_SCOPE_ID
    pause_seconds: float = DEFAULT_PAUSE_SECONDS
    report_dir: Path = field(default_factory=_default_report_dir)
    continue_on_error: bool = False

    def __post_init__(self) -> None:
        if self.scope_id < 0:
            raise ConfigurationError("Scope id must be non-negative")
        if self.pause_seconds < 0:
            raise ConfigurationError("Pause seconds must be non-negative")

    @classmethod
    def from_environment(cls) -> ResetConfig:
        report_dir = os.getenv("STOCK_RESET_REPORT_DIR")
        return cls(
            scope_id=env_int("STOCK_RESET_SCOPE_ID", DEFAULT_SCOPE_ID),
            pause_seconds=env_float("STOCK_RESET_PAUSE_SECONDS", DEFAULT_PAUSE_SECONDS),
            report_dir=Path(report_dir).expanduser() if report_dir else _default_report_dir(),
            continue_on_error=env_bool("STOCK_RESET_CONTINUE_ON_ERROR", default=False),
        )


def get_reset_config() -> ResetConfig:
    return ResetConfig.from_environment()
