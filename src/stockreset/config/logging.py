"""Logging setup for CLI runs.

Every line carries the seconds elapsed since the first logged message, e.g.
``[     2.4s]: Checking CFG-1``.
"""

from __future__ import annotations

import logging
import sys
import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO


class ElapsedTimeFormatter(logging.Formatter):
    """Prefix messages with elapsed seconds since the first formatted record."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        super().__init__("%(message)s")
        self._clock = clock
        self._started_at: float | None = None

    def format(self, record: logging.LogRecord) -> str:
        now = self._clock()
        if self._started_at is None:
            self._started_at = now
        elapsed = now - self._started_at
        return f"[{elapsed:>8.1f}s]: {super().format(record)}"


def configure_logging(
    *,
    level: int = logging.INFO,
    force: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Initialise the root logger once with the elapsed-time format.

    Mirrors ``logging.basicConfig``: a no-op when the root logger already has
    handlers unless ``force=True``.
    """

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ElapsedTimeFormatter())
    logging.basicConfig(level=level, handlers=[handler], force=force)
