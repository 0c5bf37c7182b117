#!/usr/bin/env python3
"""Reset configurable product stock status.

Use when configurable products are falsely marked out of stock. Every
configurable product whose children include at least one child with available
quantity is reset to in stock.

Usage::

    stock-status-reset                 # apply changes
    stock-status-reset --dry-run       # simulate, no changes applied
    stock-status-reset --report-mode   # simulate and write a CSV report

The scope and safety pause are read from ``STOCK_RESET_SCOPE_ID`` and
``STOCK_RESET_PAUSE_SECONDS``; the store from the required ``DATABASE_URI``.
"""

# ruff: noqa: T201

from __future__ import annotations

import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from stockreset.app import reset_configurable_stock_status
from stockreset.config import (
    ConfigurationError,
    configure_logging,
    get_database_config,
    get_reset_config,
)
from stockreset.domain.run_mode import is_unrecognised_flag, resolve_run_mode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    mode = resolve_run_mode(args_list)
    if is_unrecognised_flag(args_list):
        log.warning("Unrecognised option %s, running in %s mode", args_list[-1], mode)

    try:
        config = get_reset_config()
        database = get_database_config()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)

    try:
        reset_configurable_stock_status(mode=mode, config=config, database_uri=database.uri)
    except Exception as e:  # noqa: BLE001
        log.debug("Fatal error during stock status reset", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
