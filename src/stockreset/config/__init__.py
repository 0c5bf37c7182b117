"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import ElapsedTimeFormatter, configure_logging
from .reset import ResetConfig, get_reset_config
from .storage import DatabaseConfig, get_database_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "ElapsedTimeFormatter",
    "ResetConfig",
    "configure_logging",
    "get_database_config",
    "get_reset_config",
]
