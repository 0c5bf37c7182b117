"""Catalog database configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import env_required

DATABASE_URI_VAR: Final[str] = "DATABASE_URI"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    """Connection settings for the catalog and inventory store."""

    uri: str

    @classmethod
    def from_environment(cls) -> DatabaseConfig:
        return cls(uri=env_required(DATABASE_URI_VAR))


def get_database_config() -> DatabaseConfig:
    return DatabaseConfig.from_environment()
