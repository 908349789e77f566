"""
Centralized database settings.

:class:`DatabaseSettings` is the configuration-loading collaborator of the
provider layer: it reads ``DBPROVIDERS_*`` environment variables (or a
``.env`` file), validates them once, and hands the configurator a
:class:`~dbproviders.config.components.ConnectionConfig`.

An unknown ``DBPROVIDERS_DATABASE_TYPE`` fails pydantic validation here,
before any builder is touched.

Tags:
    configuration, settings, pydantic, caching, validation

Doc-Types:
    api-reference
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .components import ConnectionConfig, DatabaseKind


class DatabaseSettings(BaseSettings):
    """Database provider configuration.

    All fields can be set via ``DBPROVIDERS_*`` environment variables (e.g.
    ``DBPROVIDERS_DATABASE_TYPE=postgres``) or through a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="DBPROVIDERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Provider ─────────────────────────────────────────────────
    database_type: DatabaseKind = Field(default=DatabaseKind.SQLITE)
    connection_string: str = Field(default="sqlite:///data/app.db")
    migrations_assembly: str = Field(default="migrations", description="Alembic script_location")
    schema_prefix: str = Field(default="", description="Overrides the migration-history table name")

    # ── Engine ───────────────────────────────────────────────────
    echo: bool = Field(default=False)
    pool_size: int = Field(default=5)
    max_overflow: int = Field(default=10)

    def connection_config(self) -> ConnectionConfig:
        return ConnectionConfig(
            connection_string=self.connection_string,
            migrations_assembly=self.migrations_assembly,
            schema_prefix=self.schema_prefix or None,
        )

    @property
    def is_sqlite(self) -> bool:
        return self.database_type == DatabaseKind.SQLITE


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, DatabaseSettings] = {}


def get_settings(*, env_file: str | None = None, _force_reload: bool = False) -> DatabaseSettings:
    """Load, validate, and cache a :class:`DatabaseSettings` instance.

    Parameters
    ----------
    env_file:
        Explicit ``.env`` file.  Defaults to ``.env`` in the working directory.
    _force_reload:
        Bypass cache and reload from the environment.
    """
    cache_key = env_file or ""
    if not _force_reload and cache_key in _settings_cache:
        return _settings_cache[cache_key]

    if env_file is not None:
        settings = DatabaseSettings(_env_file=env_file)  # type: ignore[call-arg]
    else:
        settings = DatabaseSettings()

    _settings_cache[cache_key] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()
