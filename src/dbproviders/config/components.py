"""
Database kinds and the value objects exchanged with the configurator.

Example::

    from dbproviders.config.components import ConnectionConfig, DatabaseKind

    connection = ConnectionConfig(
        connection_string="postgresql://app@db/app",
        migrations_assembly="app:migrations",
        schema_prefix="app",
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Attempt budget handed to the ORM connection layer for client-server engines
CLIENT_SERVER_RETRY_ATTEMPTS = 10


class DatabaseKind(str, Enum):
    """Supported database engines."""

    SQLITE = "sqlite"
    POSTGRES = "postgres"
    MYSQL = "mysql"

    @property
    def is_file_based(self) -> bool:
        return self is DatabaseKind.SQLITE


@dataclass(frozen=True, slots=True)
class ConnectionConfig:
    """Connection parameters owned by the caller.

    ``migrations_assembly`` is the Alembic ``script_location`` of the
    migrations package (``"package:dir"`` or a filesystem path).
    """

    connection_string: str
    migrations_assembly: str
    schema_prefix: str | None = None


@dataclass(frozen=True, slots=True)
class ProviderSettings:
    """Provider options derived from a :class:`ConnectionConfig`.

    Built fresh by :func:`~dbproviders.configurator.resolve_provider_settings`
    on every call and applied to a builder in a separate step.
    """

    kind: DatabaseKind
    connection_string: str
    migrations_assembly: str
    migrations_history_table: str | None = None
    retry_attempts: int = 0
    replace_sql_generator: bool = False

    @property
    def retry_enabled(self) -> bool:
        return self.retry_attempts > 0
