"""dbproviders - uniform SQLAlchemy/Alembic configuration for SQLite, PostgreSQL and MySQL.

The provider layer turns a declared :class:`DatabaseKind` plus connection
parameters into options on a :class:`DatabaseOptionsBuilder`, and on
PostgreSQL swaps in a migration SQL generator that always creates databases
with the byte-order (``C``) locale so text indexes stay usable.

Quick start::

    from dbproviders import (
        ConnectionConfig, DatabaseKind, DatabaseOptionsBuilder, configure_builder,
    )

    builder = DatabaseOptionsBuilder()
    configure_builder(
        builder,
        DatabaseKind.POSTGRES,
        ConnectionConfig("postgresql://app@db/app", "app:migrations", "app"),
    )
"""

from dbproviders.config import (
    ConnectionConfig,
    DatabaseKind,
    DatabaseSettings,
    ProviderSettings,
    get_settings,
)
from dbproviders.configurator import (
    ProviderConfigurator,
    apply_provider_settings,
    configure_builder,
    resolve_provider_settings,
)
from dbproviders.errors import (
    ConfigError,
    InvalidConfigurationError,
    MissingConfigError,
    ProviderError,
    ProviderRuntimeFailure,
    UnsupportedOperationError,
)
from dbproviders.migrations import (
    CreateDatabaseOperation,
    CreateDatabaseStatementGenerator,
    MigrationCommand,
    MigrationsSqlGenerator,
)
from dbproviders.orm import (
    BaseDatabaseContextFactory,
    DatabaseOptionsBuilder,
    SessionContextFactory,
)

__version__ = "0.1.0"

__all__ = [
    "BaseDatabaseContextFactory",
    "ConfigError",
    "ConnectionConfig",
    "CreateDatabaseOperation",
    "CreateDatabaseStatementGenerator",
    "DatabaseKind",
    "DatabaseOptionsBuilder",
    "DatabaseSettings",
    "InvalidConfigurationError",
    "MigrationCommand",
    "MigrationsSqlGenerator",
    "MissingConfigError",
    "ProviderConfigurator",
    "ProviderError",
    "ProviderRuntimeFailure",
    "ProviderSettings",
    "SessionContextFactory",
    "UnsupportedOperationError",
    "apply_provider_settings",
    "configure_builder",
    "get_settings",
    "resolve_provider_settings",
]
