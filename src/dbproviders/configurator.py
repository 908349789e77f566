"""
Provider selection for the ORM options builder.

Manifesto:
    Picking a database engine is a startup decision.  Turning the declared
    kind into provider options is split in two: a pure resolution step
    that derives an immutable :class:`ProviderSettings`, and an apply step
    that mutates the caller's builder.  Resolution runs first, so an
    unknown kind fails before the builder is touched.

Per-kind behaviour:

    ========  ==============  =============  ===========================
    kind      retry attempts  history table  migration SQL generator
    ========  ==============  =============  ===========================
    sqlite    none            schema prefix  default
    postgres  10              schema prefix  CreateDatabaseStatementGenerator
    mysql     10              schema prefix  default
    ========  ==============  =============  ===========================

Examples:
    >>> builder = DatabaseOptionsBuilder()
    >>> connection = ConnectionConfig("postgresql://db/app", "app:migrations", "app")
    >>> builder = ProviderConfigurator().configure(builder, DatabaseKind.POSTGRES, connection)
    >>> builder.retry_attempts
    10

Tags:
    configuration, provider, sqlalchemy, alembic, factory-pattern

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dbproviders.config.components import (
    CLIENT_SERVER_RETRY_ATTEMPTS,
    ConnectionConfig,
    DatabaseKind,
    ProviderSettings,
)
from dbproviders.errors import InvalidConfigurationError
from dbproviders.logging import get_logger
from dbproviders.migrations.generator import MigrationsSqlGenerator
from dbproviders.migrations.postgres import CreateDatabaseStatementGenerator

if TYPE_CHECKING:
    from dbproviders.orm.options import DatabaseOptionsBuilder

logger = get_logger(__name__)


def _coerce_kind(kind: DatabaseKind | str) -> DatabaseKind:
    try:
        return DatabaseKind(kind)
    except ValueError:
        raise InvalidConfigurationError("database_type", kind) from None


def resolve_provider_settings(kind: DatabaseKind | str, connection: ConnectionConfig) -> ProviderSettings:
    """Derive the provider options for *kind* without touching any builder.

    Raises :class:`InvalidConfigurationError` for an unrecognized kind.
    """
    kind = _coerce_kind(kind)
    history_table = connection.schema_prefix or None

    match kind:
        case DatabaseKind.SQLITE:
            return ProviderSettings(
                kind=kind,
                connection_string=connection.connection_string,
                migrations_assembly=connection.migrations_assembly,
                migrations_history_table=history_table,
            )
        case DatabaseKind.POSTGRES:
            return ProviderSettings(
                kind=kind,
                connection_string=connection.connection_string,
                migrations_assembly=connection.migrations_assembly,
                migrations_history_table=history_table,
                retry_attempts=CLIENT_SERVER_RETRY_ATTEMPTS,
                replace_sql_generator=True,
            )
        case DatabaseKind.MYSQL:
            return ProviderSettings(
                kind=kind,
                connection_string=connection.connection_string,
                migrations_assembly=connection.migrations_assembly,
                migrations_history_table=history_table,
                retry_attempts=CLIENT_SERVER_RETRY_ATTEMPTS,
            )
        case _:
            raise InvalidConfigurationError("database_type", kind)


def apply_provider_settings(builder: DatabaseOptionsBuilder, settings: ProviderSettings) -> DatabaseOptionsBuilder:
    """Write *settings* onto *builder* in place and return it."""
    builder.use_provider(settings.kind, settings.connection_string)
    builder.migrations_assembly(settings.migrations_assembly)

    if settings.migrations_history_table:
        builder.migrations_history_table(settings.migrations_history_table)

    if settings.retry_enabled:
        builder.enable_retry_on_failure(settings.retry_attempts)

    if settings.replace_sql_generator:
        builder.replace_service(MigrationsSqlGenerator, CreateDatabaseStatementGenerator)
        logger.debug("generator.replaced", kind=settings.kind.value, generator=CreateDatabaseStatementGenerator.__name__)

    return builder


class ProviderConfigurator:
    """Configures a :class:`DatabaseOptionsBuilder` for one database kind.

    Stateless; one instance can serve any number of builders.
    """

    def configure(
        self,
        builder: DatabaseOptionsBuilder,
        kind: DatabaseKind | str,
        connection: ConnectionConfig,
    ) -> DatabaseOptionsBuilder:
        settings = resolve_provider_settings(kind, connection)
        apply_provider_settings(builder, settings)

        logger.info(
            "provider.configured",
            kind=settings.kind.value,
            migrations_assembly=settings.migrations_assembly,
            migrations_history_table=settings.migrations_history_table,
            retry_attempts=settings.retry_attempts,
        )
        return builder


def configure_builder(
    builder: DatabaseOptionsBuilder,
    kind: DatabaseKind | str,
    connection: ConnectionConfig,
) -> DatabaseOptionsBuilder:
    """Shortcut for ``ProviderConfigurator().configure(...)``."""
    return ProviderConfigurator().configure(builder, kind, connection)
