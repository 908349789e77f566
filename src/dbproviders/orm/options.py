"""Options builder consumed by the ORM runtime.

:class:`DatabaseOptionsBuilder` is the object the configurator mutates.  It
records which engine to talk to, where the Alembic migrations live, the
migration-history table override, the declared retry budget, and a small
service registry through which provider-specific components (the migration
SQL generator) can be swapped.

Example::

    builder = DatabaseOptionsBuilder()
    configure_builder(builder, DatabaseKind.POSTGRES, connection)

    engine = builder.build_engine(pool_size=5)
    commands = builder.create_sql_generator().generate(
        [CreateDatabaseOperation("billing")]
    )
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.engine import Engine

from dbproviders.config.components import DatabaseKind
from dbproviders.errors import InvalidConfigurationError, MissingConfigError
from dbproviders.logging import get_logger
from dbproviders.migrations.commands import SqlGenerationHelper
from dbproviders.migrations.generator import MigrationsSqlGenerator

from .session import create_provider_engine

logger = get_logger(__name__)

# Default implementation for each replaceable service
_DEFAULT_SERVICES: dict[type, type] = {
    MigrationsSqlGenerator: MigrationsSqlGenerator,
}


class DatabaseOptionsBuilder:
    """Mutable provider options, owned by one caller at a time."""

    def __init__(self) -> None:
        self.provider: DatabaseKind | None = None
        self.connection_string: str | None = None
        self.migrations_assembly_name: str | None = None
        self.migrations_history_table_name: str | None = None
        self.retry_attempts: int | None = None
        self._services: dict[type, type] = {}

    # ── Provider options ─────────────────────────────────────────

    def use_provider(self, kind: DatabaseKind, connection_string: str) -> DatabaseOptionsBuilder:
        self.provider = DatabaseKind(kind)
        self.connection_string = connection_string
        return self

    def migrations_assembly(self, name: str) -> DatabaseOptionsBuilder:
        self.migrations_assembly_name = name
        return self

    def migrations_history_table(self, name: str) -> DatabaseOptionsBuilder:
        self.migrations_history_table_name = name
        return self

    def enable_retry_on_failure(self, max_retry_count: int) -> DatabaseOptionsBuilder:
        """Declare the retry budget for transient connection failures.

        The count is read by the ORM connection layer; nothing here retries.
        """
        self.retry_attempts = max_retry_count
        return self

    @property
    def is_configured(self) -> bool:
        return self.provider is not None

    # ── Services ─────────────────────────────────────────────────

    def replace_service(self, service: type, implementation: type) -> DatabaseOptionsBuilder:
        if service not in _DEFAULT_SERVICES:
            raise InvalidConfigurationError("service", service.__name__, f"Unknown service: {service.__name__}")
        if not issubclass(implementation, service):
            raise InvalidConfigurationError(
                "service",
                implementation.__name__,
                f"{implementation.__name__} does not implement {service.__name__}",
            )
        self._services[service] = implementation
        logger.debug("service.replaced", service=service.__name__, implementation=implementation.__name__)
        return self

    def get_service(self, service: type) -> type:
        if service in self._services:
            return self._services[service]
        try:
            return _DEFAULT_SERVICES[service]
        except KeyError:
            raise InvalidConfigurationError("service", service.__name__, f"Unknown service: {service.__name__}") from None

    @property
    def replaced_services(self) -> dict[type, type]:
        """Services explicitly replaced on this builder."""
        return dict(self._services)

    def create_sql_generator(self) -> MigrationsSqlGenerator:
        """Instantiate the active migration SQL generator for the configured provider."""
        kind = self._require_provider()
        generator_cls = self.get_service(MigrationsSqlGenerator)
        return generator_cls(SqlGenerationHelper.for_kind(kind))

    # ── Runtime hand-off ─────────────────────────────────────────

    def migration_context_options(self) -> dict[str, Any]:
        """Keyword arguments for Alembic's ``context.configure`` in ``env.py``."""
        options: dict[str, Any] = {}
        if self.migrations_history_table_name:
            options["version_table"] = self.migrations_history_table_name
        if self.provider == DatabaseKind.SQLITE:
            options["render_as_batch"] = True  # SQLite ALTER TABLE support
        return options

    def alembic_config(self) -> Any:
        """Build an :class:`alembic.config.Config` for the configured provider.

        ``script_location`` comes from the migrations assembly; the history
        table override is exposed as the ``version_table`` main option for
        ``env.py`` to pass on.
        """
        from alembic.config import Config

        self._require_provider()
        if not self.migrations_assembly_name:
            raise MissingConfigError("migrations_assembly")

        config = Config()
        config.set_main_option("script_location", self.migrations_assembly_name)
        # ConfigParser interpolation: escape '%' in URLs with encoded passwords
        config.set_main_option("sqlalchemy.url", (self.connection_string or "").replace("%", "%%"))
        if self.migrations_history_table_name:
            config.set_main_option("version_table", self.migrations_history_table_name)
        return config

    def build_engine(self, **engine_kwargs: Any) -> Engine:
        kind = self._require_provider()
        if not self.connection_string:
            raise MissingConfigError("connection_string")
        return create_provider_engine(kind, self.connection_string, **engine_kwargs)

    def _require_provider(self) -> DatabaseKind:
        if self.provider is None:
            raise MissingConfigError("provider", "No database provider configured on this builder")
        return self.provider
