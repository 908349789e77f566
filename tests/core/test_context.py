"""Tests for the database context factories."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import text

from dbproviders.config.components import DatabaseKind
from dbproviders.config.settings import DatabaseSettings
from dbproviders.configurator import ProviderConfigurator
from dbproviders.errors import InvalidConfigurationError
from dbproviders.migrations.postgres import CreateDatabaseStatementGenerator
from dbproviders.orm.context import BaseDatabaseContextFactory, SessionContextFactory
from dbproviders.orm.options import DatabaseOptionsBuilder
from dbproviders.orm.session import ProviderSession


class _BuilderContextFactory(BaseDatabaseContextFactory[DatabaseOptionsBuilder]):
    """Minimal subclass whose "context" is the configured builder itself."""

    def create_context(self) -> DatabaseOptionsBuilder:
        return self.create_builder()


@pytest.fixture
def sqlite_settings() -> DatabaseSettings:
    return DatabaseSettings(database_type=DatabaseKind.SQLITE, connection_string="sqlite:///:memory:")


class TestBaseDatabaseContextFactory:
    def test_is_abstract(self, sqlite_settings):
        with pytest.raises(TypeError):
            BaseDatabaseContextFactory(sqlite_settings, "app:migrations")  # type: ignore[abstract]

    def test_factory_arguments_reach_builder(self):
        settings = DatabaseSettings(
            database_type=DatabaseKind.POSTGRES,
            connection_string="postgresql://db/app",
            migrations_assembly="ignored:migrations",
            schema_prefix="ignored",
        )
        builder = _BuilderContextFactory(settings, "billing:migrations", "billing").create_context()

        assert builder.provider is DatabaseKind.POSTGRES
        assert builder.migrations_assembly_name == "billing:migrations"
        assert builder.migrations_history_table_name == "billing"
        assert builder.retry_attempts == 10
        assert isinstance(builder.create_sql_generator(), CreateDatabaseStatementGenerator)

    def test_empty_schema_prefix_means_no_override(self, sqlite_settings):
        builder = _BuilderContextFactory(sqlite_settings, "app:migrations").create_context()
        assert builder.migrations_history_table_name is None

    def test_uses_injected_configurator(self, sqlite_settings):
        configurator = MagicMock(spec=ProviderConfigurator)
        configurator.configure.side_effect = lambda b, *_: b
        _BuilderContextFactory(sqlite_settings, "app:migrations", configurator=configurator).create_context()
        configurator.configure.assert_called_once()
        _, kind, connection = configurator.configure.call_args.args
        assert kind is DatabaseKind.SQLITE
        assert connection.migrations_assembly == "app:migrations"

    def test_invalid_kind_propagates(self, sqlite_settings):
        settings = sqlite_settings.model_copy(update={"database_type": "oracle"})
        with pytest.raises(InvalidConfigurationError):
            _BuilderContextFactory(settings, "app:migrations").create_context()


class TestSessionContextFactory:
    def test_creates_working_sqlite_session(self, sqlite_settings):
        with SessionContextFactory(sqlite_settings, "app:migrations") as factory:
            session = factory.create_context()
            assert isinstance(session, ProviderSession)
            assert session.execute(text("SELECT 1")).scalar() == 1
            session.close()

    def test_session_does_not_expire_on_commit(self, sqlite_settings):
        with SessionContextFactory(sqlite_settings, "app:migrations") as factory:
            with factory.create_context() as session:
                assert session.expire_on_commit is False

    def test_engine_is_built_once(self, sqlite_settings):
        with SessionContextFactory(sqlite_settings, "app:migrations") as factory:
            assert factory.engine is factory.engine

    def test_close_disposes_engine(self, sqlite_settings):
        factory = SessionContextFactory(sqlite_settings, "app:migrations")
        first = factory.engine
        factory.close()
        assert factory.engine is not first
        factory.close()

    @patch("sqlalchemy.create_engine")
    def test_client_server_engine_uses_pool_settings(self, mock_create):
        settings = DatabaseSettings(
            database_type=DatabaseKind.MYSQL,
            connection_string="mysql+pymysql://db/app",
            pool_size=3,
            max_overflow=4,
        )
        factory = SessionContextFactory(settings, "app:migrations")
        assert factory.engine is mock_create.return_value
        kwargs = mock_create.call_args.kwargs
        assert kwargs["pool_size"] == 3
        assert kwargs["max_overflow"] == 4
