"""Database context factories.

:class:`BaseDatabaseContextFactory` binds a :class:`DatabaseSettings` to a
migrations package and schema prefix, and knows how to configure an options
builder for the declared engine.  Subclasses decide what a "context" is;
:class:`SessionContextFactory` hands out SQLAlchemy sessions.

Usage::

    factory = SessionContextFactory(get_settings(), "billing:migrations", "billing")
    with factory.create_context() as session:
        session.execute(text("SELECT 1"))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from sqlalchemy.engine import Engine

from dbproviders.config.components import ConnectionConfig
from dbproviders.config.settings import DatabaseSettings
from dbproviders.configurator import ProviderConfigurator

from .options import DatabaseOptionsBuilder
from .session import ProviderSession, session_factory

T = TypeVar("T")


class BaseDatabaseContextFactory(ABC, Generic[T]):
    """Creates database contexts of type ``T`` for one configured provider."""

    def __init__(
        self,
        settings: DatabaseSettings,
        migrations_assembly: str,
        schema_prefix: str = "",
        configurator: ProviderConfigurator | None = None,
    ) -> None:
        self._settings = settings
        self._migrations_assembly = migrations_assembly
        self._schema_prefix = schema_prefix
        self._configurator = configurator or ProviderConfigurator()

    @property
    def settings(self) -> DatabaseSettings:
        return self._settings

    def configure_builder(self, builder: DatabaseOptionsBuilder) -> DatabaseOptionsBuilder:
        connection = ConnectionConfig(
            connection_string=self._settings.connection_string,
            migrations_assembly=self._migrations_assembly,
            schema_prefix=self._schema_prefix or None,
        )
        return self._configurator.configure(builder, self._settings.database_type, connection)

    def create_builder(self) -> DatabaseOptionsBuilder:
        return self.configure_builder(DatabaseOptionsBuilder())

    @abstractmethod
    def create_context(self) -> T:
        """Return a ready-to-use database context."""


class SessionContextFactory(BaseDatabaseContextFactory[ProviderSession]):
    """Hands out :class:`ProviderSession` objects over one lazily built engine."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._builder: DatabaseOptionsBuilder | None = None
        self._engine: Engine | None = None

    @property
    def builder(self) -> DatabaseOptionsBuilder:
        if self._builder is None:
            self._builder = self.create_builder()
        return self._builder

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            if self._settings.is_sqlite:
                self._engine = self.builder.build_engine(echo=self._settings.echo)
            else:
                self._engine = self.builder.build_engine(
                    echo=self._settings.echo,
                    pool_size=self._settings.pool_size,
                    max_overflow=self._settings.max_overflow,
                )
        return self._engine

    def create_context(self) -> ProviderSession:
        return session_factory(self.engine)()

    def close(self) -> None:
        """Dispose the engine, if one was created."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def __enter__(self) -> SessionContextFactory:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
