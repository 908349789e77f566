"""Statement building blocks for migration SQL generation.

This module provides:

* ``SqlGenerationHelper``        -- Identifier delimiting and terminators for
  one provider, backed by the SQLAlchemy dialect's identifier preparer.
* ``MigrationCommandListBuilder`` -- Accumulates SQL text and cuts it into
  ``MigrationCommand`` objects.
* ``MigrationCommand``           -- One terminated statement plus whether it
  must run outside a transaction.

Tags:
    migrations, ddl, sqlalchemy, dialect, quoting

Doc-Types:
    api-reference
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.engine import Dialect

from dbproviders.config.components import DatabaseKind


def _dialect_for(kind: DatabaseKind) -> Dialect:
    # A named paramstyle keeps the preparer from doubling "%" in identifiers.
    match kind:
        case DatabaseKind.SQLITE:
            from sqlalchemy.dialects.sqlite.base import SQLiteDialect

            return SQLiteDialect(paramstyle="named")
        case DatabaseKind.POSTGRES:
            from sqlalchemy.dialects.postgresql.base import PGDialect

            return PGDialect(paramstyle="named")
        case DatabaseKind.MYSQL:
            from sqlalchemy.dialects.mysql.base import MySQLDialect

            return MySQLDialect(paramstyle="named")
    raise ValueError(f"Unknown database kind: {kind!r}")


class SqlGenerationHelper:
    """Quoting rules for one SQL dialect.

    ``delimit_identifier`` always quotes, even for names that would be legal
    unquoted, and escapes embedded quote characters.  Generated DDL must never
    interpolate a name that has not been through it.
    """

    statement_terminator = ";"

    def __init__(self, dialect: Dialect) -> None:
        self._dialect = dialect
        self._preparer = dialect.identifier_preparer

    @classmethod
    def for_kind(cls, kind: DatabaseKind) -> SqlGenerationHelper:
        return cls(_dialect_for(DatabaseKind(kind)))

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    def delimit_identifier(self, name: str, schema: str | None = None) -> str:
        quoted = self._preparer.quote_identifier(name)
        if schema:
            return f"{self._preparer.quote_identifier(schema)}.{quoted}"
        return quoted


@dataclass(frozen=True, slots=True)
class MigrationCommand:
    """A single generated statement."""

    command_text: str
    transaction_suppressed: bool = False


class MigrationCommandListBuilder:
    """Builds a list of :class:`MigrationCommand` from appended fragments.

    Example::

        builder = MigrationCommandListBuilder()
        builder.append("DROP DATABASE ").append('"old"').append_line(";")
        builder.end_command(suppress_transaction=True)
        builder.get_command_list()
    """

    def __init__(self) -> None:
        self._commands: list[MigrationCommand] = []
        self._parts: list[str] = []

    def append(self, text: str) -> MigrationCommandListBuilder:
        self._parts.append(text)
        return self

    def append_line(self, text: str = "") -> MigrationCommandListBuilder:
        self._parts.append(text + "\n")
        return self

    def end_command(self, suppress_transaction: bool = False) -> MigrationCommandListBuilder:
        """Close the current statement; empty statements are dropped."""
        text = "".join(self._parts)
        self._parts = []
        if text.strip():
            self._commands.append(MigrationCommand(text, transaction_suppressed=suppress_transaction))
        return self

    def get_command_list(self) -> list[MigrationCommand]:
        return list(self._commands)
