"""Migration operation variants understood by the SQL generators.

The set is closed: :class:`~dbproviders.migrations.generator.MigrationsSqlGenerator`
matches on exactly these types and rejects anything else.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MigrationOperation:
    """Marker base for all operation variants."""


@dataclass(frozen=True, slots=True)
class CreateDatabaseOperation(MigrationOperation):
    """Pending ``CREATE DATABASE`` intent."""

    name: str
    tablespace: str | None = None
    template: str | None = None


@dataclass(frozen=True, slots=True)
class DropDatabaseOperation(MigrationOperation):
    name: str


@dataclass(frozen=True, slots=True)
class EnsureSchemaOperation(MigrationOperation):
    name: str


@dataclass(frozen=True, slots=True)
class SqlOperation(MigrationOperation):
    """Raw SQL passed through verbatim."""

    sql: str
    suppress_transaction: bool = False
