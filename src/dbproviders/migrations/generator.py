"""Default migration SQL generator.

:class:`MigrationsSqlGenerator` turns migration operations into
:class:`~dbproviders.migrations.commands.MigrationCommand` objects.  Dispatch
is a single ``match`` over the closed set of operation variants; each variant
has one ``generate_*`` method that provider-specific subclasses may override.
"""

from __future__ import annotations

from collections.abc import Iterable

from dbproviders.errors import UnsupportedOperationError

from .commands import MigrationCommand, MigrationCommandListBuilder, SqlGenerationHelper
from .operations import (
    CreateDatabaseOperation,
    DropDatabaseOperation,
    EnsureSchemaOperation,
    MigrationOperation,
    SqlOperation,
)


class MigrationsSqlGenerator:
    """Generates provider-neutral DDL for the supported operations."""

    def __init__(self, helper: SqlGenerationHelper) -> None:
        self.helper = helper

    def generate(self, operations: Iterable[MigrationOperation]) -> list[MigrationCommand]:
        builder = MigrationCommandListBuilder()
        for operation in operations:
            self.generate_operation(operation, builder)
        return builder.get_command_list()

    def generate_operation(self, operation: MigrationOperation, builder: MigrationCommandListBuilder) -> None:
        match operation:
            case CreateDatabaseOperation():
                self.generate_create_database(operation, builder)
            case DropDatabaseOperation():
                self.generate_drop_database(operation, builder)
            case EnsureSchemaOperation():
                self.generate_ensure_schema(operation, builder)
            case SqlOperation():
                self.generate_sql(operation, builder)
            case _:
                raise UnsupportedOperationError(operation)

    def generate_create_database(
        self, operation: CreateDatabaseOperation, builder: MigrationCommandListBuilder
    ) -> None:
        builder.append("CREATE DATABASE ").append(self.helper.delimit_identifier(operation.name))

        if operation.template:
            builder.append(" TEMPLATE ").append(self.helper.delimit_identifier(operation.template))

        if operation.tablespace:
            builder.append(" TABLESPACE ").append(self.helper.delimit_identifier(operation.tablespace))

        builder.append_line(self.helper.statement_terminator)
        self.end_statement(builder, suppress_transaction=True)

    def generate_drop_database(self, operation: DropDatabaseOperation, builder: MigrationCommandListBuilder) -> None:
        builder.append("DROP DATABASE ").append(self.helper.delimit_identifier(operation.name))
        builder.append_line(self.helper.statement_terminator)
        self.end_statement(builder, suppress_transaction=True)

    def generate_ensure_schema(self, operation: EnsureSchemaOperation, builder: MigrationCommandListBuilder) -> None:
        builder.append("CREATE SCHEMA IF NOT EXISTS ").append(self.helper.delimit_identifier(operation.name))
        builder.append_line(self.helper.statement_terminator)
        self.end_statement(builder)

    def generate_sql(self, operation: SqlOperation, builder: MigrationCommandListBuilder) -> None:
        sql = operation.sql.rstrip()
        if not sql.endswith(self.helper.statement_terminator):
            sql += self.helper.statement_terminator
        builder.append_line(sql)
        self.end_statement(builder, suppress_transaction=operation.suppress_transaction)

    def end_statement(self, builder: MigrationCommandListBuilder, suppress_transaction: bool = False) -> None:
        builder.end_command(suppress_transaction=suppress_transaction)
