"""PostgreSQL ``CREATE DATABASE`` override.

PostgreSQL does not use a btree index on a text column (primary keys
included) for lookups unless the database collation is ``C``: with any other
locale the comparison semantics of the query do not match the index order.
Databases are therefore always created from ``template0`` with
``LC_CTYPE``/``LC_COLLATE`` ``C`` and ``UTF8`` encoding, whatever the host
locale is.
"""

from __future__ import annotations

from .commands import MigrationCommandListBuilder
from .generator import MigrationsSqlGenerator
from .operations import CreateDatabaseOperation

BYTE_ORDER_TEMPLATE = "template0"
BYTE_ORDER_LOCALE = "C"
DATABASE_ENCODING = "UTF8"


class CreateDatabaseStatementGenerator(MigrationsSqlGenerator):
    """Forces byte-order collation on created databases; everything else is inherited."""

    def generate_create_database(
        self, operation: CreateDatabaseOperation, builder: MigrationCommandListBuilder
    ) -> None:
        delimit = self.helper.delimit_identifier

        builder.append("CREATE DATABASE ").append(delimit(operation.name))
        builder.append(" TEMPLATE ").append(delimit(BYTE_ORDER_TEMPLATE))
        builder.append(" LC_CTYPE ").append(delimit(BYTE_ORDER_LOCALE))
        builder.append(" LC_COLLATE ").append(delimit(BYTE_ORDER_LOCALE))
        builder.append(" ENCODING ").append(delimit(DATABASE_ENCODING))

        # empty means unset; whitespace-only names are passed through
        if operation.tablespace:
            builder.append(" TABLESPACE ").append(delimit(operation.tablespace))

        builder.append_line(self.helper.statement_terminator)

        # CREATE DATABASE cannot run inside a transaction block
        self.end_statement(builder, suppress_transaction=True)
