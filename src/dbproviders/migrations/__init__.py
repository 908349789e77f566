"""Migration SQL generation.

Modules
-------
operations  Closed set of operation variants (CreateDatabaseOperation, ...)
commands    SqlGenerationHelper, MigrationCommandListBuilder, MigrationCommand
generator   MigrationsSqlGenerator (default DDL for every variant)
postgres    CreateDatabaseStatementGenerator (byte-order locale override)
"""

from __future__ import annotations

from .commands import MigrationCommand, MigrationCommandListBuilder, SqlGenerationHelper
from .generator import MigrationsSqlGenerator
from .operations import (
    CreateDatabaseOperation,
    DropDatabaseOperation,
    EnsureSchemaOperation,
    MigrationOperation,
    SqlOperation,
)
from .postgres import CreateDatabaseStatementGenerator

__all__ = [
    "CreateDatabaseOperation",
    "CreateDatabaseStatementGenerator",
    "DropDatabaseOperation",
    "EnsureSchemaOperation",
    "MigrationCommand",
    "MigrationCommandListBuilder",
    "MigrationOperation",
    "MigrationsSqlGenerator",
    "SqlGenerationHelper",
    "SqlOperation",
]
