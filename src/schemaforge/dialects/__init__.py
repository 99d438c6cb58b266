"""
DDL Dialects - Database-specific CREATE TABLE syntax

Generic dialects share one SchemaBuilder parameterized by a grammar; the
specialized ones (cassandra, bigquery, firebird) live in schemaforge.clients.

Usage:
    from schemaforge.dialects import Dialect, DialectFactory

    builder = DialectFactory.create(Dialect.POSTGRESQL)
    table = builder.create_table("users", schema_name="public")
    table.increments("id")
    sql = builder.to_sql(table)
"""

from .dialect import Dialect, SPECIALIZED_DIALECTS, is_generic
from .base import DdlDialect, ColumnDefinition, TableDefinition
from .builder import SchemaBuilder
from .factory import DialectFactory

from .postgresql_dialect import PostgreSQLDialect, RedshiftDialect
from .mysql_dialect import MySQLDialect
from .sqlite_dialect import SQLiteDialect
from .sqlserver_dialect import SQLServerDialect
from .oracle_dialect import OracleDialect

__all__ = [
    # Classifier
    "Dialect",
    "SPECIALIZED_DIALECTS",
    "is_generic",

    # Base classes
    "DdlDialect",
    "ColumnDefinition",
    "TableDefinition",
    "SchemaBuilder",

    # Factory
    "DialectFactory",

    # Implementations
    "PostgreSQLDialect",
    "RedshiftDialect",
    "MySQLDialect",
    "SQLiteDialect",
    "SQLServerDialect",
    "OracleDialect",
]
