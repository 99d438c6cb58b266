"""
Schema Builder - Turns a TableDefinition into CREATE TABLE text

The generic dialects share this builder, parameterized only by the dialect.
Specialized clients (see schemaforge.clients) extend it with connection config.
"""

from typing import Optional

from ..constants import STATEMENT_SEPARATOR
from .base import DdlDialect, TableDefinition
from .dialect import Dialect

import logging
logger = logging.getLogger(__name__)


class SchemaBuilder:
    """
    CREATE TABLE builder bound to one dialect grammar.

    Usage:
        builder = DialectFactory.create(Dialect.POSTGRESQL)
        table = builder.create_table("users", schema_name="public")
        table.increments("id")
        table.specific_type("email", "varchar(255)").not_nullable()
        sql = builder.to_sql(table)
    """

    def __init__(self, dialect: Dialect, grammar: DdlDialect):
        self.dialect = dialect
        self.grammar = grammar

    @property
    def default_namespace(self) -> Optional[str]:
        """Namespace used when a table declares none (None = unqualified)."""
        return None

    def create_table(self, name: str, schema_name: Optional[str] = None) -> TableDefinition:
        return TableDefinition(name=name, schema_name=schema_name or self.default_namespace)

    def to_sql(self, table: TableDefinition) -> str:
        statements = self.grammar.generate_create_table(table)
        return STATEMENT_SEPARATOR.join(statements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dialect={self.dialect.value!r})"
