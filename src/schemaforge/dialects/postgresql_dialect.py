"""
PostgreSQL Dialect - PostgreSQL-family CREATE TABLE syntax
"""

from typing import List
from .base import DdlDialect, TableDefinition

import logging
logger = logging.getLogger(__name__)


class PostgreSQLDialect(DdlDialect):
    """Dialect for PostgreSQL and wire-compatible databases (CockroachDB)."""

    name = "postgresql"

    # No unsigned types; comments are separate statements
    column_modifiers = ("unsigned", "nullable", "default")
    named_primary_key = True

    @property
    def quote_char(self) -> str:
        return '"'

    @property
    def increments_type(self) -> str:
        return "serial primary key"

    @property
    def increments_type_without_key(self) -> str:
        return "serial"

    def render_comment_statements(self, table: TableDefinition) -> List[str]:
        return self.comment_on_column_statements(table)


class RedshiftDialect(PostgreSQLDialect):
    """Redshift has no serial type; identity columns instead."""

    name = "redshift"

    @property
    def increments_type(self) -> str:
        return "integer identity(1,1) primary key"

    @property
    def increments_type_without_key(self) -> str:
        return "integer identity(1,1)"
