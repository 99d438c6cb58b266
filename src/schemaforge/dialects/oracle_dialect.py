"""
Oracle Dialect - Oracle CREATE TABLE syntax
"""

from typing import List
from .base import DdlDialect, TableDefinition

import logging
logger = logging.getLogger(__name__)


class OracleDialect(DdlDialect):
    """Dialect for Oracle databases (12c+ identity columns)."""

    name = "oracle"

    # DEFAULT must precede the NOT NULL constraint
    column_modifiers = ("unsigned", "default", "nullable")
    named_primary_key = True

    @property
    def quote_char(self) -> str:
        return '"'

    @property
    def increments_type(self) -> str:
        return "integer generated by default as identity primary key"

    @property
    def increments_type_without_key(self) -> str:
        return "integer generated by default as identity"

    def render_comment_statements(self, table: TableDefinition) -> List[str]:
        return self.comment_on_column_statements(table)
