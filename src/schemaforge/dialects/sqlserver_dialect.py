"""
SQL Server Dialect - T-SQL CREATE TABLE syntax
"""

from typing import List
from .base import DdlDialect, TableDefinition

import logging
logger = logging.getLogger(__name__)


class SQLServerDialect(DdlDialect):
    """Dialect for Microsoft SQL Server."""

    name = "sqlserver"

    # Column descriptions are extended properties, added after the table
    column_modifiers = ("unsigned", "nullable", "default")
    named_primary_key = True

    @property
    def quote_char(self) -> str:
        """SQL Server uses square brackets."""
        return '['

    @property
    def quote_char_end(self) -> str:
        return ']'

    @property
    def default_schema(self) -> str:
        return "dbo"

    @property
    def increments_type(self) -> str:
        return "int identity(1,1) primary key"

    @property
    def increments_type_without_key(self) -> str:
        return "int identity(1,1)"

    def quote_string(self, value: str) -> str:
        return "N" + super().quote_string(value)

    def render_comment_statements(self, table: TableDefinition) -> List[str]:
        schema = table.schema_name or self.default_schema
        return [
            "EXEC sp_addextendedproperty "
            f"@name = N'MS_Description', @value = {self.quote_string(c.comment_text)}, "
            f"@level0type = N'Schema', @level0name = {self.quote_string(schema)}, "
            f"@level1type = N'Table', @level1name = {self.quote_string(table.name)}, "
            f"@level2type = N'Column', @level2name = {self.quote_string(c.name)}"
            for c in table.columns
            if c.comment_text is not None
        ]
