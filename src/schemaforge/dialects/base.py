"""
Base DDL Dialect - Abstract base class for database-specific CREATE TABLE syntax

Dialects handle database-specific syntax differences such as:
- Identifier quoting ("quotes" vs `backticks` vs [brackets])
- Auto-incrementing columns (serial vs auto_increment vs identity)
- Column comments (inline vs separate COMMENT ON statements)
- Unsigned numeric modifiers
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


@dataclass
class ColumnDefinition:
    """
    A column being added to a table definition.

    Modifier methods return the column so calls can be chained:
        table.specific_type("price", "decimal(10,2)").unsigned().not_nullable()
    """
    name: str
    type_sql: Optional[str] = None          # Verbatim type token (None for increments)
    increments: bool = False
    default_raw: Optional[str] = None
    is_unsigned: bool = False
    comment_text: Optional[str] = None
    is_nullable: Optional[bool] = None      # None = no nullability clause

    def default_to(self, raw_sql: str) -> "ColumnDefinition":
        self.default_raw = raw_sql
        return self

    def unsigned(self) -> "ColumnDefinition":
        self.is_unsigned = True
        return self

    def comment(self, text: str) -> "ColumnDefinition":
        self.comment_text = text
        return self

    def nullable(self) -> "ColumnDefinition":
        self.is_nullable = True
        return self

    def not_nullable(self) -> "ColumnDefinition":
        self.is_nullable = False
        return self


@dataclass
class TableDefinition:
    """Columns and table-level constraints of one CREATE TABLE statement."""
    name: str
    schema_name: Optional[str] = None
    columns: List[ColumnDefinition] = field(default_factory=list)
    primary_key: List[str] = field(default_factory=list)

    def increments(self, name: str) -> ColumnDefinition:
        """Add an auto-incrementing integer column."""
        column = ColumnDefinition(name=name, increments=True)
        self.columns.append(column)
        return column

    def specific_type(self, name: str, type_sql: str) -> ColumnDefinition:
        """Add a column whose type is taken verbatim."""
        column = ColumnDefinition(name=name, type_sql=type_sql)
        self.columns.append(column)
        return column

    def primary(self, column_names: List[str]) -> None:
        """Declare a (possibly composite) primary key constraint."""
        self.primary_key = list(column_names)


class DdlDialect(ABC):
    """
    Abstract base class for DDL dialects.

    Each dialect knows how to:
    1. Quote identifiers and string literals
    2. Render a column definition with its modifiers
    3. Render table-level constraints and trailing comment statements

    Usage:
        grammar = DialectFactory.get_grammar(Dialect.MYSQL)
        statements = grammar.generate_create_table(table)
    """

    name = "generic"
    create_table_keyword = "create table"

    # Order in which column modifiers follow the type
    column_modifiers = ("unsigned", "nullable", "default", "comment")

    # Emit "constraint <table>_pkey primary key (...)" instead of a bare primary key
    named_primary_key = False

    # ==================== Identifier Quoting ====================

    @property
    @abstractmethod
    def quote_char(self) -> str:
        """Character used to quote identifiers (e.g., '"' or '`')."""
        pass

    @property
    def quote_char_end(self) -> str:
        """Closing quote character (same as quote_char for most databases)."""
        return self.quote_char

    def quote_identifier(self, identifier: str) -> str:
        """Quote a single identifier (table, column, schema name)."""
        end = self.quote_char_end
        if end:
            identifier = identifier.replace(end, end * 2)
        return f"{self.quote_char}{identifier}{end}"

    def quote_full_table_name(self, table_name: str, schema_name: Optional[str] = None) -> str:
        """Quote a table reference, qualified by schema_name when given."""
        if schema_name:
            return f"{self.quote_identifier(schema_name)}.{self.quote_identifier(table_name)}"
        return self.quote_identifier(table_name)

    def quote_string(self, value: str) -> str:
        """Quote a string literal."""
        return "'" + value.replace("'", "''") + "'"

    # ==================== Column Types ====================

    @property
    @abstractmethod
    def increments_type(self) -> str:
        """Type and constraints of an auto-incrementing integer primary key column."""
        pass

    @property
    def increments_type_without_key(self) -> str:
        """Auto-increment type used when the table declares its own primary key."""
        return self.increments_type

    @property
    def supports_unsigned(self) -> bool:
        return False

    @property
    def supports_inline_comment(self) -> bool:
        return False

    def column_type(self, table: TableDefinition, column: ColumnDefinition) -> str:
        if not column.increments:
            return column.type_sql
        # A table-level primary key replaces the inline one
        if table.primary_key:
            return self.increments_type_without_key
        return self.increments_type

    # ==================== Column Rendering ====================

    def render_column(self, table: TableDefinition, column: ColumnDefinition) -> str:
        """Render one column definition for the CREATE TABLE body."""
        parts = [self.quote_identifier(column.name), self.column_type(table, column)]
        for modifier in self.column_modifiers:
            sql = getattr(self, f"_modify_{modifier}")(table, column)
            if sql:
                parts.append(sql)
        return " ".join(parts)

    def _modify_unsigned(self, table: TableDefinition, column: ColumnDefinition) -> Optional[str]:
        # Auto-increment columns carry their own signedness
        if not column.is_unsigned or column.increments:
            return None
        if not self.supports_unsigned:
            logger.warning(f"{self.name}: ignoring unsigned on column {column.name}")
            return None
        return "unsigned"

    def _modify_nullable(self, table: TableDefinition, column: ColumnDefinition) -> Optional[str]:
        if column.is_nullable is None:
            return None
        return "null" if column.is_nullable else "not null"

    def _modify_default(self, table: TableDefinition, column: ColumnDefinition) -> Optional[str]:
        if column.default_raw is None:
            return None
        return f"default {column.default_raw}"

    def _modify_comment(self, table: TableDefinition, column: ColumnDefinition) -> Optional[str]:
        if column.comment_text is None or not self.supports_inline_comment:
            return None
        return f"comment {self.quote_string(column.comment_text)}"

    # ==================== Table Rendering ====================

    def primary_key_name(self, table: TableDefinition) -> str:
        return f"{table.name}_pkey"

    def render_primary_key(self, table: TableDefinition) -> str:
        columns = ", ".join(self.quote_identifier(c) for c in table.primary_key)
        sql = f"primary key ({columns})"
        if self.named_primary_key:
            sql = f"constraint {self.quote_identifier(self.primary_key_name(table))} {sql}"
        return sql

    def render_comment_statements(self, table: TableDefinition) -> List[str]:
        """Statements that attach column comments after the table is created."""
        if not self.supports_inline_comment:
            for column in table.columns:
                if column.comment_text is not None:
                    logger.warning(f"{self.name}: dropping comment on column {column.name}")
        return []

    def comment_on_column_statements(self, table: TableDefinition) -> List[str]:
        """COMMENT ON COLUMN statements, for backends that support them."""
        full_table = self.quote_full_table_name(table.name, table.schema_name)
        return [
            f"comment on column {full_table}.{self.quote_identifier(c.name)} "
            f"is {self.quote_string(c.comment_text)}"
            for c in table.columns
            if c.comment_text is not None
        ]

    def generate_create_table(self, table: TableDefinition) -> List[str]:
        """
        Generate the statements creating the table.

        Returns:
            CREATE TABLE statement followed by any comment statements
        """
        body = [self.render_column(table, c) for c in table.columns]
        if table.primary_key:
            body.append(self.render_primary_key(table))

        full_table = self.quote_full_table_name(table.name, table.schema_name)
        create = f"{self.create_table_keyword} {full_table} ({', '.join(body)})"
        return [create] + self.render_comment_statements(table)
