"""
MySQL Dialect - MySQL-family CREATE TABLE syntax
"""

from .base import DdlDialect

import logging
logger = logging.getLogger(__name__)


class MySQLDialect(DdlDialect):
    """Dialect for MySQL/MariaDB/TiDB databases."""

    name = "mysql"

    @property
    def quote_char(self) -> str:
        """MySQL uses backticks for identifier quoting."""
        return '`'

    @property
    def increments_type(self) -> str:
        return "int unsigned auto_increment primary key"

    @property
    def increments_type_without_key(self) -> str:
        # An auto_increment column must still be indexed
        return "int unsigned auto_increment unique"

    @property
    def supports_unsigned(self) -> bool:
        return True

    @property
    def supports_inline_comment(self) -> bool:
        return True

    def quote_string(self, value: str) -> str:
        # Backslash is an escape character inside MySQL string literals
        return "'" + value.replace("\\", "\\\\").replace("'", "''") + "'"
