"""
SQLite Dialect - SQLite CREATE TABLE syntax
"""

from .base import DdlDialect

import logging
logger = logging.getLogger(__name__)


class SQLiteDialect(DdlDialect):
    """Dialect for SQLite (and libSQL) databases."""

    name = "sqlite"

    @property
    def quote_char(self) -> str:
        return '`'

    @property
    def increments_type(self) -> str:
        return "integer primary key autoincrement"

    @property
    def increments_type_without_key(self) -> str:
        # AUTOINCREMENT is only allowed on an INTEGER PRIMARY KEY
        return "integer"

    # SQLite has neither unsigned types nor column comments; the base class
    # logs and drops both.
