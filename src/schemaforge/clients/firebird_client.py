"""
Firebird Client - Firebird CREATE TABLE syntax and connection config
"""

from typing import List, Optional

from ..dialects.base import DdlDialect, TableDefinition
from ..dialects.dialect import Dialect
from ..models.connection import FirebirdConfig, GeneratorConnection
from .base import SpecializedClient

import logging
logger = logging.getLogger(__name__)


class FirebirdDialect(DdlDialect):
    """Dialect for Firebird 3+ (identity columns, unquoted identifiers)."""

    name = "firebird"

    # DEFAULT must precede NOT NULL
    column_modifiers = ("unsigned", "default", "nullable")
    named_primary_key = True

    @property
    def quote_char(self) -> str:
        return ''

    @property
    def increments_type(self) -> str:
        return "integer generated by default as identity primary key"

    @property
    def increments_type_without_key(self) -> str:
        return "integer generated by default as identity"

    def render_comment_statements(self, table: TableDefinition) -> List[str]:
        return self.comment_on_column_statements(table)


class FirebirdClient(SpecializedClient):
    """
    Firebird client.

    Tables are qualified with the database name, which Firebird's CREATE TABLE
    grammar does not accept; the generator strips that qualifier afterwards
    (see schemaforge.utils.statement_repair).
    """

    dialect_id = Dialect.FIREBIRD

    def __init__(self, config: FirebirdConfig):
        super().__init__(config, FirebirdDialect())

    @property
    def default_namespace(self) -> Optional[str]:
        return self.config.database

    @classmethod
    def from_connection(cls, connection: GeneratorConnection) -> "FirebirdClient":
        config = FirebirdConfig.from_connection(connection)
        logger.debug(f"Firebird client for {config.host}:{config.port}/{config.database}")
        return cls(config)
