"""
Cassandra Client - CQL CREATE TABLE syntax and cluster config
"""

from typing import Optional

from ..dialects.base import ColumnDefinition, DdlDialect, TableDefinition
from ..dialects.dialect import Dialect
from ..models.connection import CassandraConfig, GeneratorConnection
from .base import SpecializedClient

import logging
logger = logging.getLogger(__name__)


class CassandraDialect(DdlDialect):
    """Dialect for Cassandra CQL."""

    name = "cassandra"

    # CQL has no column defaults and no column comments
    column_modifiers = ("unsigned", "default", "nullable")

    @property
    def quote_char(self) -> str:
        return '"'

    @property
    def increments_type(self) -> str:
        return "int"

    def column_type(self, table: TableDefinition, column: ColumnDefinition) -> str:
        if column.increments:
            logger.warning(f"cassandra: no auto-increment type, column {column.name} rendered as int")
        return super().column_type(table, column)

    def _modify_default(self, table: TableDefinition, column: ColumnDefinition) -> Optional[str]:
        if column.default_raw is not None:
            logger.warning(f"cassandra: dropping default on column {column.name}")
        return None


class CassandraClient(SpecializedClient):
    """Cassandra client; the keyspace is the connection's database name."""

    dialect_id = Dialect.CASSANDRA

    def __init__(self, config: CassandraConfig):
        super().__init__(config, CassandraDialect())

    @property
    def default_namespace(self) -> Optional[str]:
        return self.config.keyspace

    @classmethod
    def from_connection(cls, connection: GeneratorConnection) -> "CassandraClient":
        config = CassandraConfig.from_connection(connection)
        logger.debug(f"Cassandra client for {','.join(config.contact_points)}:{config.port}")
        return cls(config)
