"""
BigQuery Client - BigQuery CREATE TABLE syntax and project config
"""

from typing import Optional

from ..dialects.base import ColumnDefinition, DdlDialect, TableDefinition
from ..dialects.dialect import Dialect
from ..models.connection import BigQueryConfig, GeneratorConnection
from .base import SpecializedClient

import logging
logger = logging.getLogger(__name__)


class BigQueryDialect(DdlDialect):
    """Dialect for Google BigQuery standard SQL."""

    name = "bigquery"

    # column_schema: type [DEFAULT expr] [NOT NULL] [OPTIONS(...)]
    column_modifiers = ("unsigned", "default", "nullable", "comment")

    @property
    def quote_char(self) -> str:
        return '`'

    @property
    def increments_type(self) -> str:
        return "INT64"

    @property
    def supports_inline_comment(self) -> bool:
        return True

    def quote_string(self, value: str) -> str:
        return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"

    def column_type(self, table: TableDefinition, column: ColumnDefinition) -> str:
        if column.increments:
            logger.warning(f"bigquery: no auto-increment type, column {column.name} rendered as INT64")
        return super().column_type(table, column)

    def _modify_comment(self, table: TableDefinition, column: ColumnDefinition) -> Optional[str]:
        if column.comment_text is None:
            return None
        return f"options(description={self.quote_string(column.comment_text)})"

    def render_primary_key(self, table: TableDefinition) -> str:
        return f"{super().render_primary_key(table)} not enforced"


class BigQueryClient(SpecializedClient):
    """
    BigQuery client.

    `config.api_endpoint` is set when the connection names a host and port,
    redirecting to a local emulator instead of the cloud endpoint.
    """

    dialect_id = Dialect.BIGQUERY

    def __init__(self, config: BigQueryConfig, dataset: Optional[str] = None):
        super().__init__(config, BigQueryDialect())
        self.dataset = dataset

    @property
    def api_endpoint(self) -> Optional[str]:
        return self.config.api_endpoint

    @property
    def default_namespace(self) -> Optional[str]:
        return self.dataset or self.config.project_id

    @classmethod
    def from_connection(cls, connection: GeneratorConnection) -> "BigQueryClient":
        config = BigQueryConfig.from_connection(connection)
        logger.debug(
            f"BigQuery client for project {config.project_id}"
            + (f" via {config.api_endpoint}" if config.api_endpoint else "")
        )
        return cls(config, dataset=connection.db_name or None)
