"""
SQL Generator - Render a Schema as a CREATE TABLE statement for a dialect

The generator holds the current dialect and connection and the builder built
from them. Every change to either rebuilds the builder synchronously, so a
render never sees a builder from a previous configuration.

Usage:
    generator = SqlGenerator(Dialect.POSTGRESQL)
    sql = generator.build_sql(schema)

    generator.configure("firebird", GeneratorConnection(db_name="MYDB", db_config={...}))
    sql = generator.build_sql(schema)
"""

from typing import Any, Dict, List, Optional, Union

from .clients import create_client
from .dialects.builder import SchemaBuilder
from .dialects.dialect import Dialect
from .dialects.factory import DialectFactory
from .exceptions import InvalidConnectionConfig, RenderError
from .models.connection import GeneratorConnection
from .models.schema import Schema, SchemaItem
from .utils.statement_repair import strip_table_qualifier

import logging
logger = logging.getLogger(__name__)

ConnectionLike = Union[GeneratorConnection, Dict[str, Any], None]


def create_builder(dialect: Dialect, connection: Optional[GeneratorConnection]) -> SchemaBuilder:
    """
    Build the renderer for a (dialect, connection) pair.

    Generic dialects ignore the connection. No network I/O happens here.

    Raises:
        InvalidConnectionConfig: specialized dialect with missing connection fields
    """
    if dialect.is_generic:
        return DialectFactory.create(dialect)
    return create_client(dialect, connection)


def _to_connection(connection: ConnectionLike) -> Optional[GeneratorConnection]:
    if connection is None or isinstance(connection, GeneratorConnection):
        return connection
    if isinstance(connection, dict):
        return GeneratorConnection.from_dict(connection)
    raise InvalidConnectionConfig(
        "connection", message=f"Unsupported connection type: {type(connection).__name__}"
    )


class SqlGenerator:
    """
    Long-lived CREATE TABLE generator, reconfigured in place.

    Failure model:
    - Unsupported dialect: the setter raises and the previous configuration
      stays in effect.
    - Invalid connection for a specialized dialect: the new values are kept,
      the builder is cleared and the setter raises; build_sql raises
      RenderError until a valid configuration is set.

    Not thread-safe; the owner serializes access.
    """

    def __init__(self, dialect: Union[Dialect, str], connection: ConnectionLike = None):
        self._dialect: Optional[Dialect] = None
        self._connection: Optional[GeneratorConnection] = None
        self._builder: Optional[SchemaBuilder] = None
        self.configure(dialect, connection)

    # ==================== Configuration ====================

    @property
    def dialect(self) -> Optional[Dialect]:
        return self._dialect

    @dialect.setter
    def dialect(self, value: Union[Dialect, str]):
        self.configure(value, self._connection)

    @property
    def connection(self) -> Optional[GeneratorConnection]:
        return self._connection

    @connection.setter
    def connection(self, value: ConnectionLike):
        self.configure(self._dialect, value)

    @property
    def is_generic(self) -> bool:
        return self._dialect is not None and self._dialect.is_generic

    @property
    def builder(self) -> Optional[SchemaBuilder]:
        """Builder for the current configuration, None when unconfigured."""
        return self._builder

    @property
    def is_configured(self) -> bool:
        return self._builder is not None

    def configure(self, dialect: Union[Dialect, str], connection: ConnectionLike = None):
        """
        Set dialect and connection together and rebuild the builder once.

        Raises:
            UnsupportedDialect: unknown dialect (state unchanged)
            InvalidConnectionConfig: incomplete connection (generator left unconfigured)
        """
        new_dialect = Dialect.parse(dialect)
        new_connection = _to_connection(connection)

        self._dialect = new_dialect
        self._connection = new_connection
        self._builder = None
        try:
            self._builder = create_builder(new_dialect, new_connection)
        except InvalidConnectionConfig as e:
            logger.warning(f"Generator unconfigured for {new_dialect.value}: {e}")
            raise
        logger.debug(f"Generator configured: {self._builder!r}")

    # ==================== Rendering ====================

    def build_sql(self, schema: Schema) -> str:
        """
        Render the CREATE TABLE statement(s) for schema.

        Returns:
            SQL text; several statements are separated by ";\\n"

        Raises:
            RenderError: no builder configured, invalid schema, failed repair
        """
        builder = self._builder
        if builder is None:
            raise RenderError(
                f"No builder configured for dialect "
                f"{self._dialect.value if self._dialect else None!r}"
            )
        self._validate_schema(schema)

        if self.is_generic:
            namespace = schema.schema or None
        else:
            namespace = schema.schema or builder.default_namespace
            if not namespace:
                raise RenderError(
                    f"{self._dialect.value} needs a schema name or a database name in the connection"
                )

        table = builder.create_table(schema.name, schema_name=namespace)

        primaries = [c.column_name for c in schema.primary_columns if self._in_primary_key(c)]
        if primaries:
            table.primary(primaries)

        for item in schema.columns:
            if item.is_autoincrement:
                col = table.increments(item.column_name)
            else:
                col = table.specific_type(item.column_name, item.data_type)

            if item.default_value:
                col.default_to(item.default_value)
            if item.unsigned:
                col.unsigned()
            if item.comment:
                col.comment(item.comment)
            if item.nullable:
                col.nullable()
            else:
                col.not_nullable()

        sql = builder.to_sql(table)

        if self._dialect is Dialect.FIREBIRD:
            sql = strip_table_qualifier(sql, builder.config.database)

        return sql

    buildSql = build_sql

    def _in_primary_key(self, item: SchemaItem) -> bool:
        # Generic auto-increment columns carry an inline primary key unless
        # the table declares one
        return not (self.is_generic and item.is_autoincrement)

    @staticmethod
    def _validate_schema(schema: Schema):
        if schema is None:
            raise RenderError("No schema given")
        if not schema.name:
            raise RenderError("Schema has no table name")
        if not schema.columns:
            raise RenderError(f"Schema {schema.name!r} has no columns")

        problems: List[str] = []
        for position, item in enumerate(schema.columns, 1):
            if not item.column_name:
                problems.append(f"column {position} has no name")
            if not item.data_type:
                problems.append(f"column {item.column_name or position} has no data type")
        if problems:
            raise RenderError(f"Invalid schema {schema.name!r}: {'; '.join(problems)}")
