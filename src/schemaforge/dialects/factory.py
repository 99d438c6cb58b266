"""
Dialect Factory - Create the shared schema builder for a generic dialect
"""

from typing import Dict, List, Type, Union

from ..exceptions import UnsupportedDialect
from .base import DdlDialect
from .builder import SchemaBuilder
from .dialect import Dialect

import logging
logger = logging.getLogger(__name__)


class DialectFactory:
    """
    Factory for generic dialect builders.

    Usage:
        builder = DialectFactory.create("mysql")
        sql = builder.to_sql(table)
    """

    # Registry of grammars for the generic dialects
    _grammars: Dict[Dialect, Type[DdlDialect]] = {}

    @classmethod
    def get_grammar(cls, dialect: Union[Dialect, str]) -> DdlDialect:
        """
        Get the DDL grammar for a generic dialect.

        Raises:
            UnsupportedDialect: dialect unknown, or has no shared grammar
        """
        dialect = Dialect.parse(dialect)
        grammar_class = cls._grammars.get(dialect)
        if grammar_class is None:
            raise UnsupportedDialect(dialect.value)
        return grammar_class()

    @classmethod
    def create(cls, dialect: Union[Dialect, str]) -> SchemaBuilder:
        """
        Create the shared builder for a generic dialect.

        No connection parameters are involved: rendering never touches the network.
        """
        dialect = Dialect.parse(dialect)
        if not dialect.is_generic:
            raise UnsupportedDialect(dialect.value)
        builder = SchemaBuilder(dialect, cls.get_grammar(dialect))
        logger.debug(f"Created schema builder for: {dialect.value}")
        return builder

    @classmethod
    def is_supported(cls, dialect: Union[Dialect, str]) -> bool:
        """Check if a dialect has a registered grammar."""
        try:
            return Dialect.parse(dialect) in cls._grammars
        except UnsupportedDialect:
            return False

    @classmethod
    def supported_types(cls) -> List[str]:
        """Get list of generic dialect identifiers."""
        return [d.value for d in cls._grammars]

    @classmethod
    def register(cls, dialect: Union[Dialect, str], grammar_class: Type[DdlDialect]):
        """
        Register a grammar for a generic dialect.

        Args:
            dialect: Dialect identifier
            grammar_class: DdlDialect subclass
        """
        dialect = Dialect.parse(dialect)
        if not dialect.is_generic:
            raise ValueError(f"{dialect.value} is a specialized dialect and uses its own client")
        cls._grammars[dialect] = grammar_class
        logger.debug(f"Registered grammar for: {dialect.value}")


def _register_default_grammars():
    """Register built-in grammars. Called on module import."""
    from .postgresql_dialect import PostgreSQLDialect, RedshiftDialect
    from .mysql_dialect import MySQLDialect
    from .sqlite_dialect import SQLiteDialect
    from .sqlserver_dialect import SQLServerDialect
    from .oracle_dialect import OracleDialect

    DialectFactory.register(Dialect.POSTGRESQL, PostgreSQLDialect)
    DialectFactory.register(Dialect.COCKROACHDB, PostgreSQLDialect)
    DialectFactory.register(Dialect.REDSHIFT, RedshiftDialect)
    DialectFactory.register(Dialect.MYSQL, MySQLDialect)
    DialectFactory.register(Dialect.MARIADB, MySQLDialect)
    DialectFactory.register(Dialect.TIDB, MySQLDialect)
    DialectFactory.register(Dialect.SQLITE, SQLiteDialect)
    DialectFactory.register(Dialect.LIBSQL, SQLiteDialect)
    DialectFactory.register(Dialect.SQLSERVER, SQLServerDialect)
    DialectFactory.register(Dialect.ORACLE, OracleDialect)


# Register on module import
_register_default_grammars()
