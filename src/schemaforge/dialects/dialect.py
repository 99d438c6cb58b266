"""
Dialect - Closed set of target backends and their rendering capability

Generic dialects render through the shared SchemaBuilder, parameterized only
by the dialect. Specialized dialects need a client built from the connection.
"""
from enum import Enum
from typing import Union

from ..exceptions import UnsupportedDialect


class Dialect(Enum):
    """
    Target database systems.

    Generic (shared builder):
    - POSTGRESQL, REDSHIFT, COCKROACHDB
    - MYSQL, MARIADB, TIDB
    - SQLITE, LIBSQL
    - SQLSERVER
    - ORACLE

    Specialized (client built from connection parameters):
    - CASSANDRA, BIGQUERY, FIREBIRD
    """
    POSTGRESQL = "postgresql"
    REDSHIFT = "redshift"
    COCKROACHDB = "cockroachdb"
    MYSQL = "mysql"
    MARIADB = "mariadb"
    TIDB = "tidb"
    SQLITE = "sqlite"
    LIBSQL = "libsql"
    SQLSERVER = "sqlserver"
    ORACLE = "oracle"
    CASSANDRA = "cassandra"
    BIGQUERY = "bigquery"
    FIREBIRD = "firebird"

    @property
    def is_generic(self) -> bool:
        return self not in SPECIALIZED_DIALECTS

    @classmethod
    def parse(cls, value: Union["Dialect", str]) -> "Dialect":
        """
        Resolve a Dialect from a member or an identifier string.

        Raises:
            UnsupportedDialect: value is not a known dialect
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnsupportedDialect(value)

        key = value.strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedDialect(value) from None


SPECIALIZED_DIALECTS = frozenset({
    Dialect.CASSANDRA,
    Dialect.BIGQUERY,
    Dialect.FIREBIRD,
})

_ALIASES = {
    "postgres": "postgresql",
    "pg": "postgresql",
    "cockroach": "cockroachdb",
    "mssql": "sqlserver",
    "sqlite3": "sqlite",
}


def is_generic(dialect: Union[Dialect, str]) -> bool:
    """True if the dialect renders through the shared builder."""
    return Dialect.parse(dialect).is_generic
