"""
Specialized Clients - Dialects that need connection parameters to build DDL

Usage:
    from schemaforge.clients import create_client

    client = create_client(Dialect.FIREBIRD, connection)
"""

from typing import Dict, Optional, Type

from ..dialects.dialect import Dialect
from ..exceptions import InvalidConnectionConfig, UnsupportedDialect
from ..models.connection import GeneratorConnection
from .base import SpecializedClient
from .bigquery_client import BigQueryClient, BigQueryDialect
from .cassandra_client import CassandraClient, CassandraDialect
from .firebird_client import FirebirdClient, FirebirdDialect

_CLIENTS: Dict[Dialect, Type[SpecializedClient]] = {
    Dialect.FIREBIRD: FirebirdClient,
    Dialect.BIGQUERY: BigQueryClient,
    Dialect.CASSANDRA: CassandraClient,
}


def create_client(dialect: Dialect, connection: Optional[GeneratorConnection]) -> SpecializedClient:
    """
    Build the specialized client for a dialect.

    Raises:
        UnsupportedDialect: dialect is not a specialized dialect
        InvalidConnectionConfig: connection missing or incomplete
    """
    client_class = _CLIENTS.get(dialect)
    if client_class is None:
        raise UnsupportedDialect(dialect.value)
    if connection is None:
        raise InvalidConnectionConfig(
            dialect.value, message=f"{dialect.value} requires connection parameters"
        )
    return client_class.from_connection(connection)


__all__ = [
    "create_client",
    "SpecializedClient",
    "FirebirdClient",
    "FirebirdDialect",
    "BigQueryClient",
    "BigQueryDialect",
    "CassandraClient",
    "CassandraDialect",
]
