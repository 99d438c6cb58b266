"""
Models - Dataclasses for schemas and connection parameters

All models are re-exported here for convenience:
    from schemaforge.models import Schema, SchemaItem, GeneratorConnection
"""

from .schema import Schema, SchemaItem
from .connection import (
    GeneratorConnection,
    FirebirdConfig,
    BigQueryConfig,
    CassandraConfig,
)

__all__ = [
    "Schema",
    "SchemaItem",
    "GeneratorConnection",
    "FirebirdConfig",
    "BigQueryConfig",
    "CassandraConfig",
]
