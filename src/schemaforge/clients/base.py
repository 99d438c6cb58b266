"""
Specialized Client - Base class for dialects built from connection parameters

A client only assembles configuration; it never opens a connection.
"""

from typing import Any

from ..dialects.base import DdlDialect
from ..dialects.builder import SchemaBuilder
from ..dialects.dialect import Dialect
from ..models.connection import GeneratorConnection

import logging
logger = logging.getLogger(__name__)


class SpecializedClient(SchemaBuilder):
    """
    Schema builder carrying a typed connection config.

    Subclasses set `dialect_id` and implement `from_connection`, which
    validates the connection and raises InvalidConnectionConfig on missing
    fields.
    """

    dialect_id: Dialect

    def __init__(self, config: Any, grammar: DdlDialect):
        super().__init__(self.dialect_id, grammar)
        self.config = config

    @classmethod
    def from_connection(cls, connection: GeneratorConnection) -> "SpecializedClient":
        raise NotImplementedError
