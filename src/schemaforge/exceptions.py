"""
Exceptions raised by the DDL generator.

    SchemaForgeError
    ├── UnsupportedDialect       unknown dialect identifier
    ├── InvalidConnectionConfig  specialized dialect missing connection fields
    └── RenderError              no usable builder, bad schema, failed repair
"""

from typing import Optional


class SchemaForgeError(Exception):
    """Base class for all generator errors."""


class UnsupportedDialect(SchemaForgeError, ValueError):
    """Raised when a dialect identifier is not recognized."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unsupported dialect: {value!r}")


class InvalidConnectionConfig(SchemaForgeError, ValueError):
    """Raised when a specialized client cannot be built from the connection."""

    def __init__(self, dialect: str, missing: Optional[list] = None, message: Optional[str] = None):
        self.dialect = dialect
        self.missing = list(missing or [])
        if message is None:
            message = f"Connection for {dialect} is missing required field(s): {', '.join(self.missing)}"
        super().__init__(message)


class RenderError(SchemaForgeError):
    """Raised when a CREATE TABLE statement cannot be produced."""
