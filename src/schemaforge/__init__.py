"""
SchemaForge - Dialect-aware CREATE TABLE generation
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("schemaforge")
except PackageNotFoundError:
    # Package not installed
    __version__ = "0.1.0"

from .constants import AUTOINCREMENT
from .dialects import Dialect, is_generic
from .exceptions import (
    SchemaForgeError,
    UnsupportedDialect,
    InvalidConnectionConfig,
    RenderError,
)
from .generator import SqlGenerator
from .models import Schema, SchemaItem, GeneratorConnection

__all__ = [
    "__version__",
    "AUTOINCREMENT",
    "Dialect",
    "is_generic",
    "SqlGenerator",
    "Schema",
    "SchemaItem",
    "GeneratorConnection",
    "SchemaForgeError",
    "UnsupportedDialect",
    "InvalidConnectionConfig",
    "RenderError",
]
