"""
Centralized constants for SchemaForge.

Import from here instead of hardcoding values.
"""

# ===========================================================================
# Column types
# ===========================================================================
AUTOINCREMENT = "autoincrement"     # Sentinel data type: native auto-increment column

# ===========================================================================
# Default ports for specialized clients
# ===========================================================================
FIREBIRD_DEFAULT_PORT = 3050
CASSANDRA_DEFAULT_PORT = 9042

# ===========================================================================
# Output
# ===========================================================================
STATEMENT_SEPARATOR = ";\n"         # Joins multi-statement DDL output
