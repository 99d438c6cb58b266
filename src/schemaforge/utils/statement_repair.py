"""
Statement Repair - Remove a database-name qualifier from table references.

The firebird client qualifies every table reference with the database name,
which Firebird's DDL grammar rejects. The repair splits the generated text into
statements and strips "<database>." from the table reference that opens each
statement. String literals and any other text are left untouched.
"""

import re
from typing import Pattern

from sqlparse.exceptions import SQLParseError

from ..exceptions import RenderError
from .sql_splitter import split_sql_statements

import logging
logger = logging.getLogger(__name__)

# Statement prefixes that are followed by the table reference
_TABLE_REFERENCE_PREFIX = r"^(\s*(?:create\s+table|comment\s+on\s+column)\s+)"


def _qualifier_pattern(qualifier: str) -> Pattern:
    return re.compile(_TABLE_REFERENCE_PREFIX + re.escape(f"{qualifier}."), re.IGNORECASE)


def strip_table_qualifier(sql_text: str, qualifier: str) -> str:
    """
    Strip `qualifier.` from the table reference of every statement.

    Statement order and separators are preserved.

    Raises:
        RenderError: the text could not be split into statements
    """
    try:
        statements = split_sql_statements(sql_text, strip=False)
    except SQLParseError as e:
        logger.error(f"Could not tokenize generated SQL for repair: {e}")
        raise RenderError(f"Could not tokenize generated SQL: {e}") from e

    if "".join(s.text for s in statements) != sql_text:
        logger.error("Tokenized statements do not reproduce the generated SQL")
        raise RenderError("Could not tokenize generated SQL: statements do not cover the input")

    pattern = _qualifier_pattern(qualifier)
    return "".join(pattern.sub(r"\1", s.text, count=1) for s in statements)
