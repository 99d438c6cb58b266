"""
SQL Splitter - Split generated DDL text into individual statements.

Handles:
- Standard semicolon-delimited statements
- Strings and comments with embedded semicolons (via sqlparse)
- Exact round-trip: with strip=False the statement texts, joined, give back
  the input, separators and whitespace included
"""

from dataclasses import dataclass
from typing import List

import sqlparse

import logging
logger = logging.getLogger(__name__)


@dataclass
class SQLStatement:
    """Represents a single SQL statement."""
    text: str           # The SQL text
    line_start: int     # Starting line number (1-based)
    line_end: int       # Ending line number (1-based)
    statement_type: str  # sqlparse type, e.g. "CREATE" or "UNKNOWN"


def split_sql_statements(sql_text: str, strip: bool = True) -> List[SQLStatement]:
    """
    Split SQL text into individual statements.

    Args:
        sql_text: Full SQL text with multiple statements
        strip: Strip surrounding whitespace and drop empty statements.
               With strip=False every character of sql_text is kept.

    Returns:
        List of SQLStatement objects

    Raises:
        sqlparse.exceptions.SQLParseError: text could not be tokenized
    """
    if not sql_text:
        return []

    statements = []
    current_line = 1

    for parsed in sqlparse.parse(sql_text):
        stmt_text = str(parsed)
        line_count = stmt_text.count('\n')

        if strip:
            leading = stmt_text[:len(stmt_text) - len(stmt_text.lstrip())]
            text = stmt_text.strip()
            if not text:
                current_line += line_count
                continue
            start = current_line + leading.count('\n')
            end = start + text.count('\n')
        else:
            text = stmt_text
            start = current_line
            end = current_line + line_count

        statements.append(SQLStatement(
            text=text,
            line_start=start,
            line_end=end,
            statement_type=parsed.get_type(),
        ))
        current_line += line_count

    if not strip and statements:
        # sqlparse drops a trailing whitespace-only statement
        tail = sql_text[sum(len(s.text) for s in statements):]
        if tail and not tail.strip():
            statements[-1].text += tail
            statements[-1].line_end += tail.count('\n')

    return statements
