"""
Schema model - Dialect-neutral table description
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..constants import AUTOINCREMENT


@dataclass
class SchemaItem:
    """One column of a table to generate."""
    column_name: str
    data_type: str                          # Raw type token, or the AUTOINCREMENT sentinel
    nullable: bool = False
    primary_key: bool = False
    unsigned: bool = False
    default_value: Optional[str] = None     # Raw SQL fragment, spliced verbatim
    comment: Optional[str] = None

    @property
    def is_autoincrement(self) -> bool:
        return self.data_type == AUTOINCREMENT

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SchemaItem":
        """Build from a dict using either camelCase or snake_case keys."""
        def pick(*keys, default=None):
            for key in keys:
                if key in data:
                    return data[key]
            return default

        return cls(
            column_name=pick("column_name", "columnName"),
            data_type=pick("data_type", "dataType"),
            nullable=bool(pick("nullable", default=False)),
            primary_key=bool(pick("primary_key", "primaryKey", default=False)),
            unsigned=bool(pick("unsigned", default=False)),
            default_value=pick("default_value", "defaultValue"),
            comment=pick("comment"),
        )


@dataclass
class Schema:
    """A table: name, optional namespace and ordered columns."""
    name: str
    columns: List[SchemaItem] = field(default_factory=list)
    schema: Optional[str] = None            # Namespace qualifier (schema / dataset / keyspace)

    @property
    def primary_columns(self) -> List[SchemaItem]:
        return [c for c in self.columns if c.primary_key]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Schema":
        return cls(
            name=data.get("name"),
            schema=data.get("schema"),
            columns=[
                c if isinstance(c, SchemaItem) else SchemaItem.from_dict(c)
                for c in data.get("columns", [])
            ],
        )
