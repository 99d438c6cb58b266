"""
Connection models - Connection parameters handed to the generator

GeneratorConnection is the untyped bag supplied by the caller. The specialized
dialects turn it into a typed config and validate it at client construction.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..constants import CASSANDRA_DEFAULT_PORT, FIREBIRD_DEFAULT_PORT
from ..exceptions import InvalidConnectionConfig


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _require(dialect: str, values: Dict[str, Any]) -> None:
    missing = [name for name, value in values.items() if _is_blank(value)]
    if missing:
        raise InvalidConnectionConfig(dialect, missing)


def _port(dialect: str, value: Any, default: int) -> int:
    if _is_blank(value):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidConnectionConfig(dialect, message=f"Invalid port for {dialect}: {value!r}")


@dataclass
class GeneratorConnection:
    """Connection parameters as supplied by the connection settings."""
    db_name: Optional[str] = None
    db_config: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.db_config.get(key, default)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeneratorConnection":
        """
        Build from a dict.

        Accepts {"dbName": ..., "dbConfig": {...}} as well as
        {"db_name": ..., "db_config": {...}}.
        """
        db_config = data.get("db_config", data.get("dbConfig")) or {}
        if not isinstance(db_config, dict):
            raise InvalidConnectionConfig(
                "connection", message=f"db_config must be a mapping, got {type(db_config).__name__}"
            )
        return cls(
            db_name=data.get("db_name", data.get("dbName")),
            db_config=dict(db_config),
        )


@dataclass(frozen=True)
class FirebirdConfig:
    """Connection config for the firebird client."""
    host: str
    database: str
    port: int = FIREBIRD_DEFAULT_PORT
    user: Optional[str] = None
    password: Optional[str] = None
    blob_as_text: bool = True

    @classmethod
    def from_connection(cls, connection: GeneratorConnection) -> "FirebirdConfig":
        host = connection.get("host")
        _require("firebird", {"host": host, "database": connection.db_name})
        port = connection.get("port")
        return cls(
            host=host,
            database=connection.db_name,
            port=_port("firebird", port, FIREBIRD_DEFAULT_PORT),
            user=connection.get("user"),
            password=connection.get("password"),
        )


@dataclass(frozen=True)
class BigQueryConfig:
    """Connection config for the bigquery client."""
    project_id: str
    key_filename: Optional[str] = None
    api_endpoint: Optional[str] = None      # Emulator override, e.g. http://localhost:9050

    @classmethod
    def from_connection(cls, connection: GeneratorConnection) -> "BigQueryConfig":
        options = connection.get("bigQueryOptions") or connection.get("bigquery_options") or {}
        project_id = options.get("projectId", options.get("project_id"))
        _require("bigquery", {"projectId": project_id})

        host = connection.get("host")
        port = connection.get("port")
        api_endpoint = None
        if not _is_blank(host) and not _is_blank(port):
            api_endpoint = f"http://{host}:{port}"

        return cls(
            project_id=project_id,
            key_filename=options.get("keyFilename", options.get("key_filename")),
            api_endpoint=api_endpoint,
        )


@dataclass(frozen=True)
class CassandraConfig:
    """Connection config for the cassandra client."""
    contact_points: List[str]
    port: int = CASSANDRA_DEFAULT_PORT
    keyspace: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def from_connection(cls, connection: GeneratorConnection) -> "CassandraConfig":
        host = connection.get("host")
        _require("cassandra", {"host": host})
        port = connection.get("port")
        return cls(
            contact_points=[h.strip() for h in str(host).split(",") if h.strip()],
            port=_port("cassandra", port, CASSANDRA_DEFAULT_PORT),
            keyspace=connection.db_name or None,
            user=connection.get("user"),
            password=connection.get("password"),
        )
