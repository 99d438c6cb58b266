"""
Unit tests for the specialized clients and their connection configs.
"""
import pytest

from schemaforge.clients import (
    BigQueryClient,
    CassandraClient,
    FirebirdClient,
    create_client,
)
from schemaforge.dialects import Dialect
from schemaforge.exceptions import InvalidConnectionConfig, UnsupportedDialect
from schemaforge.models import GeneratorConnection


class TestFirebirdClient:
    """Firebird connection config."""

    def test_from_connection(self, firebird_connection):
        client = create_client(Dialect.FIREBIRD, firebird_connection)

        assert isinstance(client, FirebirdClient)
        assert client.config.host == "localhost"
        assert client.config.port == 3050
        assert client.config.database == "MYDB"
        assert client.config.user == "SYSDBA"
        assert client.config.password == "masterkey"
        assert client.config.blob_as_text is True
        assert client.default_namespace == "MYDB"

    def test_missing_fields(self):
        with pytest.raises(InvalidConnectionConfig) as exc_info:
            create_client(Dialect.FIREBIRD, GeneratorConnection(db_config={"host": " "}))
        assert exc_info.value.missing == ["host", "database"]

    def test_invalid_port(self):
        connection = GeneratorConnection(db_name="MYDB", db_config={"host": "h", "port": "abc"})
        with pytest.raises(InvalidConnectionConfig, match="Invalid port"):
            create_client(Dialect.FIREBIRD, connection)

    def test_no_connection(self):
        with pytest.raises(InvalidConnectionConfig):
            create_client(Dialect.FIREBIRD, None)


class TestBigQueryClient:
    """API endpoint override and project config."""

    def test_emulator_endpoint(self, bigquery_connection):
        client = create_client(Dialect.BIGQUERY, bigquery_connection)

        assert isinstance(client, BigQueryClient)
        assert client.api_endpoint == "http://localhost:9050"
        assert client.config.project_id == "test-project"
        assert client.config.key_filename == "/tmp/key.json"

    @pytest.mark.parametrize("host,port", [("", ""), ("localhost", ""), ("", "9050"), (None, None)])
    def test_no_endpoint_without_host_and_port(self, host, port):
        connection = GeneratorConnection(db_config={
            "host": host,
            "port": port,
            "bigQueryOptions": {"projectId": "p"},
        })
        assert create_client(Dialect.BIGQUERY, connection).api_endpoint is None

    def test_snake_case_options(self):
        connection = GeneratorConnection(db_config={"bigquery_options": {"project_id": "p"}})
        assert create_client(Dialect.BIGQUERY, connection).config.project_id == "p"

    def test_missing_project(self):
        with pytest.raises(InvalidConnectionConfig) as exc_info:
            create_client(Dialect.BIGQUERY, GeneratorConnection(db_config={"host": "localhost"}))
        assert exc_info.value.missing == ["projectId"]


class TestCassandraClient:
    """Contact points and keyspace."""

    def test_from_connection(self, cassandra_connection):
        client = create_client(Dialect.CASSANDRA, cassandra_connection)

        assert isinstance(client, CassandraClient)
        assert client.config.contact_points == ["10.0.0.1", "10.0.0.2"]
        assert client.config.port == 9042
        assert client.default_namespace == "ks"

    def test_missing_host(self):
        with pytest.raises(InvalidConnectionConfig):
            create_client(Dialect.CASSANDRA, GeneratorConnection(db_name="ks"))


class TestCreateClient:
    """Dispatch."""

    def test_generic_dialect_has_no_client(self, firebird_connection):
        with pytest.raises(UnsupportedDialect):
            create_client(Dialect.MYSQL, firebird_connection)


class TestGeneratorConnection:
    """Connection bag parsing."""

    def test_camel_case(self):
        connection = GeneratorConnection.from_dict({"dbName": "D", "dbConfig": {"host": "h"}})
        assert connection.db_name == "D"
        assert connection.get("host") == "h"

    def test_snake_case(self):
        connection = GeneratorConnection.from_dict({"db_name": "D", "db_config": {"port": 1}})
        assert connection.db_name == "D"
        assert connection.get("port") == 1

    def test_db_config_must_be_mapping(self):
        with pytest.raises(InvalidConnectionConfig):
            GeneratorConnection.from_dict({"dbConfig": ["host"]})
