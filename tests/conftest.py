"""
Pytest configuration and fixtures for SchemaForge tests.
"""
import pytest

from schemaforge import AUTOINCREMENT, GeneratorConnection, Schema, SchemaItem


@pytest.fixture
def firebird_connection():
    """Firebird connection with database name MYDB."""
    return GeneratorConnection(
        db_name="MYDB",
        db_config={"host": "localhost", "port": 3050, "user": "SYSDBA", "password": "masterkey"},
    )


@pytest.fixture
def bigquery_connection():
    """BigQuery connection pointing at a local emulator."""
    return GeneratorConnection(
        db_name="analytics",
        db_config={
            "host": "localhost",
            "port": "9050",
            "bigQueryOptions": {"projectId": "test-project", "keyFilename": "/tmp/key.json"},
        },
    )


@pytest.fixture
def cassandra_connection():
    """Cassandra connection on two contact points, keyspace ks."""
    return GeneratorConnection(db_name="ks", db_config={"host": "10.0.0.1, 10.0.0.2"})


@pytest.fixture
def specialized_connections(firebird_connection, bigquery_connection, cassandra_connection):
    """Valid connection for each specialized dialect."""
    return {
        "firebird": firebird_connection,
        "bigquery": bigquery_connection,
        "cassandra": cassandra_connection,
    }


@pytest.fixture
def mixed_primary_schema():
    """One autoincrement primary column plus one ordinary primary column."""
    return Schema(
        name="users",
        columns=[
            SchemaItem("id", AUTOINCREMENT, primary_key=True),
            SchemaItem("code", "varchar(10)", primary_key=True),
            SchemaItem("email", "varchar(255)", nullable=True),
        ],
    )
