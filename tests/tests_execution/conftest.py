"""
Shared fixtures for execution tests.

Key fixtures:
- engine: in-memory SQLite engine built through create_sqlalchemy_engine.
- items_table: engine with an empty `items` table created by the CREATE TABLE builder.
- connection: open transaction on items_table, rolled back after the test.
"""

import pytest

from execution.database_utils import create_sqlalchemy_engine, execute_update
from query.factory import create_table


@pytest.fixture
def engine():
    """In-memory SQLite engine; one pooled connection keeps the data alive."""
    engine = create_sqlalchemy_engine('sqlite://', echo=False)
    yield engine
    engine.dispose()


@pytest.fixture
def items_table(engine):
    """Create the `items` table used by the execution tests."""
    ddl = (
        create_table('items')
        .col('id', 'INTEGER').primary_key()
        .varchar('name', 32).not_null()
        .integer('qty')
    )

    with engine.begin() as conn:
        execute_update(conn, ddl)

    return engine


@pytest.fixture
def connection(items_table):
    """Open a transaction that is rolled back after the test."""
    with items_table.connect() as conn:
        yield conn
        conn.rollback()
