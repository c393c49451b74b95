"""
===============================
Statement factory entry points.
===============================

The only place where table and database names are validated: every
statement class may assume it was constructed with valid identifiers.
Functions taking a table accept either (table) or (database, table).

Functions:
    create_table: CREATE TABLE statement
    insert_into: INSERT statement
    update: UPDATE statement
    delete_from: DELETE statement
    select: SELECT statement with an optional initial column list
    raw: Statement from arbitrary SQL text and arguments

The Query class exposes the same functions as static methods for callers
that prefer a single entry point (Query.select(...)).

Example:
    >>> from query.factory import Query
    >>>
    >>> Query.select('a', 'b').from_('t').where('c', 'lol').limit(10).get_sql()
    'SELECT `a`, `b` FROM `t` WHERE (`c` = ?) LIMIT 10;'
"""

from typing import Any, Optional, Tuple

from query.ddl import CreateTable
from query.dml import Delete, Insert, Update
from query.query_builder import Select
from query.statement import AbstractQuery, Raw
from query.validation import validate_identifier, validate_placeholder_count


def _table_ref(first: str, second: Optional[str]) -> Tuple[Optional[str], str]:
    """Resolve (table) or (database, table) arguments and validate them."""
    if second is None:
        database, table = None, first
    else:
        database, table = first, second
        validate_identifier(database)

    validate_identifier(table)
    return database, table


def create_table(database_or_table: str, table: Optional[str] = None) -> CreateTable:
    """
    Start a CREATE TABLE statement.

    Args:
        database_or_table: Table name, or database name when table is given
        table: Table name when a database is given

    Returns:
        CreateTable statement

    Raises:
        InvalidIdentifierError: If a name is not a valid identifier
    """
    return CreateTable(*_table_ref(database_or_table, table))


def insert_into(database_or_table: str, table: Optional[str] = None) -> Insert:
    """Start an INSERT statement. See create_table for the arguments."""
    return Insert(*_table_ref(database_or_table, table))


def update(database_or_table: str, table: Optional[str] = None) -> Update:
    """Start an UPDATE statement. See create_table for the arguments."""
    return Update(*_table_ref(database_or_table, table))


def delete_from(database_or_table: str, table: Optional[str] = None) -> Delete:
    """Start a DELETE statement. See create_table for the arguments."""
    return Delete(*_table_ref(database_or_table, table))


def select(*columns: str) -> Select:
    """
    Start a SELECT statement.

    Args:
        *columns: Column names to select, may be empty

    Returns:
        Select statement with the columns already added
    """
    query = Select()

    for column in columns:
        query.col(column)

    return query


def raw(sql: str, *params: Any) -> AbstractQuery:
    """
    Wrap arbitrary SQL text as a statement.

    Args:
        sql: SQL text with '?' placeholders
        *params: Values for the placeholders

    Returns:
        Raw statement

    Raises:
        PlaceholderMismatchError: If the placeholder count is wrong
    """
    validate_placeholder_count(sql, params)
    return Raw(sql, params)


class Query:
    """Namespace exposing the factory functions as static methods."""

    create_table = staticmethod(create_table)
    insert_into = staticmethod(insert_into)
    update = staticmethod(update)
    delete_from = staticmethod(delete_from)
    select = staticmethod(select)
    raw = staticmethod(raw)
    of = staticmethod(raw)
