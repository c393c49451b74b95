"""
=======================================
Statement execution through SQLAlchemy.
=======================================

Thin execution boundary between the statement builders and a database.
Statements are handed over as (sql, params) and bound positionally with
Connection.exec_driver_sql. The builders render qmark ('?') placeholders;
for drivers using the format/pyformat paramstyles (pymysql, mysqlclient)
the text is rewritten to '%s' placeholders first.

Functions:
    create_sqlalchemy_engine: Engine from core.config defaults
    to_driver_sql: Rewrite '?' placeholders for a driver paramstyle
    execute_statement: Run (sql, params) on a connection
    execute_update: Run a statement and return the affected row count
    execute_insert: Run an INSERT and return the generated key
    execute_select: Run a SELECT and wrap its cursor for mapping

Example:
    >>> from execution.database_utils import create_sqlalchemy_engine, execute_update
    >>> from query.factory import update
    >>>
    >>> engine = create_sqlalchemy_engine()
    >>> with engine.begin() as conn:
    ...     count = execute_update(conn, update('customers').value('status', 'vip').where('id', 7))
"""

import logging
from typing import Any, Optional, Sequence

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, CursorResult, Engine, make_url

from core.config import config
from execution.result_set import ResultSetWrapper
from query.statement import AbstractQuery

logger = logging.getLogger(__name__)

FORMAT_PARAMSTYLES = frozenset({'format', 'pyformat'})


def create_sqlalchemy_engine(
    url: Optional[str] = None,
    echo: Optional[bool] = None,
    pool_size: int = 5,
    max_overflow: int = 10
) -> Engine:
    """
    Create a SQLAlchemy engine.

    Args:
        url: Database URL (defaults to config.database_url)
        echo: Enable SQL statement logging (defaults to config.echo_sql)
        pool_size: Connection pool size (ignored for SQLite)
        max_overflow: Maximum overflow connections (ignored for SQLite)

    Returns:
        Configured SQLAlchemy Engine
    """
    url = url or config.database_url
    echo = config.echo_sql if echo is None else echo
    parsed_url = make_url(url)

    engine_kwargs = {'echo': echo, 'pool_pre_ping': True}

    # SQLite uses single-connection pools that reject sizing arguments
    if parsed_url.get_backend_name() != 'sqlite':
        engine_kwargs.update(pool_size=pool_size, max_overflow=max_overflow)

    logger.debug(f"Creating engine for {parsed_url.render_as_string(hide_password=True)}")
    return create_engine(url, **engine_kwargs)


def to_driver_sql(sql: str, paramstyle: str) -> str:
    """
    Rewrite rendered SQL for the driver's paramstyle.

    Every '?' is a placeholder (the builders count them the same way).
    For format/pyformat drivers each '?' becomes '%s' and literal '%'
    characters are doubled; other paramstyles get the text unchanged.

    Args:
        sql: SQL text with '?' placeholders
        paramstyle: DB-API paramstyle of the driver

    Returns:
        SQL text the driver can bind positionally

    Example:
        >>> to_driver_sql("SELECT * FROM `t` WHERE `a` = ? AND `b` LIKE '10%';", 'format')
        "SELECT * FROM `t` WHERE `a` = %s AND `b` LIKE '10%%';"
    """
    if paramstyle not in FORMAT_PARAMSTYLES:
        return sql
    return sql.replace('%', '%%').replace('?', '%s')


def execute_statement(connection: Connection, sql: str, params: Sequence[Any]) -> CursorResult:
    """
    Execute rendered SQL with positional parameters.

    Args:
        connection: SQLAlchemy connection
        sql: SQL text with '?' placeholders
        params: Placeholder values in order

    Returns:
        The driver result; the caller closes it
    """
    driver_sql = to_driver_sql(sql, connection.dialect.paramstyle)
    return connection.exec_driver_sql(driver_sql, tuple(params))


def _run(connection: Connection, query: AbstractQuery) -> CursorResult:
    sql, params = query.as_tuple()
    logger.debug(f"Executing: {sql} with {len(params)} parameter(s)")
    return execute_statement(connection, sql, params)


def execute_update(connection: Connection, query: AbstractQuery) -> int:
    """
    Execute a statement that returns no rows.

    Args:
        connection: SQLAlchemy connection
        query: Statement to execute

    Returns:
        Number of affected rows as reported by the driver
    """
    result = _run(connection, query)
    try:
        return result.rowcount
    finally:
        result.close()


def execute_insert(connection: Connection, query: AbstractQuery) -> Optional[int]:
    """
    Execute an INSERT statement.

    Returns:
        The generated key of the inserted row (driver lastrowid), or None
    """
    result = _run(connection, query)
    try:
        return result.lastrowid
    finally:
        result.close()


def execute_select(connection: Connection, query: AbstractQuery) -> ResultSetWrapper:
    """
    Execute a statement that returns rows.

    Returns:
        ResultSetWrapper over the open cursor; map_all/map_first close it
    """
    return ResultSetWrapper(_run(connection, query))
