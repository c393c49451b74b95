"""
==================
Batched execution.
==================

BatchBuilder collects statements that share the exact same SQL text and
differ only in their bound values, then runs every parameter set against
that one statement text. Statements are rendered as they are added, so later
changes to a builder do not affect the batch.

Example:
    >>> from execution.batch import BatchBuilder
    >>> from query.factory import insert_into
    >>>
    >>> batch = BatchBuilder()
    >>> for name, qty in [('bolt', 10), ('nut', 25)]:
    ...     batch.add(insert_into('items').value('name', name).value('qty', qty))
    >>> counts = batch.execute_with(engine)   # [1, 1]
"""

import logging
from typing import Iterable, List, Optional

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from execution.database_utils import execute_statement
from query.errors import BatchTextMismatchError
from query.statement import AbstractQuery, Raw

logger = logging.getLogger(__name__)


class BatchBuilder:
    """Collects same-text statements for batched execution.

    Args:
        queries: Optional statements to add right away
    """

    def __init__(self, queries: Iterable[AbstractQuery] = ()):
        self._queries: List[Raw] = []

        for query in queries:
            self.add(query)

    def add(self, query: AbstractQuery) -> 'BatchBuilder':
        """
        Add a statement to the batch.

        Args:
            query: Statement to add

        Returns:
            This builder

        Raises:
            BatchTextMismatchError: If the SQL text differs from the first statement
        """
        raw = Raw(query.get_sql(), query.get_params())

        if self._queries and raw.get_sql() != self.sql:
            raise BatchTextMismatchError(
                f"Can't add a query '{raw.get_sql()}' to a batch. Expected the query to be '{self.sql}'"
            )

        self._queries.append(raw)
        return self

    @property
    def sql(self) -> Optional[str]:
        """SQL text shared by every statement, or None for an empty batch."""
        return self._queries[0].get_sql() if self._queries else None

    def __len__(self) -> int:
        return len(self._queries)

    def execute(self, connection: Connection) -> List[int]:
        """
        Execute every parameter set on the given connection.

        Transaction handling is left to the caller.

        Args:
            connection: SQLAlchemy connection

        Returns:
            Affected row count per statement, in the order they were added
        """
        if not self._queries:
            return []

        sql = self.sql
        logger.info(f"Executing batch of {len(self._queries)} statement(s)")
        logger.debug(f"Batch SQL: {sql}")

        counts = []
        for query in self._queries:
            result = execute_statement(connection, sql, query.get_params())
            try:
                counts.append(result.rowcount)
            finally:
                result.close()

        return counts

    def execute_with(self, engine: Engine) -> List[int]:
        """
        Execute the batch in its own transaction.

        Opens a connection from the engine, executes, commits and closes the
        connection. The transaction is rolled back if any statement fails.
        """
        if not self._queries:
            return []

        try:
            with engine.begin() as connection:
                return self.execute(connection)
        except SQLAlchemyError as e:
            logger.error(f"Batch of {len(self._queries)} statement(s) rolled back: {e}")
            raise
