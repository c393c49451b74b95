"""
===================
Result set mapping.
===================

ResultSetWrapper turns a tabular cursor into Python values through a
caller-supplied row mapper. The wrapped object only needs fetchone() and
close(), so both SQLAlchemy CursorResult objects and raw DB-API cursors work.

The cursor (and the optional parent resource, e.g. a connection opened just
for this result) is closed when mapping finishes, whether the mapper
succeeded or raised.

Example:
    >>> from execution.database_utils import execute_select
    >>> from query.factory import select
    >>>
    >>> names = execute_select(conn, select('name').from_('customers')).map_all(lambda row: row[0])
    >>> first = execute_select(conn, select().all().from_('customers').limit(1)).map_first(lambda row: row._asdict())
"""

from typing import Any, Callable, List, Optional, TypeVar

T = TypeVar('T')

RowMapper = Callable[[Any], Optional[T]]


class ResultSetWrapper:
    """Cursor wrapper with mapping helpers.

    Attributes:
        result: The wrapped cursor-like object
        parent: Optional resource closed after the result
    """

    def __init__(self, result: Any, parent: Any = None):
        self.result = result
        self.parent = parent

    def close(self) -> None:
        """Close the result, then the parent resource if there is one."""
        try:
            self.result.close()
        finally:
            if self.parent is not None:
                self.parent.close()

    def __enter__(self) -> 'ResultSetWrapper':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def map_all(self, mapper: RowMapper) -> List[Optional[T]]:
        """
        Map every remaining row and collect the results.

        Args:
            mapper: Function called with each row

        Returns:
            Mapped values in row order (None results are kept)
        """
        try:
            return [mapper(row) for row in iter(self.result.fetchone, None)]
        finally:
            self.close()

    def map_first(self, mapper: RowMapper) -> Optional[T]:
        """
        Map the first row, if any.

        Args:
            mapper: Function called with the first row

        Returns:
            The mapped value, or None if there are no rows or the mapper
            returned None
        """
        try:
            row = self.result.fetchone()
            return None if row is None else mapper(row)
        finally:
            self.close()
