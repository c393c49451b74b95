"""
===================================
Error kinds for statement building.
===================================

Every error raised by the builders derives from QueryError. Errors caused by
a bad argument (an invalid identifier, a wrong placeholder count, a negative
offset, ...) also derive from ValueError so callers may catch them either way.

All of these signal programmer errors: statement construction is
deterministic, so nothing here is retried or recovered from.

Example:
    >>> from query.errors import QueryError
    >>> from query.factory import select
    >>>
    >>> try:
    ...     select().get_sql()
    ... except QueryError as e:
    ...     print(e)
    Selected expression list is empty
"""


class QueryError(Exception):
    """Base exception for all statement building errors."""
    pass


class InvalidIdentifierError(QueryError, ValueError):
    """Raised when an identifier is empty or contains the quoting character."""
    pass


class PlaceholderMismatchError(QueryError, ValueError):
    """Raised when a fragment's '?' count differs from its argument count."""
    pass


class DuplicateColumnError(QueryError, ValueError):
    """Raised when a CREATE TABLE statement declares the same column twice."""
    pass


class NoColumnsError(QueryError):
    """Raised when a column modifier is applied before any column was added."""
    pass


class EmptyInsertError(QueryError):
    """Raised when rendering an INSERT statement with no values."""
    pass


class ConflictingModifiersError(QueryError):
    """Raised when INSERT IGNORE is combined with ON DUPLICATE KEY UPDATE."""
    pass


class EmptyUpdateError(QueryError):
    """Raised when rendering an UPDATE statement with no SET values."""
    pass


class MixedSelectionError(QueryError):
    """Raised when SELECT * is mixed with explicit selected expressions."""
    pass


class EmptySelectionError(QueryError):
    """Raised when rendering a SELECT statement that selects nothing."""
    pass


class NoOrderExpressionError(QueryError):
    """Raised when DESC is requested before an ORDER BY expression is set."""
    pass


class InvalidLimitError(QueryError, ValueError):
    """Raised when a LIMIT value is not a positive integer."""
    pass


class InvalidOffsetError(QueryError, ValueError):
    """Raised when an OFFSET value is not a non-negative integer."""
    pass


class BatchTextMismatchError(QueryError, ValueError):
    """Raised when a batch receives a statement with different SQL text.

    Batched statements must differ only in their bound parameter values.
    """
    pass
