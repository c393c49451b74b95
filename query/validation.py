"""
======================================
Identifier and placeholder validation.
======================================

Pure helpers shared by every statement type. Identifiers are quoted with
backticks (MySQL convention), so an identifier may contain anything except
the backtick itself. Bound values are always passed positionally through
'?' placeholders.

Functions:
    validate_identifier: Reject empty identifiers and identifiers with '`'
    count_placeholders: Count '?' markers in an SQL fragment
    validate_placeholder_count: Check a fragment against its arguments
    quote_identifier: Wrap an identifier in backticks
    qualify_table: Render an optionally database-qualified table name

Example:
    >>> from query.validation import qualify_table, validate_identifier
    >>>
    >>> validate_identifier('customers')
    >>> qualify_table('customers', database='shop')
    '`shop`.`customers`'
"""

from typing import Any, Optional, Sequence

from query.errors import InvalidIdentifierError, PlaceholderMismatchError

QUOTE_CHAR = "`"
PLACEHOLDER = "?"


def validate_identifier(name: str) -> None:
    """
    Validate a table, database or column name.

    Args:
        name: Identifier to check

    Raises:
        InvalidIdentifierError: If name is not a string, is empty or
            contains the quoting character
    """
    if not isinstance(name, str):
        raise InvalidIdentifierError(f"Identifier must be a string, got {type(name).__name__}")

    if not name:
        raise InvalidIdentifierError("An empty string can't be an identifier")

    if QUOTE_CHAR in name:
        raise InvalidIdentifierError(f'Invalid identifier "{name}"')


def count_placeholders(expr: str) -> int:
    """
    Count placeholder markers in an SQL fragment.

    Every '?' counts, including ones inside string literals.

    Args:
        expr: SQL fragment

    Returns:
        Number of '?' characters in expr
    """
    return expr.count(PLACEHOLDER)


def validate_placeholder_count(expr: str, params: Sequence[Any]) -> None:
    """
    Validate that a fragment has exactly one placeholder per argument.

    Args:
        expr: SQL fragment
        params: Arguments that will be bound to the fragment's placeholders

    Raises:
        PlaceholderMismatchError: If the counts differ
    """
    if not isinstance(expr, str):
        raise PlaceholderMismatchError(f"Expression must be a string, got {type(expr).__name__}")

    count = count_placeholders(expr)

    if count != len(params):
        raise PlaceholderMismatchError(
            f'Expected {len(params)} placeholders, got {count} in expression "{expr}"'
        )


def quote_identifier(name: str) -> str:
    """
    Quote an identifier with backticks.

    The identifier is expected to be validated already.

    Examples:
        >>> quote_identifier('order')
        '`order`'
    """
    return f"{QUOTE_CHAR}{name}{QUOTE_CHAR}"


def qualify_table(table: str, database: Optional[str] = None) -> str:
    """
    Create a table reference with an optional database prefix.

    Args:
        table: Table name
        database: Optional database name

    Returns:
        Quoted table reference

    Examples:
        >>> qualify_table('t')
        '`t`'
        >>> qualify_table('t', database='db')
        '`db`.`t`'
    """
    if database is not None:
        return f"{quote_identifier(database)}.{quote_identifier(table)}"
    return quote_identifier(table)
