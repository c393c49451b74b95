"""
=====================
WHERE clause support.
=====================

Conditions are kept in a small value object embedded in each statement that
supports filtering. ConditionalQuery layers the chainable where_* methods on
top of it; every method returns the statement it was called on, so chains
keep their concrete type (Update, Delete, Select).

All conditions are joined with AND and each one is parenthesized:

    WHERE (`c` = ?) AND (`d` = ? * 5)

Example:
    >>> from query.factory import delete_from
    >>>
    >>> delete_from('sessions').where('user_id', 7).where_null('revoked_at').get_sql()
    'DELETE FROM `sessions` WHERE (`user_id` = ?) AND (`revoked_at` IS NULL) ;'
"""

from typing import Any, Iterator, List, TypeVar

from query.expression import Expression
from query.statement import AbstractQuery, collect_params
from query.validation import quote_identifier, validate_identifier

ConditionalT = TypeVar('ConditionalT', bound='ConditionalQuery')


class Conditions:
    """Ordered list of WHERE conditions."""

    def __init__(self):
        self._items: List[Expression] = []

    def add(self, expression: Expression) -> None:
        self._items.append(expression)

    def render(self) -> str:
        """
        Render the WHERE clause.

        Returns:
            Empty string without conditions, otherwise
            'WHERE (c1) AND (c2) ... ' with a single trailing space
        """
        if not self._items:
            return ''

        joined = ' AND '.join(f'({condition.expr})' for condition in self._items)
        return f'WHERE {joined} '

    def params(self) -> List[Any]:
        return collect_params(self._items)

    def __iter__(self) -> Iterator[Expression]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class ConditionalQuery(AbstractQuery):
    """Base for statements with a WHERE clause.

    Subclasses must call super().__init__() and place
    self._conditions.render() in their text and self._conditions.params()
    in their parameters.
    """

    def __init__(self):
        self._conditions = Conditions()

    def where(self: ConditionalT, column: str, value: Any) -> ConditionalT:
        """
        Add a condition checking that a column equals a value.

        Args:
            column: Column name
            value: Value bound to the condition's placeholder

        Returns:
            This statement
        """
        validate_identifier(column)
        return self.where_expr(f'{quote_identifier(column)} = ?', value)

    def where_expr(self: ConditionalT, expr: str, *params: Any) -> ConditionalT:
        """
        Add an arbitrary SQL condition, like '`total` / 100 > ?'.

        Args:
            expr: SQL condition with '?' placeholders
            *params: Values for the placeholders

        Returns:
            This statement

        Raises:
            PlaceholderMismatchError: If the placeholder count is wrong
        """
        self._conditions.add(Expression(expr, params))
        return self

    def where_null(self: ConditionalT, column: str) -> ConditionalT:
        """Add a condition checking that a column is NULL."""
        validate_identifier(column)
        return self.where_expr(f'{quote_identifier(column)} IS NULL')

    def where_nullable(self: ConditionalT, column: str, value: Any) -> ConditionalT:
        """Add where_null(column) if value is None, else where(column, value)."""
        if value is None:
            return self.where_null(column)
        return self.where(column, value)
