"""
==========================================
Data Manipulation Language (DML) builders.
==========================================

Builders for INSERT, UPDATE and DELETE statements. Column values are kept in
insertion-ordered dicts: setting the same column twice overwrites the value
in place, and the rendered column order (and therefore parameter order) is
the order in which columns were first set.

Classes:
    Insert: INSERT [IGNORE] ... [ON DUPLICATE KEY UPDATE ...]
    Update: UPDATE ... SET ... [WHERE ...]
    Delete: DELETE FROM ... [WHERE ...]

Usage:
    from query.factory import insert_into, update, delete_from

    # Upsert keyed on 'id'
    insert_sql, params = (
        insert_into('customers')
        .value('id', 42)
        .value('name', 'Ada')
        .value_expr('visits', 'visits + ?', 1)
        .on_duplicate_key_update_except('id')
        .as_tuple()
    )

    # Soft delete
    update_sql, params = (
        update('customers')
        .value('is_deleted', True)
        .value_expr('updated_at', 'CURRENT_TIMESTAMP')
        .where('id', 42)
        .as_tuple()
    )
"""

from typing import Any, Dict, List, Optional, TypeVar

from query.conditional import ConditionalQuery
from query.errors import ConflictingModifiersError, EmptyInsertError, EmptyUpdateError
from query.expression import Expression
from query.statement import AbstractQuery, collect_params
from query.validation import qualify_table, quote_identifier, validate_identifier

ValuesT = TypeVar('ValuesT', bound='ColumnValuesMixin')


class ColumnValuesMixin:
    """Chainable value*() methods shared by Insert and Update.

    Writes into self._values, an insertion-ordered dict of column name to
    Expression that the host class creates.
    """

    _values: Dict[str, Expression]

    def value(self: ValuesT, column: str, value: Any) -> ValuesT:
        """
        Set a column to a bound value.

        Args:
            column: Column name
            value: Value bound to a '?' placeholder

        Returns:
            This statement
        """
        return self.value_expr(column, '?', value)

    def value_expr(self: ValuesT, column: str, expr: str, *params: Any) -> ValuesT:
        """
        Set a column to an SQL expression, like 'visits + ?'.

        Args:
            column: Column name
            expr: SQL expression with '?' placeholders
            *params: Values for the placeholders

        Returns:
            This statement

        Raises:
            InvalidIdentifierError: If column is not a valid identifier
            PlaceholderMismatchError: If the placeholder count is wrong
        """
        validate_identifier(column)
        self._values[column] = Expression(expr, params)
        return self

    def value_null(self: ValuesT, column: str) -> ValuesT:
        """Set a column to NULL."""
        return self.value_expr(column, 'NULL')

    def value_nullable(self: ValuesT, column: str, value: Any) -> ValuesT:
        """Set a column to NULL if value is None, otherwise to the bound value."""
        if value is None:
            return self.value_null(column)
        return self.value(column, value)


def _assignments(values: Dict[str, Expression]) -> str:
    return ', '.join(f'{quote_identifier(column)} = {e.expr}' for column, e in values.items())


class Insert(ColumnValuesMixin, AbstractQuery):
    """An INSERT statement with optional IGNORE or upsert clause."""

    def __init__(self, database: Optional[str], table: str):
        self.database = database
        self.table = table
        self._ignore = False
        self._values: Dict[str, Expression] = {}
        self._update: Dict[str, Expression] = {}

    def ignore(self) -> 'Insert':
        """Add the IGNORE modifier."""
        self._ignore = True
        return self

    def on_duplicate_key_update_except(self, *keys: str) -> 'Insert':
        """
        Add ON DUPLICATE KEY UPDATE for every value set so far except keys.

        Replaces any previously derived update clause. Values set after this
        call are not included until it is called again.

        Args:
            *keys: Key columns that must not be updated

        Returns:
            This statement
        """
        excluded = set(keys)
        self._update = {
            column: expression
            for column, expression in self._values.items()
            if column not in excluded
        }
        return self

    def get_sql(self) -> str:
        if not self._values:
            raise EmptyInsertError("No values specified")

        if self._ignore and self._update:
            raise ConflictingModifiersError("Can't use IGNORE with ON DUPLICATE KEY UPDATE")

        keyword = 'INSERT IGNORE' if self._ignore else 'INSERT'
        columns = ', '.join(quote_identifier(column) for column in self._values)
        values = ', '.join(e.expr for e in self._values.values())

        sql = f'{keyword} INTO {qualify_table(self.table, self.database)} ({columns}) VALUES ({values})'

        if self._update:
            sql += f' ON DUPLICATE KEY UPDATE {_assignments(self._update)}'

        return sql + ';'

    def get_params(self) -> List[Any]:
        return collect_params(self._values.values()) + collect_params(self._update.values())


class Update(ColumnValuesMixin, ConditionalQuery):
    """An UPDATE statement."""

    def __init__(self, database: Optional[str], table: str):
        super().__init__()
        self.database = database
        self.table = table
        self._values: Dict[str, Expression] = {}

    def get_sql(self) -> str:
        if not self._values:
            raise EmptyUpdateError("No values specified")

        return (
            f'UPDATE {qualify_table(self.table, self.database)} '
            f'SET {_assignments(self._values)} '
            f'{self._conditions.render()};'
        )

    def get_params(self) -> List[Any]:
        return collect_params(self._values.values()) + self._conditions.params()


class Delete(ConditionalQuery):
    """A DELETE statement. Renders even without conditions."""

    def __init__(self, database: Optional[str], table: str):
        super().__init__()
        self.database = database
        self.table = table

    def get_sql(self) -> str:
        return f'DELETE FROM {qualify_table(self.table, self.database)} {self._conditions.render()};'

    def get_params(self) -> List[Any]:
        return self._conditions.params()
