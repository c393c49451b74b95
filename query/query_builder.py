"""
=====================
SELECT query builder.
=====================

Select accumulates the selected expression list, the source table, WHERE
conditions, a single ORDER BY term, LIMIT/OFFSET and the FOR UPDATE lock,
and renders them in this fixed order:

    SELECT <list> [FROM <table>] [WHERE ...] [ORDER BY (<term>) ASC|DESC]
    [LIMIT n] [OFFSET n] [FOR UPDATE];

Parameters follow the same left-to-right order: selected expressions, then
WHERE conditions, then the ORDER BY term. LIMIT and OFFSET are validated
integers and are inlined as literals.

Usage:
    from query.factory import select

    # Page through active customers
    sql, params = (
        select('id', 'name')
        .expr('COALESCE(`nickname`, ?) AS `display`', 'anonymous')
        .from_('crm', 'customers')
        .where('status', 'active')
        .order_by('created_at').desc()
        .limit(50)
        .offset(100)
        .as_tuple()
    )

    # Lock a row for update
    sql, params = select().all().from_('accounts').where('id', 7).for_update().as_tuple()
"""

from typing import Any, List, Optional

from query.conditional import ConditionalQuery
from query.errors import (
    EmptySelectionError,
    InvalidLimitError,
    InvalidOffsetError,
    MixedSelectionError,
    NoOrderExpressionError,
)
from query.expression import Expression
from query.statement import collect_params
from query.validation import qualify_table, quote_identifier, validate_identifier


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Select(ConditionalQuery):
    """A SELECT statement.

    Either all() is called (SELECT *) or at least one expression is added
    with col()/expr(); mixing the two raises MixedSelectionError.
    """

    def __init__(self):
        super().__init__()
        self._all = False
        self._expressions: List[Expression] = []

        self.database: Optional[str] = None
        self.table: Optional[str] = None

        self._order_by: Optional[Expression] = None
        self._desc = False

        self._limit: Optional[int] = None
        self._offset: Optional[int] = None

        self._for_update = False

    def all(self) -> 'Select':
        """
        Select every column (SELECT *).

        Raises:
            MixedSelectionError: If expressions were already added
        """
        if self._expressions:
            raise MixedSelectionError("Some columns were added")

        self._all = True
        return self

    def col(self, name: str) -> 'Select':
        """Add a column to the selected expression list."""
        validate_identifier(name)
        return self.expr(quote_identifier(name))

    def expr(self, expr: str, *params: Any) -> 'Select':
        """
        Add an SQL expression to the selected expression list.

        Args:
            expr: SQL expression with '?' placeholders
            *params: Values for the placeholders

        Returns:
            This statement

        Raises:
            PlaceholderMismatchError: If the placeholder count is wrong
            MixedSelectionError: If all() was called
        """
        expression = Expression(expr, params)

        if self._all:
            raise MixedSelectionError("Can't add expressions to SELECT when selecting all columns")

        self._expressions.append(expression)
        return self

    def from_(self, database_or_table: str, table: Optional[str] = None) -> 'Select':
        """
        Set the table to select from.

        Called as from_(table) or from_(database, table).

        Returns:
            This statement
        """
        if table is None:
            database, table = None, database_or_table
        else:
            database = database_or_table
            validate_identifier(database)

        validate_identifier(table)
        self.database = database
        self.table = table
        return self

    def order_by(self, column: str) -> 'Select':
        """Order by a column. Replaces any previous ordering."""
        validate_identifier(column)
        return self.order_by_expr(quote_identifier(column))

    def order_by_expr(self, expr: str, *params: Any) -> 'Select':
        """Order by an SQL expression. Replaces any previous ordering."""
        self._order_by = Expression(expr, params)
        return self

    def desc(self) -> 'Select':
        """
        Sort in descending order.

        Raises:
            NoOrderExpressionError: If no ORDER BY term was set
        """
        if self._order_by is None:
            raise NoOrderExpressionError("Specify order expression first")

        self._desc = True
        return self

    def limit(self, limit: int) -> 'Select':
        """
        Add a LIMIT clause.

        Raises:
            InvalidLimitError: If limit is not an integer >= 1
        """
        if not _is_int(limit) or limit < 1:
            raise InvalidLimitError(f"Limit must be a positive integer, got {limit!r}")

        self._limit = limit
        return self

    def offset(self, offset: int) -> 'Select':
        """
        Add an OFFSET clause.

        Raises:
            InvalidOffsetError: If offset is not an integer >= 0
        """
        if not _is_int(offset) or offset < 0:
            raise InvalidOffsetError(f"Offset must be a non-negative integer, got {offset!r}")

        self._offset = offset
        return self

    def for_update(self) -> 'Select':
        """Lock the selected rows (FOR UPDATE)."""
        self._for_update = True
        return self

    def get_sql(self) -> str:
        if not self._all and not self._expressions:
            raise EmptySelectionError("Selected expression list is empty")

        if self._all:
            sql = "SELECT * "
        else:
            sql = f"SELECT {', '.join(e.expr for e in self._expressions)} "

        if self.table is not None:
            sql += f"FROM {qualify_table(self.table, self.database)} "

        sql += self._conditions.render()

        if self._order_by is not None:
            sql += f"ORDER BY ({self._order_by.expr}) {'DESC' if self._desc else 'ASC'} "

        if self._limit is not None:
            sql += f"LIMIT {self._limit} "

        if self._offset is not None:
            sql += f"OFFSET {self._offset} "

        if self._for_update:
            sql += "FOR UPDATE"

        return sql.rstrip() + ";"

    def get_params(self) -> List[Any]:
        params = collect_params(self._expressions) + self._conditions.params()

        if self._order_by is not None:
            params.extend(self._order_by.params)

        return params
